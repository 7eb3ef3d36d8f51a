# hebrew_pattern_tool/core/domain/exceptions.py

"""Exception types raised by the search core"""


class HebrewPatternError(Exception):
    """Base class for errors raised by the Hebrew pattern tool"""


class LoadError(HebrewPatternError):
    """A word source could not be loaded

    Raised when a fetch returns a non-2xx status, the network or file read
    fails, or a custom source has neither pasted text nor a URL.
    """

    def __init__(self, source_key: str, message: str, status: int | None = None) -> None:
        self.source_key = source_key
        self.message = message
        self.status = status
        super().__init__(f"{source_key}: {message}")


class SearchValidationError(HebrewPatternError):
    """A caller-level precondition was violated before a run started"""
