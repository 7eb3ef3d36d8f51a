# tests/fixtures/wordlists.py

"""Shared word list fakes and builders for tests"""

# Local imports
from hebrew_pattern_tool.core.domain.exceptions import LoadError


class FakeFetcher:
    """In-memory stand-in for TextFetcher

    Texts are looked up by location first, then by source key. Keys listed
    in failures raise LoadError with the given HTTP status, as a real fetch
    of a non-2xx response would.
    """

    def __init__(
        self, texts: dict[str, str] | None = None, failures: dict[str, int] | None = None
    ) -> None:
        self.texts = texts or {}
        self.failures = failures or {}
        self.calls: list[tuple[str, str]] = []

    async def fetch_text(self, location: str, source_key: str) -> str:
        self.calls.append((location, source_key))
        if source_key in self.failures:
            status = self.failures[source_key]
            raise LoadError(source_key, f"loading failed: HTTP {status}", status=status)
        if location in self.texts:
            return self.texts[location]
        if source_key in self.texts:
            return self.texts[source_key]
        raise LoadError(source_key, "loading failed: HTTP 404", status=404)


def numbered_words(count: int, prefix: str = "מילה") -> list[str]:
    """Distinct Hebrew words: prefix followed by Hebrew-letter digits of i"""
    letters = "אבגדהוזחטי"
    return [prefix + "".join(letters[int(d)] for d in str(i)) for i in range(count)]


def wordlist_text(words: list[str], newline: str = "\n") -> str:
    """Join words as a word list file body"""
    return newline.join(words) + newline


class FakeResponse:
    """Minimal stand-in for an aiohttp response"""

    def __init__(self, status: int, body: bytes, charset: str | None = "utf-8") -> None:
        self.status = status
        self.body = body
        self.charset = charset

    async def text(self, encoding: str | None = None) -> str:
        return self.body.decode(encoding or "utf-8")

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None


class FakeSession:
    """Records GET requests and returns a canned response or raises error

    Usable as an injected session or, through __aenter__, as the session
    TextFetcher opens itself.
    """

    def __init__(
        self, response: FakeResponse | None = None, error: Exception | None = None
    ) -> None:
        self.response = response
        self.error = error
        self.requests: list[tuple[str, dict[str, str]]] = []

    def get(self, url: str, headers: dict[str, str]) -> FakeResponse:
        self.requests.append((url, headers))
        if self.error:
            raise self.error
        return self.response

    async def __aenter__(self) -> "FakeSession":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None
