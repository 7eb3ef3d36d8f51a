# hebrew_pattern_tool/infrastructure/persistence/_fetcher.py

"""Raw text retrieval for word sources over HTTP or from local files"""

# Standard library imports
from logging import getLogger
from pathlib import Path
import sys

# Third party imports
from aiohttp import ClientError
from aiohttp import ClientSession
from aiohttp import ClientTimeout
from aiohttp import __version__ as aiohttp_version

# Local imports
from hebrew_pattern_tool.core.domain.exceptions import LoadError
from hebrew_pattern_tool.infrastructure.config import ConfigLoader
from hebrew_pattern_tool.infrastructure.config import get_config
from hebrew_pattern_tool.infrastructure.config import is_url

logger = getLogger(__name__)


class TextFetcher:
    """Fetches word list text from http(s) URLs or local files

    Every request asks intermediaries not to serve a cached copy. There is no
    timeout on the session opened here: a hung request holds its source until
    the caller gives up. A timeout raised by an injected session, like any
    other transport failure, fails only the source being fetched.
    """

    def __init__(
        self, config: ConfigLoader | None = None, session: ClientSession | None = None
    ) -> None:
        """Initialize fetcher

        Args:
            config: Optional configuration loader
            session: Shared aiohttp session; a short-lived one is opened per
                request when omitted
        """
        self.config = config or get_config()
        self._session = session

    @property
    def headers(self) -> dict[str, str]:
        user_agent = (
            f"{self.config.fetch.user_agent} Python/{sys.version.split()[0]} "
            f"aiohttp/{aiohttp_version}"
        )
        return {
            "User-Agent": user_agent,
            "Cache-Control": "no-store, no-cache",
            "Pragma": "no-cache",
        }

    async def fetch_text(self, location: str, source_key: str) -> str:
        """Return the text behind location

        Args:
            location: http(s) URL or filesystem path
            source_key: Source identifier carried by any LoadError

        Returns:
            Decoded text

        Raises:
            LoadError: On a non-2xx response, transport failure, timeout,
                missing file, undecodable content or an unknown charset
        """
        if is_url(location):
            return await self._fetch_url(location, source_key)
        return self._read_file(location, source_key)

    async def _fetch_url(self, url: str, source_key: str) -> str:
        logger.debug(f"GET {url} for {source_key}")
        try:
            if self._session is not None:
                return await self._get(self._session, url, source_key)
            async with ClientSession(timeout=ClientTimeout(total=None)) as session:
                return await self._get(session, url, source_key)
        except ClientError as e:
            raise LoadError(source_key, f"request to {url} failed: {e}") from e
        except TimeoutError as e:
            raise LoadError(source_key, f"request to {url} timed out") from e
        except (UnicodeDecodeError, LookupError) as e:
            raise LoadError(source_key, f"response from {url} is not valid text: {e}") from e

    async def _get(self, session: ClientSession, url: str, source_key: str) -> str:
        async with session.get(url, headers=self.headers) as response:
            if not 200 <= response.status < 300:
                raise LoadError(
                    source_key, f"loading failed: HTTP {response.status}", status=response.status
                )
            return await response.text(encoding=response.charset or "utf-8")

    def _read_file(self, path: str, source_key: str) -> str:
        logger.debug(f"Reading {path} for {source_key}")
        try:
            return Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(source_key, f"cannot read {path}: {e}") from e
