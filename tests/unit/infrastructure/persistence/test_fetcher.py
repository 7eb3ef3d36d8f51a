# tests/unit/infrastructure/persistence/test_fetcher.py

"""Tests for the HTTP/file text fetcher"""

# Standard library imports
from asyncio import run
from unittest.mock import patch

# Third party imports
from aiohttp import ClientConnectionError
import pytest

# Local imports
from hebrew_pattern_tool.core.domain.exceptions import LoadError
from hebrew_pattern_tool.infrastructure.config import ConfigLoader
from hebrew_pattern_tool.infrastructure.persistence import TextFetcher
from tests.fixtures.wordlists import FakeResponse
from tests.fixtures.wordlists import FakeSession


class TestUrlFetch:
    """Test fetching over HTTP with an injected session"""

    def test_success(self):
        session = FakeSession(FakeResponse(200, "שלום\nעולם\n".encode("utf-8")))
        fetcher = TextFetcher(ConfigLoader(), session=session)

        text = run(fetcher.fetch_text("https://example.com/nouns.txt", "nouns"))

        assert text == "שלום\nעולם\n"
        assert session.requests[0][0] == "https://example.com/nouns.txt"

    def test_no_cache_headers(self):
        session = FakeSession(FakeResponse(200, b""))
        run(TextFetcher(ConfigLoader(), session=session).fetch_text("https://e.com/a", "a"))

        headers = session.requests[0][1]
        assert headers["Cache-Control"] == "no-store, no-cache"
        assert headers["Pragma"] == "no-cache"
        assert headers["User-Agent"].startswith("hebrew-pattern-tool ")

    def test_missing_charset_defaults_to_utf8(self):
        session = FakeSession(FakeResponse(200, "אב".encode("utf-8"), charset=None))
        fetcher = TextFetcher(ConfigLoader(), session=session)
        assert run(fetcher.fetch_text("https://e.com/a", "a")) == "אב"

    @pytest.mark.parametrize("status", [301, 404, 500])
    def test_non_2xx_raises_load_error(self, status):
        session = FakeSession(FakeResponse(status, b""))
        fetcher = TextFetcher(ConfigLoader(), session=session)

        with pytest.raises(LoadError) as exc_info:
            run(fetcher.fetch_text("https://example.com/verbs.txt", "verbs"))

        assert exc_info.value.source_key == "verbs"
        assert exc_info.value.status == status
        assert exc_info.value.message == f"loading failed: HTTP {status}"

    def test_transport_error_raises_load_error(self):
        session = FakeSession(error=ClientConnectionError("connection refused"))
        fetcher = TextFetcher(ConfigLoader(), session=session)

        with pytest.raises(LoadError, match="connection refused") as exc_info:
            run(fetcher.fetch_text("https://example.com/verbs.txt", "verbs"))

        assert exc_info.value.status is None

    def test_undecodable_body_raises_load_error(self):
        session = FakeSession(FakeResponse(200, b"\xff\xfe\xfa"))
        with pytest.raises(LoadError, match="not valid text"):
            run(TextFetcher(ConfigLoader(), session=session).fetch_text("https://e.com/a", "a"))

    def test_unknown_charset_raises_load_error(self):
        session = FakeSession(FakeResponse(200, "אב".encode("utf-8"), charset="x-bogus"))
        with pytest.raises(LoadError, match="not valid text") as exc_info:
            run(TextFetcher(ConfigLoader(), session=session).fetch_text("https://e.com/a", "a"))
        assert exc_info.value.source_key == "a"

    def test_session_timeout_raises_load_error(self):
        session = FakeSession(error=TimeoutError())
        fetcher = TextFetcher(ConfigLoader(), session=session)

        with pytest.raises(LoadError, match="timed out") as exc_info:
            run(fetcher.fetch_text("https://example.com/verbs.txt", "verbs"))

        assert exc_info.value.source_key == "verbs"
        assert exc_info.value.status is None


class TestOwnSession:
    """Test the session the fetcher opens when none is injected"""

    def test_opened_without_timeout(self):
        session = FakeSession(FakeResponse(200, "אב\n".encode("utf-8")))
        with patch(
            "hebrew_pattern_tool.infrastructure.persistence._fetcher.ClientSession",
            return_value=session,
        ) as session_cls:
            text = run(TextFetcher(ConfigLoader()).fetch_text("https://e.com/a", "a"))

        assert text == "אב\n"
        timeout = session_cls.call_args.kwargs["timeout"]
        assert timeout.total is None
        assert timeout.sock_read is None
        assert timeout.sock_connect is None
        assert session.requests[0][0] == "https://e.com/a"


class TestFileFetch:
    """Test reading local word list files"""

    def test_reads_utf8_file(self, tmp_path):
        path = tmp_path / "nouns.txt"
        path.write_text("שלום\n", encoding="utf-8")
        assert run(TextFetcher(ConfigLoader()).fetch_text(str(path), "nouns")) == "שלום\n"

    def test_missing_file_raises_load_error(self, tmp_path):
        with pytest.raises(LoadError) as exc_info:
            run(TextFetcher(ConfigLoader()).fetch_text(str(tmp_path / "missing.txt"), "nouns"))
        assert exc_info.value.source_key == "nouns"
        assert "cannot read" in exc_info.value.message
