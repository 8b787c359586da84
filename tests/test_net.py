"""Unit tests for the page fetcher."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from forumwatch.errors import FetchError
from forumwatch.net import PageFetcher, fetch, make_session


def _response(status: int, body: bytes = b"", reason: str = "") -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = body
    r.reason = reason
    r.url = "https://x.test/forum.php"
    return r


class TestFetch:
    def test_returns_body_bytes(self):
        session = MagicMock()
        session.get.return_value = _response(200, b"<html>ok</html>")
        assert fetch("https://x.test/forum.php", session=session) == b"<html>ok</html>"

    def test_applies_timeout(self):
        session = MagicMock()
        session.get.return_value = _response(200, b"")
        fetch("https://x.test/forum.php", session=session, timeout=(1, 2))
        _, kwargs = session.get.call_args
        assert kwargs["timeout"] == (1, 2)

    def test_non_2xx_raises_with_status(self):
        session = MagicMock()
        session.get.return_value = _response(503, b"down", reason="Service Unavailable")
        with pytest.raises(FetchError) as exc:
            fetch("https://x.test/forum.php", session=session)
        assert exc.value.status_code == 503
        assert exc.value.url == "https://x.test/forum.php"

    def test_transport_error_raises_without_retry(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(FetchError, match="refused"):
            fetch("https://x.test/forum.php", session=session)
        assert session.get.call_count == 1

    def test_without_session_uses_fresh_one(self):
        with patch("forumwatch.net.make_session") as factory:
            s = factory.return_value.__enter__.return_value
            s.get.return_value = _response(200, b"x")
            assert fetch("https://x.test/") == b"x"


class TestPageFetcher:
    def test_reuses_session(self):
        session = MagicMock()
        session.get.return_value = _response(200, b"a")
        f = PageFetcher(session=session)
        f("https://x.test/1")
        f("https://x.test/2")
        assert session.get.call_count == 2

    def test_session_headers(self):
        s = make_session()
        assert "Mozilla" in s.headers["User-Agent"]
        assert not any(a.max_retries.total for a in s.adapters.values())


class TestNon2xx:
    def test_unfollowed_redirect_is_error(self):
        session = MagicMock()
        session.get.return_value = _response(302, b"moved", reason="Found")
        with pytest.raises(FetchError) as exc:
            fetch("https://x.test/forum.php", session=session)
        assert exc.value.status_code == 302

    def test_not_modified_is_error(self):
        session = MagicMock()
        session.get.return_value = _response(304, b"", reason="Not Modified")
        with pytest.raises(FetchError):
            fetch("https://x.test/forum.php", session=session)
