"""Unit tests for the Telegram notifier."""

from unittest.mock import MagicMock

import pytest
import requests

from forumwatch.errors import ConfigError, NotifyError
from forumwatch.notifiers.telegram import TelegramNotifier


def _response(status: int, body: bytes = b"{}") -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = body
    r.reason = "Bad Request" if status == 400 else ""
    return r


def _notifier(session, **kw) -> TelegramNotifier:
    return TelegramNotifier("123:abc", api_base="https://tg.test", dry_run=False, session=session, **kw)


class TestTelegramNotifier:
    def test_posts_form_to_send_message(self):
        session = MagicMock()
        session.post.return_value = _response(200, b'{"ok": true}')
        _notifier(session).notify("-1001", "hello")

        args, kwargs = session.post.call_args
        assert args[0] == "https://tg.test/bot123:abc/sendMessage"
        assert kwargs["data"] == {"chat_id": "-1001", "text": "hello"}
        assert kwargs["timeout"]

    def test_non_200_raises_with_description(self):
        session = MagicMock()
        session.post.return_value = _response(400, b'{"ok": false, "description": "chat not found"}')
        with pytest.raises(NotifyError, match="chat not found") as exc:
            _notifier(session).notify("-1", "x")
        assert exc.value.status_code == 400

    def test_non_json_error_body(self):
        session = MagicMock()
        session.post.return_value = _response(400, b"<html>nope</html>")
        with pytest.raises(NotifyError, match="Bad Request"):
            _notifier(session).notify("-1", "x")

    def test_transport_error_hides_token(self):
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("https://tg.test/bot123:abc/sendMessage")
        with pytest.raises(NotifyError) as exc:
            _notifier(session).notify("-1", "x")
        assert "123:abc" not in str(exc.value)

    def test_dry_run_does_not_post(self):
        session = MagicMock()
        TelegramNotifier("t", dry_run=True, session=session).notify("-1", "x")
        session.post.assert_not_called()

    @pytest.mark.parametrize("token", ["", "   ", None])
    def test_empty_token_is_config_error(self, token):
        with pytest.raises(ConfigError):
            TelegramNotifier(token)
