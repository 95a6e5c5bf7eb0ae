"""Telegram notifier tests."""

import logging
from unittest.mock import MagicMock

import requests

from amul_stock_monitor import notifier
from tests.conftest import make_response


class TestSendMessage:

    def test_posts_html_message_to_bot_api(self, telegram_credentials):
        session = MagicMock()
        session.post.return_value = make_response(200)

        assert notifier.send_message("<b>hi</b>", session=session) is True

        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0] == "https://api.telegram.org/bot123:abc/sendMessage"
        assert kwargs["json"] == {"chat_id": "42", "text": "<b>hi</b>", "parse_mode": "HTML"}
        assert kwargs["timeout"] == notifier.config.HTTP_TIMEOUT_SECONDS
        session.close.assert_not_called()

    def test_explicit_credentials_win(self, telegram_credentials):
        session = MagicMock()
        session.post.return_value = make_response(200)

        notifier.send_message("x", bot_token="999:zzz", chat_id="7", session=session)

        args, kwargs = session.post.call_args
        assert "/bot999:zzz/" in args[0]
        assert kwargs["json"]["chat_id"] == "7"

    def test_missing_credentials_skip_request(self, no_credentials, caplog):
        session = MagicMock()
        with caplog.at_level(logging.INFO):
            assert notifier.send_message("x", session=session) is False
        session.post.assert_not_called()
        assert "Telegram credentials not configured" in caplog.text

    def test_http_error_is_logged_not_raised(self, telegram_credentials, caplog):
        session = MagicMock()
        session.post.return_value = make_response(400, '{"ok":false,"description":"chat not found"}')

        with caplog.at_level(logging.ERROR):
            assert notifier.send_message("x", session=session) is False
        assert "Failed to send Telegram message" in caplog.text
        assert "123:abc" not in caplog.text

    def test_network_error_is_logged_not_raised(self, telegram_credentials):
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("boom")
        assert notifier.send_message("x", session=session) is False

    def test_owned_session_is_closed(self, telegram_credentials, monkeypatch):
        session = MagicMock()
        session.post.return_value = make_response(200)
        monkeypatch.setattr(notifier, "get_http_session", lambda: session)

        notifier.send_message("x")

        session.close.assert_called_once()
