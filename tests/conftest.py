"""Shared fixtures."""

import pytest
import requests

from amul_stock_monitor import config


def make_response(status_code: int = 200, text: str = '{"ok": true}') -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.url = "https://api.example.test/"
    return response


@pytest.fixture
def telegram_credentials(monkeypatch):
    monkeypatch.setattr(config, "TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setattr(config, "TELEGRAM_CHAT_ID", "42")
    monkeypatch.setattr(config, "TELEGRAM_API_BASE", "https://api.telegram.org")


@pytest.fixture
def emailjs_credentials(monkeypatch):
    monkeypatch.setattr(config, "EMAILJS_SERVICE_ID", "service_x")
    monkeypatch.setattr(config, "EMAILJS_TEMPLATE_ID", "template_y")
    monkeypatch.setattr(config, "EMAILJS_USER_ID", "user_z")
    monkeypatch.setattr(config, "EMAILJS_ACCESS_TOKEN", None)


@pytest.fixture
def no_credentials(monkeypatch):
    for name in (
        "TELEGRAM_BOT_TOKEN",
        "TELEGRAM_CHAT_ID",
        "EMAILJS_SERVICE_ID",
        "EMAILJS_TEMPLATE_ID",
        "EMAILJS_USER_ID",
        "EMAILJS_ACCESS_TOKEN",
    ):
        monkeypatch.setattr(config, name, None)
