"""Telegram notifier.

Sends status messages to a Telegram chat through the Bot API
(`sendMessage`, HTML parse mode). Failures are logged, never raised.
"""
from __future__ import annotations

import logging
from typing import Optional

import requests

from . import config
from .utils import HTTPError, checked_request, get_http_session

logger = logging.getLogger(__name__)


@checked_request
def _post(session: requests.Session, url: str, **kwargs) -> requests.Response:
    return session.post(url, **kwargs)


def _send_message_url(bot_token: str) -> str:
    return f"{config.TELEGRAM_API_BASE.rstrip('/')}/bot{bot_token}/sendMessage"


def send_message(
    text: str,
    *,
    bot_token: Optional[str] = None,
    chat_id: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> bool:
    """Post `text` to the configured chat. Returns True when Telegram accepted it."""
    bot_token = bot_token or config.TELEGRAM_BOT_TOKEN
    chat_id = chat_id or config.TELEGRAM_CHAT_ID
    if not bot_token or not chat_id:
        logger.info("Telegram credentials not configured")
        return False

    close_session = False
    if session is None:
        session = get_http_session()
        close_session = True

    payload = {
        "chat_id": chat_id,
        "text": text,
        "parse_mode": "HTML",
    }
    try:
        _post(
            session,
            _send_message_url(bot_token),
            json=payload,
            timeout=config.HTTP_TIMEOUT_SECONDS,
        )
        logger.info("Telegram notification sent")
        return True
    except (requests.RequestException, HTTPError) as e:
        # str(e) may embed the token-bearing URL; keep it out of the log.
        logger.error("Failed to send Telegram message: %s", str(e).replace(bot_token, "***"))
        return False
    finally:
        if close_session:
            session.close()


__all__ = ["send_message"]
