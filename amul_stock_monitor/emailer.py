"""Email notifier via EmailJS.

Sends notifications through the EmailJS REST API; the email template
on EmailJS receives `subject`, `message`, `to_name` and `from_name`.
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


def _build_payload(subject: str, message: str) -> dict:
    payload = {
        "service_id": config.EMAILJS_SERVICE_ID,
        "template_id": config.EMAILJS_TEMPLATE_ID,
        "user_id": config.EMAILJS_USER_ID,
        "template_params": {
            "subject": subject,
            "message": message,
            "to_name": config.EMAIL_TO_NAME,
            "from_name": config.EMAIL_FROM_NAME,
        },
    }
    if config.EMAILJS_ACCESS_TOKEN:
        payload["accessToken"] = config.EMAILJS_ACCESS_TOKEN
    return payload


def send_email(
    subject: str,
    message: str,
    *,
    session: Optional[requests.Session] = None,
) -> bool:
    if not config.emailjs_configured():
        logger.info("EmailJS credentials not configured")
        return False

    close_session = False
    if session is None:
        session = get_http_session()
        close_session = True

    try:
        _post(
            session,
            config.EMAILJS_API_URL,
            json=_build_payload(subject, message),
            timeout=config.HTTP_TIMEOUT_SECONDS,
        )
        logger.info("Email notification sent (subject=%s)", subject)
        return True
    except (requests.RequestException, HTTPError) as e:
        logger.error("Failed to send email: %s", e)
        return False
    finally:
        if close_session:
            session.close()


__all__ = ["send_email"]
