"""Helper utilities.

This module centralises the HTTP plumbing shared by the notifiers:
creating a configured session and turning error responses into
exceptions.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

import requests
from requests import Response


logger = logging.getLogger(__name__)


def get_http_session() -> requests.Session:
    """Return a new HTTP session with sensible defaults.

    Caller is responsible for closing the session or letting it be
    garbage collected.
    """
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": "AmulStockMonitor/1.0",
            "Accept": "application/json, text/plain, */*",
        }
    )
    return session


class HTTPError(Exception):
    """Raised when a notifier endpoint answers with an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _raise_for_status(resp: Response) -> None:
    try:
        resp.raise_for_status()
    except requests.RequestException as e:
        body = (resp.text or "")[:200]
        raise HTTPError(f"{e} {body}".strip(), status_code=resp.status_code) from e


def checked_request(method: Callable[..., Response]) -> Callable[..., Response]:
    """Decorator for single-shot HTTP calls.

    The decorated function must accept a `requests.Session` as its first
    argument, followed by URL and optional kwargs, and return a
    `requests.Response`.  Any 4xx/5xx response is raised as `HTTPError`;
    network failures propagate as `requests.RequestException`.  No retry
    is attempted.
    """

    @functools.wraps(method)
    def wrapper(session: requests.Session, url: str, **kwargs: Any) -> Response:
        response = method(session, url, **kwargs)
        _raise_for_status(response)
        return response

    return wrapper


__all__ = ["get_http_session", "checked_request", "HTTPError"]
