"""Notification text.

Builds the subject and Telegram-HTML body for a status change or a
monitoring error. Email gets the same body with the tags stripped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from . import config

_TAG_RE = re.compile(r"<[^>]*>")


@dataclass
class Alert:
    subject: str
    body: str  # Telegram HTML


def format_timestamp(dt: Optional[datetime] = None) -> str:
    return (dt or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")


def strip_html(text: str) -> str:
    return _TAG_RE.sub("", text)


def build_alert(
    is_available: bool,
    is_error: bool = False,
    *,
    product_name: Optional[str] = None,
    url: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> Alert:
    name = product_name or config.PRODUCT_NAME
    url = url or config.PRODUCT_URL
    when = timestamp or format_timestamp()

    if is_error:
        subject = "🚨 AmulProteinStockMonitor Error"
        body = (
            "❌ <b>Monitoring Error</b>\n\n"
            f"There was an error checking the {name} availability.\n\n"
            f"Time: {when}\n"
            f"URL: {url}"
        )
    elif is_available:
        subject = "✅ Amul Buttermilk Available!"
        body = (
            "🎉 <b>GOOD NEWS!</b>\n\n"
            f"{name} is now <b>AVAILABLE</b>!\n\n"
            f"Time: {when}\n"
            f"Link: {url}"
        )
    else:
        subject = "❌ Amul Buttermilk Out of Stock"
        body = (
            "😔 <b>Status Update</b>\n\n"
            f"{name} is currently <b>OUT OF STOCK</b>\n\n"
            f"Time: {when}\n"
            "We'll keep monitoring for you!"
        )

    return Alert(subject=subject, body=body)


__all__ = ["Alert", "build_alert", "format_timestamp", "strip_html"]
