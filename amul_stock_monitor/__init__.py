"""
Amul product stock monitor.

This package renders a single shop.amul.com product page with a headless
browser, tracks its stock status in memory and relays every change to
Telegram and to email (EmailJS).  See README.md for details.
"""

__all__ = [
    "config",
    "emailer",
    "main",
    "messages",
    "notifier",
    "scraper",
    "utils",
]
