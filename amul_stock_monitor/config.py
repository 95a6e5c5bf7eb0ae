"""Configuration loader.

Reads environment variables and `.env` to configure the monitor.
"""

from __future__ import annotations

import os
from typing import List, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load variables from a .env file if present (project root).
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env")


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(name, default)


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes")


def _parse_int(value: Optional[str], default: int) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default


def _parse_float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value is not None else default
    except ValueError:
        return default


# ---- Product -----------------------------------------------------------------

PRODUCT_URL: str = _get_env(
    "PRODUCT_URL",
    "https://shop.amul.com/en/product/amul-high-protein-buttermilk-200-ml-or-pack-of-30",
)
PRODUCT_NAME: str = _get_env("PRODUCT_NAME", "Amul High Protein Buttermilk")

# Delivery pincode typed into the site's pincode popup (default: Rajkot).
PINCODE: str = _get_env("PINCODE", "360001")

# Checks run on a cron-style */N minute schedule.
CHECK_INTERVAL_MINUTES: int = _parse_int(_get_env("CHECK_INTERVAL_MINUTES", "30"), 30)

# Logging level: DEBUG, INFO, WARNING, ERROR.
LOG_LEVEL: str = _get_env("LOG_LEVEL", "INFO")

# ---- Browser -----------------------------------------------------------------

BROWSER_HEADLESS: bool = _parse_bool(_get_env("BROWSER_HEADLESS", "true"), True)
BROWSER_USER_AGENT: str = _get_env(
    "BROWSER_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
)
PAGE_TIMEOUT_MS: int = _parse_int(_get_env("PAGE_TIMEOUT_MS", "30000"), 30000)
PINCODE_TIMEOUT_MS: int = _parse_int(_get_env("PINCODE_TIMEOUT_MS", "5000"), 5000)
PINCODE_SETTLE_MS: int = _parse_int(_get_env("PINCODE_SETTLE_MS", "2000"), 2000)
PAGE_SETTLE_MS: int = _parse_int(_get_env("PAGE_SETTLE_MS", "3000"), 3000)

# ---- Telegram ----------------------------------------------------------------

TELEGRAM_BOT_TOKEN: Optional[str] = _get_env("TELEGRAM_BOT_TOKEN")
TELEGRAM_CHAT_ID: Optional[str] = _get_env("TELEGRAM_CHAT_ID")
TELEGRAM_API_BASE: str = _get_env("TELEGRAM_API_BASE", "https://api.telegram.org")

# ---- EmailJS -----------------------------------------------------------------

EMAILJS_SERVICE_ID: Optional[str] = _get_env("EMAILJS_SERVICE_ID")
EMAILJS_TEMPLATE_ID: Optional[str] = _get_env("EMAILJS_TEMPLATE_ID")
EMAILJS_USER_ID: Optional[str] = _get_env("EMAILJS_USER_ID")
# Private key; EmailJS rejects server-side calls without it when "strict mode" is on.
EMAILJS_ACCESS_TOKEN: Optional[str] = _get_env("EMAILJS_ACCESS_TOKEN")
EMAILJS_API_URL: str = _get_env("EMAILJS_API_URL", "https://api.emailjs.com/api/v1.0/email/send")
EMAIL_TO_NAME: str = _get_env("EMAIL_TO_NAME", "User")
EMAIL_FROM_NAME: str = _get_env("EMAIL_FROM_NAME", "AmulProteinStockMonitor")

HTTP_TIMEOUT_SECONDS: float = _parse_float(_get_env("HTTP_TIMEOUT_SECONDS", "20"), 20.0)

# ---- Validation --------------------------------------------------------------

def telegram_configured() -> bool:
    return bool(TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID)


def emailjs_configured() -> bool:
    return bool(EMAILJS_SERVICE_ID and EMAILJS_TEMPLATE_ID and EMAILJS_USER_ID)


def configured_channels() -> List[str]:
    """Names of the notification channels that have credentials."""
    channels: List[str] = []
    if telegram_configured():
        channels.append("telegram")
    if emailjs_configured():
        channels.append("email")
    return channels


def validate() -> None:
    """Validate required configuration parameters."""
    if not PRODUCT_URL:
        raise RuntimeError("PRODUCT_URL must be set. See .env.example for details.")
    if CHECK_INTERVAL_MINUTES < 1:
        raise RuntimeError(
            f"CHECK_INTERVAL_MINUTES must be at least 1 (got {CHECK_INTERVAL_MINUTES})."
        )


__all__ = [
    # Product
    "PRODUCT_URL",
    "PRODUCT_NAME",
    "PINCODE",
    "CHECK_INTERVAL_MINUTES",
    "LOG_LEVEL",
    # Browser
    "BROWSER_HEADLESS",
    "BROWSER_USER_AGENT",
    "PAGE_TIMEOUT_MS",
    "PINCODE_TIMEOUT_MS",
    "PINCODE_SETTLE_MS",
    "PAGE_SETTLE_MS",
    # Telegram
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_CHAT_ID",
    "TELEGRAM_API_BASE",
    # EmailJS
    "EMAILJS_SERVICE_ID",
    "EMAILJS_TEMPLATE_ID",
    "EMAILJS_USER_ID",
    "EMAILJS_ACCESS_TOKEN",
    "EMAILJS_API_URL",
    "EMAIL_TO_NAME",
    "EMAIL_FROM_NAME",
    "HTTP_TIMEOUT_SECONDS",
    # Helpers
    "telegram_configured",
    "emailjs_configured",
    "configured_channels",
    "validate",
]
