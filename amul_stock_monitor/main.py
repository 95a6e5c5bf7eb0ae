from __future__ import annotations

import logging
import sys
import time
from datetime import datetime, timedelta
from typing import Optional

from . import config, emailer, messages, notifier, scraper

_SLOT_GRACE_SECONDS = 1


def setup_logging() -> None:
    level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def send_notifications(
    is_available: bool,
    is_error: bool = False,
    *,
    now: Optional[datetime] = None,
) -> None:
    """Relay one alert to Telegram (HTML) and email (plain text)."""
    alert = messages.build_alert(
        is_available,
        is_error,
        timestamp=messages.format_timestamp(now),
    )
    notifier.send_message(alert.body)
    emailer.send_email(alert.subject, messages.strip_html(alert.body))


def check_availability(last_status: Optional[str]) -> str:
    """
    Run one scrape-and-notify cycle and return the status to remember.

    Notifies only on a change from a previously observed status. A failed
    check is reported once, however many failures follow in a row.
    """
    logger = logging.getLogger(__name__)
    logger.info("Checking availability...")
    try:
        result = scraper.fetch_stock_status(config.PRODUCT_URL, config.PINCODE)
    except Exception:
        logger.exception("Error during availability check")
        if last_status != scraper.STATUS_ERROR:
            send_notifications(False, is_error=True)
        return scraper.STATUS_ERROR

    logger.info("Status: %s", result.status)
    if last_status is not None and last_status != result.status:
        logger.info("Status changed from %r to %r; notifying.", last_status, result.status)
        send_notifications(result.is_available)
    return result.status


def seconds_until_next_run(now: datetime, interval_minutes: int) -> float:
    """
    Seconds from `now` to the next cron-style `*/interval_minutes` slot,
    i.e. the next whole minute whose minute-of-hour divides evenly.
    Intervals of an hour or more fire at minute 0. A slot less than a
    second away is skipped so an early wake-up cannot run it twice.
    """
    interval = max(1, int(interval_minutes))
    start = now + timedelta(seconds=_SLOT_GRACE_SECONDS)
    candidate = start.replace(second=0, microsecond=0) + timedelta(minutes=1)
    while candidate.minute % interval != 0:
        candidate += timedelta(minutes=1)
    return (candidate - now).total_seconds()


def monitor_loop() -> None:
    """Check now, then on every scheduled slot, forever."""
    logger = logging.getLogger(__name__)
    last_status: Optional[str] = None
    while True:
        last_status = check_availability(last_status)
        delay = seconds_until_next_run(datetime.now(), config.CHECK_INTERVAL_MINUTES)
        logger.debug("Next check in %.0f seconds.", delay)
        time.sleep(delay)


def main() -> None:
    """Initialise and run the monitoring loop."""
    config.validate()
    setup_logging()
    logger = logging.getLogger(__name__)

    logger.info("🚀 AmulProteinStockMonitor started!")
    logger.info("📅 Checking every %d minutes...", config.CHECK_INTERVAL_MINUTES)
    logger.info("🎯 Monitoring: %s", config.PRODUCT_URL)

    channels = config.configured_channels()
    if channels:
        logger.info("Notification channels: %s", ", ".join(channels))
    else:
        logger.warning("No notification channel configured; status changes will only be logged.")

    try:
        monitor_loop()
    except KeyboardInterrupt:
        logger.info("👋 Shutting down monitor...")
        sys.exit(0)


if __name__ == "__main__":
    main()
