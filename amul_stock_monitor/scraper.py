from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, Script, Stylesheet, TemplateString
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright

from . import config

logger = logging.getLogger(__name__)

STATUS_AVAILABLE = "Available"
STATUS_OUT_OF_STOCK = "Out of Stock"
STATUS_UNKNOWN = "Unknown"
STATUS_SELECTOR_ERROR = "Error checking status"
# Set by the monitor when a whole check fails; never produced by the scraper.
STATUS_ERROR = "Error"

ADD_TO_CART_SELECTOR = '.add-to-cart, .btn-add-cart, [data-testid="add-to-cart"]'
OUT_OF_STOCK_PHRASES = ("out of stock", "not available", "unavailable")

PINCODE_MODAL_SELECTOR = "#pincode-modal"
PINCODE_INPUT_SELECTOR = "#pincode-input"
PINCODE_SUBMIT_SELECTOR = "#pincode-submit"

_BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

# Node types the DOM counts in textContent; bs4 leaves script/style out by default.
_TEXT_CONTENT_TYPES = (NavigableString, CData, Script, Stylesheet, TemplateString)


class ScrapeError(Exception):
    """Raised when the product page could not be loaded at all."""


@dataclass
class StockCheck:
    status: str
    is_available: bool


def classify_html(html: str) -> StockCheck:
    """
    Decide the stock status from a rendered product page.

    An "Add to Cart" button marks the product available, but any
    out-of-stock wording on the page wins over the button.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    result = StockCheck(status=STATUS_UNKNOWN, is_available=False)

    button = soup.select_one(ADD_TO_CART_SELECTOR)
    if button is not None and "add to cart" in button.get_text().lower():
        result = StockCheck(status=STATUS_AVAILABLE, is_available=True)

    text = soup.get_text(types=_TEXT_CONTENT_TYPES).lower()
    if any(phrase in text for phrase in OUT_OF_STOCK_PHRASES):
        result = StockCheck(status=STATUS_OUT_OF_STOCK, is_available=False)

    return result


def read_stock_status(page: Page) -> StockCheck:
    """Classify the page currently loaded in `page`."""
    try:
        html = page.content()
    except PlaywrightError:
        logger.exception("Error checking availability selectors")
        return StockCheck(status=STATUS_SELECTOR_ERROR, is_available=False)
    return classify_html(html)


def submit_pincode(page: Page, pincode: str) -> bool:
    """
    Fill the delivery pincode popup if the site shows one.
    Returns True when the popup was handled; a missing popup is not an error.
    """
    try:
        page.wait_for_selector(PINCODE_MODAL_SELECTOR, timeout=config.PINCODE_TIMEOUT_MS)
        logger.info("Pincode popup detected, filling it...")
        page.fill(PINCODE_INPUT_SELECTOR, pincode)
        page.click(PINCODE_SUBMIT_SELECTOR)
        page.wait_for_timeout(config.PINCODE_SETTLE_MS)
        return True
    except PlaywrightError:
        logger.info("No pincode popup or already handled")
        logger.debug("Pincode handling detail", exc_info=True)
        return False


def fetch_stock_status(url: Optional[str] = None, pincode: Optional[str] = None) -> StockCheck:
    """
    Render the product page with headless Chromium and return its stock status.

    Raises ScrapeError if the browser cannot start or the page does not load.
    The browser is closed on every path.
    """
    url = url or config.PRODUCT_URL
    pincode = pincode or config.PINCODE

    with sync_playwright() as p:
        try:
            browser = p.chromium.launch(headless=config.BROWSER_HEADLESS, args=_BROWSER_ARGS)
        except PlaywrightError as e:
            raise ScrapeError(f"Could not launch browser: {e}") from e

        try:
            page = browser.new_page(user_agent=config.BROWSER_USER_AGENT)
            try:
                page.goto(url, wait_until="networkidle", timeout=config.PAGE_TIMEOUT_MS)
            except PlaywrightError as e:
                raise ScrapeError(f"Could not load {url}: {e}") from e

            submit_pincode(page, pincode)

            # Let client-side rendering settle before reading the DOM.
            page.wait_for_timeout(config.PAGE_SETTLE_MS)
            return read_stock_status(page)
        finally:
            browser.close()


__all__ = [
    "STATUS_AVAILABLE",
    "STATUS_OUT_OF_STOCK",
    "STATUS_UNKNOWN",
    "STATUS_SELECTOR_ERROR",
    "STATUS_ERROR",
    "ScrapeError",
    "StockCheck",
    "classify_html",
    "read_stock_status",
    "submit_pincode",
    "fetch_stock_status",
]
