"""Alert text tests."""

from datetime import datetime

from amul_stock_monitor import messages

URL = "https://shop.example/p"


def _alert(is_available, is_error=False):
    return messages.build_alert(
        is_available,
        is_error,
        product_name="Amul High Protein Buttermilk",
        url=URL,
        timestamp="2026-10-19 09:30:00",
    )


def test_available_alert():
    alert = _alert(True)
    assert alert.subject == "✅ Amul Buttermilk Available!"
    assert "<b>AVAILABLE</b>" in alert.body
    assert "Time: 2026-10-19 09:30:00" in alert.body
    assert f"Link: {URL}" in alert.body


def test_out_of_stock_alert():
    alert = _alert(False)
    assert alert.subject == "❌ Amul Buttermilk Out of Stock"
    assert "<b>OUT OF STOCK</b>" in alert.body
    assert "We'll keep monitoring for you!" in alert.body
    assert URL not in alert.body


def test_error_alert_wins_over_availability():
    alert = _alert(True, is_error=True)
    assert alert.subject == "🚨 AmulProteinStockMonitor Error"
    assert "Monitoring Error" in alert.body
    assert "error checking the Amul High Protein Buttermilk availability" in alert.body
    assert f"URL: {URL}" in alert.body


def test_defaults_come_from_config(monkeypatch):
    monkeypatch.setattr(messages.config, "PRODUCT_NAME", "Test Lassi")
    monkeypatch.setattr(messages.config, "PRODUCT_URL", "https://shop.example/lassi")
    alert = messages.build_alert(True)
    assert "Test Lassi is now" in alert.body
    assert "https://shop.example/lassi" in alert.body


def test_strip_html():
    assert messages.strip_html("🎉 <b>GOOD NEWS!</b>\n<i>x</i>") == "🎉 GOOD NEWS!\nx"


def test_format_timestamp():
    assert messages.format_timestamp(datetime(2026, 1, 2, 3, 4, 5)) == "2026-01-02 03:04:05"
