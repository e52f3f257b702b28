from decimal import Decimal

import pytest

from sellerdesk.templatetags.formatting import peso, order_status_badge, notification_icon, notification_color


@pytest.mark.parametrize("value, expected", [
    (Decimal("12.5"), "₱12.50"),
    (12.5, "₱12.50"),
    (1234, "₱1234.00"),
    (Decimal("0.005"), "₱0.01"),
    (None, "₱0.00"),
    ("garbage", "₱0.00"),
])
def test_peso(value, expected):
    assert peso(value) == expected


def test_order_status_badges():
    assert order_status_badge("To Ship") == "badge-to-ship"
    assert order_status_badge("Completed") == "badge-completed"
    assert order_status_badge("Cancelled") == "badge-other"
    assert order_status_badge("") == "badge-other"


@pytest.mark.parametrize("kind, icon, color", [
    ("new_order", "package", "orange"),
    ("order_update", "package", "blue"),
    ("message", "message-circle", "green"),
    ("follow", "user-plus", "purple"),
    ("promo", "bell", "gray"),
])
def test_notification_icons(kind, icon, color):
    assert notification_icon(kind) == icon
    assert notification_color(kind) == color
