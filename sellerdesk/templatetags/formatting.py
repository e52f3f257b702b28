from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django import template
from django.conf import settings

from sellerdesk.models import Order
from sellerdesk.services.notifications import icon_for

register = template.Library()

STATUS_BADGES = {
    Order.STATUS_TO_SHIP: "badge-to-ship",
    Order.STATUS_COMPLETED: "badge-completed",
}
DEFAULT_BADGE = "badge-other"


@register.filter
def peso(value):
    """
    12.5 -> "₱12.50"
    Fixed two decimals and a fixed currency glyph, whatever the locale.
    """
    try:
        amount = Decimal(str(value if value is not None else 0))
    except (InvalidOperation, ValueError):
        amount = Decimal(0)
    amount = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{settings.CURRENCY_SYMBOL}{amount}"


@register.filter
def order_status_badge(status):
    """CSS class for an order status; statuses the dashboard doesn't know share one."""
    return STATUS_BADGES.get(status, DEFAULT_BADGE)


@register.filter
def notification_icon(kind):
    return icon_for(kind)[0]


@register.filter
def notification_color(kind):
    return icon_for(kind)[1]
