# sellerdesk/services/notifications.py
from __future__ import annotations

import logging

from django.conf import settings

from sellerdesk.models import Notification
from sellerdesk.services.live import broadcast_change

logger = logging.getLogger(__name__)

# -----------------------------
# TYPES (icon/color family)
# -----------------------------
T_NEW_ORDER = Notification.TYPE_NEW_ORDER
T_ORDER_UPDATE = Notification.TYPE_ORDER_UPDATE
T_MESSAGE = Notification.TYPE_MESSAGE
T_FOLLOW = Notification.TYPE_FOLLOW

# type -> (icon, color); anything else gets DEFAULT_ICON
ICONS = {
    T_NEW_ORDER: ("package", "orange"),
    T_ORDER_UPDATE: ("package", "blue"),
    T_MESSAGE: ("message-circle", "green"),
    T_FOLLOW: ("user-plus", "purple"),
}
DEFAULT_ICON = ("bell", "gray")


def icon_for(kind: str) -> tuple[str, str]:
    return ICONS.get(kind, DEFAULT_ICON)


def notify(
    *,
    user,
    type: str = T_MESSAGE,
    title: str,
    message: str = "",
    order=None,
    read: bool = False,
):
    """
    Create a notification with a clean, stable shape.
    Notifications are written by other parts of the marketplace (checkout,
    chat, follows); the inbox only reads and acknowledges them.
    """
    return Notification.objects.create(
        user=user,
        type=type,
        title=title,
        message=message or "",
        order=order,
        read=read,
    )


def acknowledge(notification: Notification) -> bool:
    """
    Flip `read` to True. Returns True when a write happened; a notification
    that is already read is left untouched.
    """
    if notification.read:
        return False
    notification.read = True
    notification.save(update_fields=["read"])
    logger.info("notification %s read", notification.pk, extra={"user": notification.user_id})
    return True


def acknowledge_all(user) -> int:
    """Mark every unread notification of `user` read; one refresh for the live inbox."""
    count = Notification.objects.filter(user=user, read=False).update(read=True)
    if count:
        broadcast_change("notifications", user.pk)
    return count


def destination_after_ack(notification: Notification, fallback: str) -> str:
    """Notifications about an order lead to the orders page."""
    if notification.order_id:
        return settings.ORDERS_URL
    return fallback
