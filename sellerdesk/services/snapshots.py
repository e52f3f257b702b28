# sellerdesk/services/snapshots.py
"""
Full result sets for the live views.

A snapshot is rebuilt from scratch on every change and replaces whatever the
page was showing; nothing is patched incrementally.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from sellerdesk.models import Order, Notification


def newest_first(records: Iterable) -> list:
    return sorted(records, key=lambda r: r.created_at, reverse=True)


@dataclass
class OrderSnapshot:
    orders: list = field(default_factory=list)
    new_order_count: int = 0

    def recent(self, limit: int = 5) -> list:
        return self.orders[:limit]


@dataclass
class NotificationSnapshot:
    notifications: list = field(default_factory=list)
    unread_count: int = 0


def build_order_snapshot(orders: Iterable[Order]) -> OrderSnapshot:
    """Sort newest first and count orders waiting to be shipped."""
    ordered = newest_first(orders)
    to_ship = sum(1 for o in ordered if o.status == Order.STATUS_TO_SHIP)
    return OrderSnapshot(orders=ordered, new_order_count=to_ship)


def build_notification_snapshot(notifications: Iterable[Notification]) -> NotificationSnapshot:
    ordered = newest_first(notifications)
    unread = sum(1 for n in ordered if not n.read)
    return NotificationSnapshot(notifications=ordered, unread_count=unread)


def order_snapshot(seller_id) -> OrderSnapshot:
    return build_order_snapshot(Order.objects.filter(seller_id=seller_id))


def notification_snapshot(user_id) -> NotificationSnapshot:
    return build_notification_snapshot(
        Notification.objects.filter(user_id=user_id).select_related("order")
    )
