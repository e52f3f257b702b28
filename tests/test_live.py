import asyncio

import pytest
from channels.db import database_sync_to_async
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator
from django.contrib.auth.models import AnonymousUser

from sellerdesk.consumers import OrdersConsumer, NotificationsConsumer
from sellerdesk.models import Order, Notification, User
from sellerdesk.services import live
from sellerdesk.services.live import LiveQuery, watch, group_name


def as_user(app, user):
    """Stand-in for AuthMiddlewareStack: put `user` in the scope."""
    async def wrapped(scope, receive, send):
        return await app({**scope, "user": user}, receive, send)
    return wrapped


@database_sync_to_async
def make_seller(email="live@example.com"):
    return User.objects.create_user(email=email, password="live-pass-123")


@database_sync_to_async
def place_order(seller, **kwargs):
    return Order.objects.create(seller=seller, buyer_name=kwargs.pop("buyer_name", "Ana"), **kwargs)


def test_unknown_collection_is_rejected():
    with pytest.raises(ValueError):
        LiveQuery("products", 1)


def test_change_is_announced_only_after_commit(seller, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks() as callbacks:
        Order.objects.create(seller=seller, buyer_name="Ana")

    assert len(callbacks) == 1


@pytest.mark.asyncio
@pytest.mark.django_db(transaction=True)
async def test_watch_yields_initial_then_refreshed_snapshot():
    seller = await make_seller()
    snapshots = watch(LiveQuery("orders", seller.pk))

    first = await snapshots.__anext__()
    assert first.orders == []

    await place_order(seller, status="To Ship")
    second = await asyncio.wait_for(snapshots.__anext__(), timeout=2)
    assert second.new_order_count == 1

    await snapshots.aclose()
    assert not get_channel_layer().groups.get(group_name("orders", seller.pk))


@pytest.mark.asyncio
@pytest.mark.django_db(transaction=True)
async def test_watch_ignores_other_owners():
    seller = await make_seller()
    other = await make_seller("other-live@example.com")
    snapshots = watch(LiveQuery("orders", seller.pk))
    await snapshots.__anext__()

    await place_order(other)
    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(snapshots.__anext__(), timeout=0.3)


@pytest.mark.asyncio
@pytest.mark.django_db(transaction=True)
async def test_orders_socket_streams_snapshots():
    seller = await make_seller()
    communicator = WebsocketCommunicator(as_user(OrdersConsumer.as_asgi(), seller), "/ws/seller/orders/")

    connected, _ = await communicator.connect()
    assert connected
    assert await communicator.receive_json_from() == {"type": "orders", "orders": [], "new_order_count": 0}

    await place_order(seller, buyer_name="Ben", status="To Ship", items=[{"sku": "EL-001"}])
    update = await communicator.receive_json_from(timeout=2)
    assert update["new_order_count"] == 1
    assert update["orders"][0]["buyer_name"] == "Ben"
    assert update["orders"][0]["item_count"] == 1

    await communicator.disconnect()
    assert not get_channel_layer().groups.get(group_name("orders", seller.pk))


@pytest.mark.asyncio
@pytest.mark.django_db(transaction=True)
async def test_notifications_socket_counts_unread():
    seller = await make_seller()
    communicator = WebsocketCommunicator(as_user(NotificationsConsumer.as_asgi(), seller), "/ws/notifications/")
    await communicator.connect()
    await communicator.receive_json_from()

    await database_sync_to_async(Notification.objects.create)(user=seller, title="Followed", type="follow")
    update = await communicator.receive_json_from(timeout=2)

    assert update["type"] == "notifications"
    assert update["unread_count"] == 1
    assert update["notifications"][0]["icon"] == "user-plus"

    await communicator.disconnect()


@pytest.mark.asyncio
async def test_socket_refuses_anonymous():
    communicator = WebsocketCommunicator(as_user(OrdersConsumer.as_asgi(), AnonymousUser()), "/ws/seller/orders/")

    connected, code = await communicator.connect()

    assert connected is False
    assert code == 4401


@pytest.mark.asyncio
@pytest.mark.django_db(transaction=True)
async def test_socket_reports_failed_snapshot_and_closes(monkeypatch):
    def broken(owner_id):
        raise RuntimeError("backend unavailable")

    monkeypatch.setitem(live.SNAPSHOT_BUILDERS, "orders", broken)
    seller = await make_seller()
    communicator = WebsocketCommunicator(as_user(OrdersConsumer.as_asgi(), seller), "/ws/seller/orders/")

    await communicator.connect()
    frame = await communicator.receive_json_from()
    closed = await communicator.receive_output()

    assert frame["type"] == "error"
    assert closed["type"] == "websocket.close"
    assert closed["code"] == 1011
    await communicator.disconnect()
