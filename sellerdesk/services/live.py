# sellerdesk/services/live.py
"""
Live queries over the channel layer.

`watch(query)` is the standing subscription used by the live pages: it yields
the full result set once, then again every time something in the owner's
collection changes. Writers announce changes with `broadcast_change`, which
the model signals call after commit. Any channel layer works as transport
(Redis in production, in-memory in tests).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from asgiref.sync import async_to_sync
from channels.db import database_sync_to_async
from channels.layers import get_channel_layer
from django.db import transaction

from sellerdesk.services import snapshots

logger = logging.getLogger(__name__)

REFRESH = "snapshot.refresh"

# collection -> snapshot builder taking the owner id
SNAPSHOT_BUILDERS = {
    "orders": snapshots.order_snapshot,
    "notifications": snapshots.notification_snapshot,
}


def group_name(collection: str, owner_id) -> str:
    return f"{collection}.{owner_id}"


@dataclass(frozen=True)
class LiveQuery:
    """`<collection> where <owner field> == owner_id`"""

    collection: str
    owner_id: int

    def __post_init__(self):
        if self.collection not in SNAPSHOT_BUILDERS:
            raise ValueError(f"unknown collection {self.collection!r}")

    @property
    def group(self) -> str:
        return group_name(self.collection, self.owner_id)

    def snapshot(self):
        return SNAPSHOT_BUILDERS[self.collection](self.owner_id)


async def watch(query: LiveQuery, channel_layer=None):
    """
    Infinite, lazy sequence of snapshots for `query`.

    Nothing is subscribed until the first snapshot is requested. Closing the
    generator (aclose() or cancelling the task iterating it) leaves the group.
    Errors building a snapshot propagate to the caller.
    """
    layer = channel_layer or get_channel_layer()
    channel = await layer.new_channel()
    await layer.group_add(query.group, channel)
    logger.debug("watching %s on %s", query.group, channel)
    try:
        yield await database_sync_to_async(query.snapshot)()
        while True:
            message = await layer.receive(channel)
            if message.get("type") != REFRESH:
                continue
            yield await database_sync_to_async(query.snapshot)()
    finally:
        await layer.group_discard(query.group, channel)
        logger.debug("stopped watching %s on %s", query.group, channel)


def broadcast_change(collection: str, owner_id) -> None:
    """Tell every watcher of the owner's collection to rebuild, once the write commits."""
    layer = get_channel_layer()
    if layer is None:
        return
    group = group_name(collection, owner_id)

    def _send():
        try:
            async_to_sync(layer.group_send)(group, {"type": REFRESH})
        except Exception:
            # the write itself is committed; watchers catch up on the next change
            logger.exception("could not broadcast change", extra={"group": group})

    transaction.on_commit(_send)
