import asyncio
import logging

from channels.generic.websocket import AsyncJsonWebsocketConsumer

from .serializers import SNAPSHOT_PAYLOADS
from .services.live import LiveQuery, watch

logger = logging.getLogger(__name__)

# close codes
UNAUTHENTICATED = 4401
SNAPSHOT_FAILED = 1011


class LiveSnapshotConsumer(AsyncJsonWebsocketConsumer):
    """
    Streams full snapshots of one of the signed-in user's collections.

    The subscription lives exactly as long as the socket: it is opened after
    the auth check on connect and released on disconnect. A snapshot that
    cannot be built ends the stream with an error frame so the page can show
    that its data went stale.
    """
    collection = None

    async def connect(self):
        user = self.scope.get("user")
        if user is None or not user.is_authenticated:
            await self.close(code=UNAUTHENTICATED)
            return

        self.query = LiveQuery(self.collection, user.pk)
        self.to_payload = SNAPSHOT_PAYLOADS[self.collection]
        await self.accept()
        self.stream = asyncio.create_task(self._stream())

    async def disconnect(self, code):
        stream = getattr(self, "stream", None)
        if stream is None or stream.done():
            return
        stream.cancel()
        try:
            await stream
        except asyncio.CancelledError:
            pass

    async def receive_json(self, content, **kwargs):
        # read-only socket; acknowledgments go through HTTP
        return

    async def _stream(self):
        snapshots = watch(self.query)
        try:
            async for snapshot in snapshots:
                await self.send_json(self.to_payload(snapshot))
        except Exception:
            logger.exception(
                "live stream failed",
                extra={"collection": self.collection, "user": self.query.owner_id},
            )
            await self.send_json({"type": "error", "message": "Live updates stopped. Reload to try again."})
            await self.close(code=SNAPSHOT_FAILED)
        finally:
            await snapshots.aclose()


class OrdersConsumer(LiveSnapshotConsumer):
    collection = "orders"


class NotificationsConsumer(LiveSnapshotConsumer):
    collection = "notifications"
