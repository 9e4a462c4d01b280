"""SSE Manager — in-process event broadcaster for dashboard clients.

Used to push upload progress events to any connected EventSource.
"""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator
from typing import Any

logger = logging.getLogger(__name__)


class SSEManager:
    """Fans server-sent events out to every subscribed client.

    Each subscriber owns a bounded asyncio.Queue. A subscriber whose queue
    overflows is disconnected rather than slowing down the broadcaster.
    """

    def __init__(self, max_queue_size: int = 256) -> None:
        self._max_queue_size = max_queue_size
        self._queues: list[asyncio.Queue[str | None]] = []

    @staticmethod
    def format_event(event_type: str, data: dict[str, Any]) -> str:
        return f"event: {event_type}\ndata: {json.dumps(data)}\n\n"

    async def subscribe(self) -> AsyncGenerator[str, None]:
        """Yield formatted SSE messages until the manager shuts down.

        The queue is released when the consumer stops iterating.
        """
        queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=self._max_queue_size)
        self._queues.append(queue)
        logger.debug("SSE client connected (%d total)", len(self._queues))
        try:
            while True:
                message = await queue.get()
                if message is None:
                    break
                yield message
        finally:
            if queue in self._queues:
                self._queues.remove(queue)
            logger.debug("SSE client disconnected (%d left)", len(self._queues))

    async def broadcast(self, event_type: str, data: dict[str, Any]) -> int:
        """Queue an event for every subscriber. Returns how many received it."""
        message = self.format_event(event_type, data)
        delivered = 0
        overflowing: list[asyncio.Queue[str | None]] = []

        for queue in self._queues:
            try:
                queue.put_nowait(message)
                delivered += 1
            except asyncio.QueueFull:
                overflowing.append(queue)

        for queue in overflowing:
            logger.warning("SSE client queue full, disconnecting")
            self._queues.remove(queue)
            # Drop one pending message so the sentinel always fits
            queue.get_nowait()
            queue.put_nowait(None)

        return delivered

    async def shutdown(self) -> None:
        """Disconnect all connected clients."""
        for queue in self._queues:
            try:
                queue.put_nowait(None)
            except asyncio.QueueFull:
                queue.get_nowait()
                queue.put_nowait(None)
        self._queues.clear()

    @property
    def client_count(self) -> int:
        return len(self._queues)
