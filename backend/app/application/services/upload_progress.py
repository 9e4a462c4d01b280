"""Cosmetic upload progress feedback.

The progress reported here is NOT transfer progress. Attachments are committed
to the store before the first event is sent; the animator merely counts from 0
to 100 percent on a fixed, randomised timer so the UI has something to show.
Losing or cancelling an animation has no effect on stored data.
"""

import asyncio
import logging
import random

from .sse_manager import SSEManager

logger = logging.getLogger(__name__)

PROGRESS_EVENT = "upload_progress"
CLEARED_EVENT = "upload_progress_cleared"


class UploadProgressAnimator:
    """Broadcasts timer-driven progress events for freshly attached files."""

    def __init__(
        self,
        sse_manager: SSEManager,
        *,
        min_seconds: float = 1.2,
        max_seconds: float = 2.0,
        tick_seconds: float = 0.1,
        linger_seconds: float = 0.4,
        rng: random.Random | None = None,
    ):
        self._sse = sse_manager
        self._min_seconds = min_seconds
        self._max_seconds = max(min_seconds, max_seconds)
        self._tick_seconds = tick_seconds
        self._linger_seconds = linger_seconds
        self._rng = rng or random.Random()
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def active_count(self) -> int:
        return len(self._tasks)

    def start(self, project_id: str, file_id: str) -> asyncio.Task[None] | None:
        """Fire-and-forget an animation. Returns None outside an event loop."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, skipping progress animation for %s", file_id)
            return None

        duration = self._rng.uniform(self._min_seconds, self._max_seconds)
        task = loop.create_task(self._animate(project_id, file_id, duration))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _animate(self, project_id: str, file_id: str, duration: float) -> None:
        loop = asyncio.get_running_loop()
        started = loop.time()
        payload = {"project_id": project_id, "file_id": file_id}
        try:
            while True:
                elapsed = loop.time() - started
                progress = 100.0 if duration <= 0 else min(100.0, elapsed / duration * 100)
                await self._sse.broadcast(PROGRESS_EVENT, {**payload, "progress": round(progress, 1)})
                if progress >= 100.0:
                    break
                await asyncio.sleep(self._tick_seconds)

            await asyncio.sleep(self._linger_seconds)
            await self._sse.broadcast(CLEARED_EVENT, payload)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.warning("Progress animation failed for file %s", file_id, exc_info=True)

    async def shutdown(self) -> None:
        """Cancel every running animation."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
