"""Unit tests for the SSE broadcaster and the cosmetic upload progress animator."""

import asyncio
import json
import random

import pytest

from app.application.services import SSEManager, UploadProgressAnimator
from app.application.services.upload_progress import CLEARED_EVENT, PROGRESS_EVENT


class RecordingBroadcaster:
    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    async def broadcast(self, event_type: str, data: dict) -> int:
        self.events.append((event_type, data))
        return 1


class FailingBroadcaster:
    async def broadcast(self, event_type: str, data: dict) -> int:
        raise RuntimeError("stream closed")


def _animator(broadcaster, seconds: float = 0.05) -> UploadProgressAnimator:
    return UploadProgressAnimator(
        broadcaster,
        min_seconds=seconds,
        max_seconds=seconds,
        tick_seconds=0.01,
        linger_seconds=0.01,
        rng=random.Random(0),
    )


# ── UploadProgressAnimator ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_animation_counts_to_100_then_clears():
    broadcaster = RecordingBroadcaster()
    animator = _animator(broadcaster)

    task = animator.start("1", "file-a")
    assert task is not None
    await task

    progress_values = [d["progress"] for e, d in broadcaster.events if e == PROGRESS_EVENT]
    assert progress_values[-1] == 100.0
    assert progress_values == sorted(progress_values)
    assert broadcaster.events[-1] == (CLEARED_EVENT, {"project_id": "1", "file_id": "file-a"})
    assert animator.active_count == 0


@pytest.mark.asyncio
async def test_zero_duration_jumps_straight_to_done():
    broadcaster = RecordingBroadcaster()
    animator = _animator(broadcaster, seconds=0)

    await animator.start("1", "file-b")

    assert [e for e, _ in broadcaster.events] == [PROGRESS_EVENT, CLEARED_EVENT]
    assert broadcaster.events[0][1]["progress"] == 100.0


@pytest.mark.asyncio
async def test_broadcast_failure_is_contained():
    animator = _animator(FailingBroadcaster())

    await animator.start("1", "file-c")

    assert animator.active_count == 0


@pytest.mark.asyncio
async def test_shutdown_cancels_running_animations():
    animator = _animator(RecordingBroadcaster(), seconds=30)
    task = animator.start("1", "file-d")
    await asyncio.sleep(0)
    assert animator.active_count == 1

    await animator.shutdown()

    assert task.cancelled()
    assert animator.active_count == 0


def test_start_outside_event_loop_is_skipped():
    animator = _animator(RecordingBroadcaster())
    assert animator.start("1", "file-e") is None


# ── SSEManager ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_sse_subscriber_receives_formatted_event():
    sse = SSEManager()
    stream = sse.subscribe()
    pending = asyncio.ensure_future(stream.__anext__())
    await asyncio.sleep(0)
    assert sse.client_count == 1

    delivered = await sse.broadcast(PROGRESS_EVENT, {"file_id": "f", "progress": 50.0})

    assert delivered == 1
    message = await pending
    event_line, data_line, _, _ = message.split("\n")
    assert event_line == f"event: {PROGRESS_EVENT}"
    assert json.loads(data_line.removeprefix("data: ")) == {"file_id": "f", "progress": 50.0}

    await sse.shutdown()
    with pytest.raises(StopAsyncIteration):
        await stream.__anext__()
    assert sse.client_count == 0


@pytest.mark.asyncio
async def test_sse_disconnects_overflowing_subscriber():
    sse = SSEManager(max_queue_size=1)
    stream = sse.subscribe()
    pending = asyncio.ensure_future(stream.__anext__())
    await asyncio.sleep(0)

    assert await sse.broadcast(PROGRESS_EVENT, {"progress": 10.0}) == 1
    assert await sse.broadcast(PROGRESS_EVENT, {"progress": 20.0}) == 0

    assert sse.client_count == 0
    with pytest.raises(StopAsyncIteration):
        await pending


@pytest.mark.asyncio
async def test_broadcast_without_subscribers():
    sse = SSEManager()
    assert await sse.broadcast(CLEARED_EVENT, {"file_id": "x"}) == 0
