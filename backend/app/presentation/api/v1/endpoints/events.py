"""Server-sent events stream for dashboard clients."""

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from app.application.services import SSEManager
from app.infrastructure.dependencies import get_sse_manager

router = APIRouter(tags=["Events"])


@router.get("/events")
async def event_stream(
    sse: SSEManager = Depends(get_sse_manager),
) -> StreamingResponse:
    """SSE endpoint for 'upload_progress' and 'upload_progress_cleared' events.

    The progress values are UI feedback only and do not track real transfers.
    """
    return StreamingResponse(
        sse.subscribe(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
