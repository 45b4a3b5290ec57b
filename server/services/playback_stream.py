"""
Server-Sent Events stream of playback frames.

Runs a PlaybackScheduler on the request's event loop and forwards every
render call as an SSE event, so a browser canvas (or any other client)
can paint frames without re-implementing the timing rules.
"""

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict, Optional

from Gloss.dicts.provider import Descriptor, DictionaryProvider
from Gloss.playback import AsyncioHost, PlaybackScheduler, Timing, frame_payload

logger = logging.getLogger(__name__)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "Access-Control-Allow-Origin": "*",
    "X-Accel-Buffering": "no",
}


class SSEEvent:
    """A server-sent event."""
    def __init__(self, event_type: str, data: Dict[str, Any], event_id: Optional[str] = None):
        self.type = event_type
        self.data = data
        self.id = event_id or str(int(datetime.now(timezone.utc).timestamp() * 1000))

    def format(self) -> str:
        """Format the event for SSE protocol. Must end with \\n\\n."""
        lines = []
        if self.id:
            lines.append(f"id: {self.id}")
        if self.type:
            lines.append(f"event: {self.type}")
        lines.append(f"data: {json.dumps(self.data, ensure_ascii=False)}")
        return "\n".join(lines) + "\n\n"


class QueueRenderer:
    """Render contract implementation that queues frames as SSE events."""

    def __init__(self, queue: "asyncio.Queue[SSEEvent]") -> None:
        self.queue = queue
        self.frames = 0

    def render(self, descriptor: Descriptor, progress: float, unit: str) -> None:
        self.frames += 1
        self.queue.put_nowait(SSEEvent("frame", frame_payload(descriptor, progress, unit)))

    def render_idle(self) -> None:
        self.queue.put_nowait(SSEEvent("idle", {"frames": self.frames}))


async def stream_playback(
    text: str,
    speed: float,
    provider: DictionaryProvider,
    timing: Timing,
    max_seconds: float,
) -> AsyncIterator[str]:
    """Yield formatted SSE events for one playback until idle or timeout.

    Client disconnects cancel the generator, which cancels the scheduler.
    """
    queue: "asyncio.Queue[SSEEvent]" = asyncio.Queue()
    renderer = QueueRenderer(queue)
    scheduler = PlaybackScheduler(provider, renderer, AsyncioHost(timing.tick_interval_ms), timing)
    loop = asyncio.get_running_loop()
    deadline = loop.time() + max(0.0, max_seconds)
    try:
        units = scheduler.submit(text, speed)
        yield SSEEvent("start", {"units": units, "speed": speed}).format()
        while True:
            remaining = deadline - loop.time()
            try:
                if remaining <= 0:
                    raise asyncio.TimeoutError()
                event = await asyncio.wait_for(queue.get(), timeout=remaining)
            except asyncio.TimeoutError:
                logger.warning(f"[STREAM] Playback exceeded {max_seconds}s, closing stream")
                yield SSEEvent("timeout", {"frames": renderer.frames}).format()
                break
            yield event.format()
            if event.type == "idle":
                break
    except asyncio.CancelledError:
        logger.debug("[STREAM] Client disconnected")
        raise
    finally:
        scheduler.cancel()
        logger.debug(f"[STREAM] Closed after {renderer.frames} frame(s)")
