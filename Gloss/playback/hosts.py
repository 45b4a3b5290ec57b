from __future__ import annotations

import asyncio
from typing import Callable, Optional


class AsyncioHost:
    """Drives a PlaybackScheduler from an asyncio event loop.

    Frame ticks and pause timers are ``loop.call_later`` handles; the clock
    is the loop's monotonic clock.
    """

    def __init__(self, tick_interval_ms: float = 16.0, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self.tick_interval_ms = tick_interval_ms
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now_ms(self) -> float:
        return self.loop.time() * 1000.0

    def schedule_tick(self, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(self.tick_interval_ms / 1000.0, callback)

    def schedule_timer(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(0.0, delay_ms) / 1000.0, callback)
