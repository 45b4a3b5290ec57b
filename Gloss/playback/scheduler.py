"""
Cooperative playback scheduler.

Walks the sign units of one submission, rendering each with a progress
value derived from wall-clock time, pausing between units, and rendering
the idle state once the queue is exhausted. The scheduler never blocks:
it asks its host for at most one pending frame tick and at most one
pending pause timer at any moment.

States::

    IDLE --submit--> PLAYING(i) --progress==1--> PAUSING(i) --timer--> PLAYING(i+1)
                                                            \\--last--> DONE --> IDLE
    any --cancel/submit--> IDLE
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Protocol

from Gloss.dicts.provider import DictionaryProvider
from Gloss.errors import require_positive_speed
from Gloss.tokenize.base import SignUnit
from Gloss.tokenize.phrases import PhraseTokenizer
from .render import Renderer
from .timing import DEFAULT_TIMING, PlaybackItem, Timing, make_item

logger = logging.getLogger(__name__)


class SchedulerState(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSING = "pausing"
    DONE = "done"


class Handle(Protocol):
    def cancel(self) -> None:
        ...


class Host(Protocol):
    """Event-loop services the scheduler needs: a clock, frame ticks and one-shot timers."""

    def now_ms(self) -> float:
        ...

    def schedule_tick(self, callback: Callable[[], None]) -> Handle:
        ...

    def schedule_timer(self, delay_ms: float, callback: Callable[[], None]) -> Handle:
        ...


@dataclass
class ScheduleState:
    queue: List[SignUnit]
    speed: float
    cursor: int = 0
    is_running: bool = True
    start_time: float = 0.0
    item: Optional[PlaybackItem] = field(default=None)


class PlaybackScheduler:
    def __init__(
        self,
        provider: DictionaryProvider,
        renderer: Renderer,
        host: Host,
        timing: Optional[Timing] = None,
    ) -> None:
        self.provider = provider
        self.renderer = renderer
        self.host = host
        self.timing = timing or DEFAULT_TIMING
        self.tokenizer = PhraseTokenizer(provider)
        self._state = SchedulerState.IDLE
        self._session: Optional[ScheduleState] = None
        self._tick: Optional[Handle] = None
        self._timer: Optional[Handle] = None

    # ---- Introspection ----
    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._session is not None

    @property
    def queue(self) -> List[SignUnit]:
        return list(self._session.queue) if self._session else []

    @property
    def cursor(self) -> int:
        return self._session.cursor if self._session else 0

    @property
    def current_item(self) -> Optional[PlaybackItem]:
        return self._session.item if self._session else None

    # ---- Public API ----
    def submit(self, text: str, speed: float = 1.0) -> List[SignUnit]:
        """Replace any in-flight playback with the sign units of ``text``.

        Raises :class:`~Gloss.errors.ConfigurationError` for ``speed <= 0``
        without disturbing the current schedule. Returns the new queue.
        """
        speed = require_positive_speed(speed)
        self.cancel()
        queue = self.tokenizer.tokenize_text(text)
        if not queue:
            logger.debug("[PLAYBACK] Empty submission, rendering idle")
            self.renderer.render_idle()
            return []
        session = ScheduleState(queue=queue, speed=speed)
        self._session = session
        logger.info(f"[PLAYBACK] Starting {len(queue)} unit(s) at speed={speed}")
        self._play_unit(session)
        return list(queue)

    def cancel(self) -> None:
        """Stop playback without rendering idle. Safe to call at any time."""
        if self._tick is not None:
            self._tick.cancel()
            self._tick = None
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._session is not None:
            self._session.is_running = False
            logger.debug(f"[PLAYBACK] Cancelled at unit {self._session.cursor}/{len(self._session.queue)}")
            self._session = None
        self._state = SchedulerState.IDLE

    # ---- State machine ----
    def _play_unit(self, session: ScheduleState) -> None:
        unit = session.queue[session.cursor]
        session.item = make_item(unit, self.provider, session.speed, self.timing)
        session.start_time = self.host.now_ms()
        self._state = SchedulerState.PLAYING
        self._frame(session)

    def _frame(self, session: ScheduleState) -> None:
        if session is not self._session:
            return
        self._tick = None
        item = session.item
        elapsed = self.host.now_ms() - session.start_time
        if item.duration_ms <= 0:
            # Zero-length unit: a single completed frame
            progress = 1.0
        else:
            progress = min(max(elapsed / item.duration_ms, 0.0), 1.0)
        self.renderer.render(item.descriptor, progress, item.unit)
        # The renderer may have cancelled or resubmitted
        if session is not self._session:
            return
        if progress < 1.0:
            self._tick = self.host.schedule_tick(lambda: self._frame(session))
        else:
            self._state = SchedulerState.PAUSING
            self._timer = self.host.schedule_timer(item.pause_ms, lambda: self._after_pause(session))

    def _after_pause(self, session: ScheduleState) -> None:
        if session is not self._session:
            return
        self._timer = None
        session.cursor += 1
        if session.cursor < len(session.queue):
            self._play_unit(session)
        else:
            self._finish(session)

    def _finish(self, session: ScheduleState) -> None:
        self._state = SchedulerState.DONE
        session.is_running = False
        self._session = None
        logger.debug(f"[PLAYBACK] Finished {len(session.queue)} unit(s)")
        try:
            self.renderer.render_idle()
        finally:
            if self._session is None:
                self._state = SchedulerState.IDLE
