"""Drop timer: level -> interval, repeating pygame timer"""
import logging
from typing import Callable, Optional

import pygame

from tetris_config import CONFIG

log = logging.getLogger(__name__)

DROP_EVENT = pygame.USEREVENT + 1


def interval_for_level(level: int) -> float:
    return max(CONFIG["MIN_DROP_MS"], CONFIG["INITIAL_DROP_MS"] * CONFIG["SPEEDUP"] ** (level - 1))


class DropScheduler:
    """
    Wraps pygame.time.set_timer so gravity ticks arrive on the same event
    queue as key presses. The host forwards every event to handle(); ticks
    posted before disarm() are dropped there.
    """
    def __init__(self, event_type: int = DROP_EVENT, set_timer: Optional[Callable] = None):
        self.event_type = event_type
        self._set_timer = set_timer or pygame.time.set_timer
        self.interval_ms: Optional[int] = None
        self.on_tick: Optional[Callable[[], None]] = None

    @property
    def armed(self) -> bool:
        return self.on_tick is not None

    def arm(self, interval_ms: float, on_tick: Callable[[], None]):
        self.disarm()
        self.interval_ms = max(1, int(round(interval_ms)))
        self.on_tick = on_tick
        self._set_timer(self.event_type, self.interval_ms)
        log.debug("drop timer armed at %d ms", self.interval_ms)

    def disarm(self):
        if not self.armed:
            return
        self._set_timer(self.event_type, 0)
        self.interval_ms = None
        self.on_tick = None
        log.debug("drop timer disarmed")

    def handle(self, event) -> bool:
        if event.type != self.event_type:
            return False
        if self.on_tick is not None:
            self.on_tick()
        return True
