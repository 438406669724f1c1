#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/debounce.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import time


class Debouncer:
    """
    Coalesces bursts of signals into one action after a quiet period.

    The owner calls trigger() for every signal and polls due() from its
    loop; due() turns True once, `wait` seconds after the last trigger.
    """
    __slots__ = ('wait', 'clock', '_deadline')

    def __init__(self, wait: float = 0.25, clock=time.monotonic):
        self.wait = wait
        self.clock = clock
        self._deadline = None

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def trigger(self):
        self._deadline = self.clock() + self.wait

    def cancel(self):
        self._deadline = None

    def due(self) -> bool:
        if self._deadline is None or self.clock() < self._deadline:
            return False
        self._deadline = None
        return True
