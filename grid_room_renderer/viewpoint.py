#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/viewpoint.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging
from enum import Enum
from typing import Optional

from .config import WorldConfig
from .math_utils import clamp

logger = logging.getLogger(__name__)

MOVE_EPSILON = 1e-9


class Direction(Enum):
    FORWARD = 'forward'
    BACK = 'back'
    LEFT = 'left'
    RIGHT = 'right'

    @classmethod
    def parse(cls, name: str) -> 'Direction':
        """Accept a direction name or its one-letter / WASD shorthand."""
        key = name.strip().lower()
        found = _ALIASES.get(key)
        if found is None:
            raise ValueError(f"unknown direction: {name!r}")
        return found


# (dx, dy) per unit step; forward is toward decreasing depth
_STEPS = {
    Direction.FORWARD: (0, -1),
    Direction.BACK: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_ALIASES = {
    'forward': Direction.FORWARD, 'f': Direction.FORWARD, 'w': Direction.FORWARD,
    'back': Direction.BACK, 'b': Direction.BACK, 's': Direction.BACK,
    'left': Direction.LEFT, 'l': Direction.LEFT, 'a': Direction.LEFT,
    'right': Direction.RIGHT, 'r': Direction.RIGHT, 'd': Direction.RIGHT,
}


def direction_for_key(key) -> Optional[Direction]:
    """
    Map an input key to a direction.

    Accepts curses key codes for the arrow keys, W/A/S/D codes in either
    case, or single-character strings. Anything else maps to None.
    """
    arrows = {
        curses.KEY_UP: Direction.FORWARD,
        curses.KEY_DOWN: Direction.BACK,
        curses.KEY_LEFT: Direction.LEFT,
        curses.KEY_RIGHT: Direction.RIGHT,
    }
    if isinstance(key, int):
        if key in arrows:
            return arrows[key]
        if not 0 <= key < 0x110000:
            return None
        key = chr(key)
    if not isinstance(key, str) or len(key) != 1:
        return None
    return {
        'w': Direction.FORWARD,
        's': Direction.BACK,
        'a': Direction.LEFT,
        'd': Direction.RIGHT,
    }.get(key.lower())


class Viewpoint:
    """Continuous viewer position: x is lateral, y is the depth coordinate."""
    __slots__ = ('x', 'y')

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"Viewpoint({self.x:g}, {self.y:g})"

    def __eq__(self, other):
        if isinstance(other, Viewpoint):
            return self.x == other.x and self.y == other.y
        return NotImplemented


class ViewpointController:
    """Applies unit grid steps to the viewpoint, clamped inside the walls."""

    def __init__(self, world: WorldConfig, start: Optional[Viewpoint] = None):
        self.world = world
        if start is None:
            start = Viewpoint(world.center, world.center)
        self.viewpoint = Viewpoint(self._clamp(start.x), self._clamp(start.y))

    def _clamp(self, value: float) -> float:
        return clamp(value, self.world.lower_bound, self.world.upper_bound)

    def move(self, direction: Direction) -> bool:
        """
        Step one cell in `direction`.

        Returns True when the viewpoint changed, False for a no-op at a
        boundary.
        """
        dx, dy = _STEPS[direction]
        vp = self.viewpoint
        new_x = self._clamp(vp.x + dx)
        new_y = self._clamp(vp.y + dy)

        if abs(new_x - vp.x) <= MOVE_EPSILON and abs(new_y - vp.y) <= MOVE_EPSILON:
            logger.debug("move %s blocked at %r", direction.value, vp)
            return False

        vp.x = new_x
        vp.y = new_y
        logger.debug("move %s -> %r", direction.value, vp)
        return True
