#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math


class Vec3:
    """Immutable 3-component world point (lateral x, height, depth)."""
    __slots__ = ('x', 'h', 'z')

    def __init__(self, x: float, h: float, z: float):
        self.x = float(x)
        self.h = float(h)
        self.z = float(z)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.h:.2f}, {self.z:.2f})"

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return (self.x, self.h, self.z) == (other.x, other.h, other.z)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.h, self.z))


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points on the grid plane."""
    return math.hypot(x2 - x1, y2 - y1)
