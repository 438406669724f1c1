#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
from typing import List, Optional, Union

from .camera import ScreenPoint
from .config import WorldConfig
from .geometry import GridLine, Polygon, RoomSnapshot

FLOOR_DEPTH = math.inf      # always furthest, drawn first
CEILING_DEPTH = -math.inf   # always nearest, drawn last

WALL_STYLES = {
    'north': 'room-wall-back',
    'west': 'room-wall-left',
    'east': 'room-wall-right',
}


class PolygonPrimitive:
    __slots__ = ('kind', 'style', 'points', 'depth')

    def __init__(self, kind: str, style: str, points: List[ScreenPoint], depth: float):
        self.kind = kind
        self.style = style
        self.points = points
        self.depth = depth

    def __repr__(self):
        return f"PolygonPrimitive({self.kind!r}, depth={self.depth:.2f})"


class LinePrimitive:
    __slots__ = ('style', 'start', 'end', 'depth', 'grid_line')

    def __init__(self, style: str, start: ScreenPoint, end: ScreenPoint,
                 depth: float, grid_line: Optional[GridLine] = None):
        self.style = style
        self.start = start
        self.end = end
        self.depth = depth
        self.grid_line = grid_line  # back-reference for label placement

    @property
    def kind(self) -> str:
        return 'grid-line' if self.grid_line is not None else 'line'

    def __repr__(self):
        return f"LinePrimitive({self.style!r}, depth={self.depth:.2f})"


Primitive = Union[PolygonPrimitive, LinePrimitive]


class Scene:
    """
    Container for drawable primitives keyed by depth.

    ordered() is the painter's algorithm: furthest first, nearest last.
    The sort is stable, so equal keys keep insertion order.
    """

    def __init__(self):
        self.primitives: List[Primitive] = []

    def __len__(self):
        return len(self.primitives)

    def add(self, primitive: Primitive):
        self.primitives.append(primitive)

    def ordered(self) -> List[Primitive]:
        return sorted(self.primitives, key=lambda p: p.depth, reverse=True)

    def clear(self):
        """Remove all primitives from the scene."""
        self.primitives.clear()


def wall_depth(name: str, viewpoint, world: WorldConfig) -> float:
    """
    Distance proxy from the viewer to a wall's plane.

    Side walls add half the visible depth run so they sort behind grid
    lines close to the viewer.
    """
    if name == 'north':
        return viewpoint.y
    visible_mid = viewpoint.y / 2.0
    if name == 'west':
        return viewpoint.x + visible_mid
    if name == 'east':
        return (world.max_index - viewpoint.x) + visible_mid
    raise ValueError(f"unknown wall: {name!r}")


def compose(snapshot: RoomSnapshot, viewpoint, world: WorldConfig) -> Scene:
    """Collect the snapshot's drawable primitives with their depth keys."""
    scene = Scene()

    if snapshot.floor is not None:
        scene.add(_polygon('floor', 'room-floor', snapshot.floor, FLOOR_DEPTH))

    for name, poly in snapshot.walls.items():
        scene.add(_polygon(name, WALL_STYLES[name], poly,
                           wall_depth(name, viewpoint, world)))

    for line in snapshot.grid_lines:
        scene.add(LinePrimitive('grid-line', line.start, line.end,
                                line.average_depth, grid_line=line))

    if snapshot.ceiling is not None:
        scene.add(_polygon('ceiling', 'room-ceiling', snapshot.ceiling, CEILING_DEPTH))

    return scene


def _polygon(kind: str, style: str, poly: Polygon, depth: float) -> PolygonPrimitive:
    return PolygonPrimitive(kind, style, list(poly.points), depth)
