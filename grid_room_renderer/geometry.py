#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/geometry.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .camera import Camera, ScreenPoint
from .config import WorldConfig
from .math_utils import Vec3

# Step past the near clip plane when a width-axis line's near end is clipped
NEAR_FALLBACK_EPSILON = 0.01


class Orientation(Enum):
    HORIZONTAL = 'horizontal'  # constant depth, spans the room's width
    VERTICAL = 'vertical'      # constant lateral x, spans the visible depth


@dataclass
class Polygon:
    """A named room surface; points keeps only corners that projected."""
    name: str
    points: List[ScreenPoint]


@dataclass
class GridLine:
    index: int
    orientation: Orientation
    start: ScreenPoint
    end: ScreenPoint

    @property
    def average_depth(self) -> float:
        return (self.start.depth + self.end.depth) / 2.0

    @property
    def midpoint(self):
        return ((self.start.x + self.end.x) / 2.0,
                (self.start.y + self.end.y) / 2.0)


@dataclass
class RoomSnapshot:
    """Projected room for one viewpoint; rebuilt in full on every change."""
    corners: Dict[str, Optional[ScreenPoint]] = field(default_factory=dict)
    floor: Optional[Polygon] = None
    ceiling: Optional[Polygon] = None
    walls: Dict[str, Polygon] = field(default_factory=dict)
    grid_lines: List[GridLine] = field(default_factory=list)

    def lines(self, orientation: Orientation) -> List[GridLine]:
        return [g for g in self.grid_lines if g.orientation is orientation]


def room_corners(world: WorldConfig) -> Dict[str, Vec3]:
    """The eight world-space corners of the room box."""
    far, near = 0.0, float(world.max_index)
    left, right = 0.0, float(world.max_index)
    floor, ceiling = world.floor_level, world.ceiling_level
    return {
        'left-far-floor': Vec3(left, floor, far),
        'right-far-floor': Vec3(right, floor, far),
        'right-near-floor': Vec3(right, floor, near),
        'left-near-floor': Vec3(left, floor, near),
        'left-far-ceiling': Vec3(left, ceiling, far),
        'right-far-ceiling': Vec3(right, ceiling, far),
        'right-near-ceiling': Vec3(right, ceiling, near),
        'left-near-ceiling': Vec3(left, ceiling, near),
    }


# Corner order per surface. The near (south) wall is never built: it
# surrounds the camera and would cover the whole view.
SURFACES = {
    'floor': ('left-far-floor', 'right-far-floor',
              'right-near-floor', 'left-near-floor'),
    'ceiling': ('left-far-ceiling', 'right-far-ceiling',
                'right-near-ceiling', 'left-near-ceiling'),
    'north': ('left-far-floor', 'right-far-floor',
              'right-far-ceiling', 'left-far-ceiling'),
    'west': ('left-near-floor', 'left-far-floor',
             'left-far-ceiling', 'left-near-ceiling'),
    'east': ('right-near-floor', 'right-far-floor',
             'right-far-ceiling', 'right-near-ceiling'),
}

WALLS = ('north', 'west', 'east')


def make_polygon(name: str, points: Sequence[Optional[ScreenPoint]]) -> Optional[Polygon]:
    """Drop absent corners; a polygon needs at least three that survive."""
    valid = [p for p in points if p is not None]
    if len(valid) < 3:
        return None
    return Polygon(name, valid)


def clip_to_near(points: Sequence[Vec3], limit: float) -> List[Vec3]:
    """
    Sutherland-Hodgman clip of a world polygon to depth <= `limit`.

    Edges that cross the plane are cut where they meet it.
    """
    clipped: List[Vec3] = []
    if not points:
        return clipped
    prev = points[-1]
    prev_inside = prev.z <= limit
    for current in points:
        current_inside = current.z <= limit
        if current_inside != prev_inside:
            t = (limit - prev.z) / (current.z - prev.z)
            clipped.append(Vec3(prev.x + (current.x - prev.x) * t,
                                prev.h + (current.h - prev.h) * t,
                                limit))
        if current_inside:
            clipped.append(current)
        prev = current
        prev_inside = current_inside
    return clipped


def _horizontal_line(camera: Camera, viewpoint, world: WorldConfig,
                     index: int) -> Optional[GridLine]:
    h = world.floor_level
    start = camera.project(viewpoint, 0.0, h, index)
    end = camera.project(viewpoint, world.max_index, h, index)
    if start is None or end is None:
        return None
    return GridLine(index, Orientation.HORIZONTAL, start, end)


def _vertical_line(camera: Camera, viewpoint, world: WorldConfig,
                   index: int) -> Optional[GridLine]:
    h = world.floor_level
    far = camera.project(viewpoint, index, h, 0.0)
    near = camera.project(viewpoint, index, h, world.max_index)

    if near is None:
        fallback = viewpoint.y - (camera.near_clip + NEAR_FALLBACK_EPSILON)
        if 0.0 < fallback < world.max_index:
            near = camera.project(viewpoint, index, h, fallback)

    if far is None or near is None:
        return None
    return GridLine(index, Orientation.VERTICAL, far, near)


def build_room(world: WorldConfig, camera: Camera, viewpoint,
               clip_surfaces: bool = False) -> RoomSnapshot:
    """
    Project the room box and its floor grid for `viewpoint`.

    Corners behind the near clip plane come back as None in `corners`.
    By default a surface keeps only its projected corners and is left out
    when fewer than three survive. With `clip_surfaces` each surface is
    first cut at the near plane, so the floor, ceiling and side walls that
    reach behind the viewer still show their visible part.
    """
    snapshot = RoomSnapshot()
    world_corners = room_corners(world)
    for key, v in world_corners.items():
        snapshot.corners[key] = camera.project(viewpoint, v.x, v.h, v.z)

    limit = viewpoint.y - (camera.near_clip + NEAR_FALLBACK_EPSILON)

    def surface(name):
        if clip_surfaces:
            kept = clip_to_near([world_corners[k] for k in SURFACES[name]], limit)
            return make_polygon(name, [camera.project(viewpoint, v.x, v.h, v.z)
                                       for v in kept])
        return make_polygon(name, [snapshot.corners[k] for k in SURFACES[name]])

    snapshot.floor = surface('floor')
    snapshot.ceiling = surface('ceiling')
    for name in WALLS:
        poly = surface(name)
        if poly is not None:
            snapshot.walls[name] = poly

    for i in range(world.size):
        line = _horizontal_line(camera, viewpoint, world, i)
        if line is not None:
            snapshot.grid_lines.append(line)

    for i in range(world.size):
        line = _vertical_line(camera, viewpoint, world, i)
        if line is not None:
            snapshot.grid_lines.append(line)

    return snapshot
