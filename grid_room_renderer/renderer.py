#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from typing import List, Optional, Sequence, Tuple

from .camera import Camera, ScreenPoint
from .config import RenderConfig
from .scene import LinePrimitive, PolygonPrimitive
from .session import Frame

Point2 = Tuple[float, float]


class DrawingSink:
    """
    Target for drawing commands.

    Submission order is draw order: later commands paint over earlier ones.
    """

    def clear(self):
        raise NotImplementedError

    def polygon(self, points: Sequence[Point2], style: str):
        raise NotImplementedError

    def line(self, start: Point2, end: Point2, style: str):
        raise NotImplementedError

    def text(self, x: float, y: float, content: str, font_size: float,
             align: str = 'start', style: str = 'grid-label'):
        raise NotImplementedError


class Renderer:
    """
    Stateless frame renderer.

    render(sink, frame, camera, config) clears the sink and submits one frame:
      1. primitives in painter's order (floor ... walls/grid lines ... ceiling)
      2. optional horizon and vanishing guides
      3. grid-line labels
    """

    def render(self, sink: DrawingSink, frame: Frame, camera: Camera,
               config: Optional[RenderConfig] = None):
        config = config or RenderConfig()
        sink.clear()

        for prim in frame.primitives:
            if isinstance(prim, PolygonPrimitive):
                sink.polygon([(p.x, p.y) for p in prim.points], prim.style)
            elif isinstance(prim, LinePrimitive):
                sink.line((prim.start.x, prim.start.y),
                          (prim.end.x, prim.end.y), prim.style)

        if config.show_guides:
            for start, end, style in guide_lines(frame, camera):
                sink.line(start, end, style)

        for _line, label in frame.labels:
            sink.text(label.x, label.y, label.text, label.font_size,
                      label.align, 'grid-label')


def _extend_to_border(origin: Point2, through: Point2, width: float,
                      height: float) -> Optional[Point2]:
    """Point where the ray origin->through leaves the [0,w]x[0,h] rectangle."""
    dx = through[0] - origin[0]
    dy = through[1] - origin[1]
    if dx == 0 and dy == 0:
        return None

    t_exit = float('inf')
    if dx > 0: t_exit = min(t_exit, (width - origin[0]) / dx)
    if dx < 0: t_exit = min(t_exit, -origin[0] / dx)
    if dy > 0: t_exit = min(t_exit, (height - origin[1]) / dy)
    if dy < 0: t_exit = min(t_exit, -origin[1] / dy)
    return (origin[0] + dx * t_exit, origin[1] + dy * t_exit)


def guide_lines(frame: Frame, camera: Camera) -> List[Tuple[Point2, Point2, str]]:
    """
    Horizon at eye level plus vanishing lines through the far-wall corners.

    The optical axis is fixed, so the vanishing point is the viewport centre.
    """
    vp = camera.viewport
    vanish = (vp.center_x, vp.center_y)
    guides = [((0.0, vp.center_y), (vp.width, vp.center_y), 'horizon-line')]

    for key in ('left-far-floor', 'right-far-floor',
                'left-far-ceiling', 'right-far-ceiling'):
        corner: Optional[ScreenPoint] = frame.snapshot.corners.get(key)
        if corner is None:
            continue
        end = _extend_to_border(vanish, (corner.x, corner.y), vp.width, vp.height)
        if end is not None:
            guides.append((vanish, end, 'vanishing-line'))
    return guides
