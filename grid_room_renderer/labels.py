#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/labels.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

"""
Numeric labels for projected grid lines.

Each orientation builds one candidate placement and runs it through a short
list of checks; the first failing check suppresses the label. Suppressing a
label never hides its line.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .camera import Viewport
from .config import LabelConfig, WorldConfig
from .geometry import GridLine, Orientation
from .math_utils import clamp


@dataclass(frozen=True)
class LabelPlacement:
    text: str
    x: float
    y: float
    font_size: float
    anchor: str   # side of the line: 'left', 'right', 'above' or 'below'
    align: str    # text anchor for the sink: 'start', 'middle' or 'end'


Check = Callable[[LabelPlacement], bool]


def _emit(candidate: LabelPlacement,
          checks: Sequence[Check]) -> Optional[LabelPlacement]:
    for check in checks:
        if not check(candidate):
            return None
    return candidate


def _in_safe_rect(viewport: Viewport, cfg: LabelConfig) -> Check:
    return lambda c: viewport.contains(c.x, c.y, cfg.safe_margin)


def is_boundary(line: GridLine, world: WorldConfig) -> bool:
    return line.index == 0 or line.index == world.max_index


def depth_font_size(average_depth: float, cfg: LabelConfig) -> float:
    """Nearer depth-axis lines get larger text, kept within the font range."""
    return clamp(cfg.depth_scale / average_depth, cfg.min_font_size, cfg.max_font_size)


def _horizontal(line: GridLine, viewport: Viewport, world: WorldConfig,
                cfg: LabelConfig) -> Optional[LabelPlacement]:
    size = depth_font_size(line.average_depth, cfg)
    left, right = sorted((line.start, line.end), key=lambda p: p.x)
    mid_x, _ = line.midpoint

    # Put the label past the end with more free screen on its side
    if mid_x <= viewport.center_x:
        candidate = LabelPlacement(str(line.index), right.x + cfg.offset, right.y,
                                   size, 'right', 'start')
    else:
        candidate = LabelPlacement(str(line.index), left.x - cfg.offset, left.y,
                                   size, 'left', 'end')

    boundary = is_boundary(line, world)
    return _emit(candidate, (
        _in_safe_rect(viewport, cfg),
        lambda c: boundary or c.font_size >= cfg.legible_font_size,
    ))


def _vertical(line: GridLine, viewport: Viewport, world: WorldConfig,
              viewpoint_x: float, cfg: LabelConfig) -> Optional[LabelPlacement]:
    if not (is_boundary(line, world)
            or abs(line.index - viewpoint_x) <= cfg.vertical_radius):
        return None

    size = cfg.base_font_size * cfg.vertical_font_fraction
    upper, lower = sorted((line.start, line.end), key=lambda p: p.y)

    below_y = lower.y + cfg.offset + size
    if below_y <= viewport.height - cfg.safe_margin:
        candidate = LabelPlacement(str(line.index), lower.x, below_y,
                                   size, 'below', 'middle')
    else:
        candidate = LabelPlacement(str(line.index), upper.x, upper.y - cfg.offset,
                                   size, 'above', 'middle')

    return _emit(candidate, (_in_safe_rect(viewport, cfg),))


def place_label(line: GridLine, viewport: Viewport, world: WorldConfig,
                viewpoint_x: float, cfg: Optional[LabelConfig] = None) -> Optional[LabelPlacement]:
    """Return where to draw `line`'s index, or None when it is suppressed."""
    cfg = cfg or LabelConfig()
    if line.orientation is Orientation.HORIZONTAL:
        return _horizontal(line, viewport, world, cfg)
    return _vertical(line, viewport, world, viewpoint_x, cfg)


def place_labels(lines: Iterable[GridLine], viewport: Viewport, world: WorldConfig,
                 viewpoint_x: float,
                 cfg: Optional[LabelConfig] = None) -> List[Tuple[GridLine, LabelPlacement]]:
    placed = []
    for line in lines:
        label = place_label(line, viewport, world, viewpoint_x, cfg)
        if label is not None:
            placed.append((line, label))
    return placed
