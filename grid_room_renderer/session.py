#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/session.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .camera import Camera, Viewport
from .config import LabelConfig, WorldConfig
from .geometry import GridLine, RoomSnapshot, build_room
from .labels import LabelPlacement, place_labels
from .math_utils import distance
from .scene import Primitive, compose
from .viewpoint import Direction, Viewpoint, ViewpointController

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """Everything one redraw needs, in draw order."""
    snapshot: RoomSnapshot
    primitives: List[Primitive] = field(default_factory=list)
    labels: List[Tuple[GridLine, LabelPlacement]] = field(default_factory=list)


@dataclass(frozen=True)
class RelativePosition:
    x: float
    y: float
    center_distance: float
    normalized_distance: float


def _format_coord(value: float) -> str:
    return f"{value:.2f}".rstrip('0').rstrip('.')


class SessionState:
    """
    Owns the viewpoint, viewport and world for one viewer and drives the
    rebuild -> order -> place pipeline.

    Every stimulus runs the whole pipeline synchronously; the resulting
    Frame replaces the previous one.
    """

    def __init__(self, world: Optional[WorldConfig] = None,
                 camera: Optional[Camera] = None,
                 labels: Optional[LabelConfig] = None,
                 start: Optional[Viewpoint] = None,
                 clip_surfaces: bool = False):
        self.world = world or WorldConfig()
        # Private copy; a shared camera keeps its own floor_level
        self.camera = (camera or Camera()).copy(floor_level=self.world.floor_level)
        self.label_config = labels or LabelConfig()
        self.clip_surfaces = clip_surfaces
        self.controller = ViewpointController(self.world, start)
        self.frame: Optional[Frame] = None
        self.rebuild()

    @property
    def viewpoint(self) -> Viewpoint:
        return self.controller.viewpoint

    @property
    def viewport(self) -> Viewport:
        return self.camera.viewport

    def rebuild(self) -> Frame:
        vp = self.viewpoint
        snapshot = build_room(self.world, self.camera, vp, self.clip_surfaces)
        scene = compose(snapshot, vp, self.world)
        labels = place_labels(snapshot.grid_lines, self.viewport, self.world,
                              vp.x, self.label_config)
        self.frame = Frame(snapshot, scene.ordered(), labels)
        logger.debug("rebuilt frame at %r: %d primitives, %d labels",
                     vp, len(self.frame.primitives), len(labels))
        return self.frame

    def move(self, direction: Direction) -> bool:
        """Apply one movement command; rebuild only when the viewpoint moved."""
        if not self.controller.move(direction):
            return False
        self.rebuild()
        return True

    def resize(self, width: float, height: float):
        self.viewport.resize(width, height)
        logger.debug("viewport resized to %r", self.viewport)
        self.rebuild()

    def relative_position(self) -> RelativePosition:
        vp = self.viewpoint
        c = self.world.center
        center_distance = distance(vp.x, vp.y, c, c)
        max_distance = distance(0, 0, c, c)
        return RelativePosition(vp.x, vp.y, center_distance,
                                center_distance / max_distance)

    def position_text(self) -> str:
        vp = self.viewpoint
        return f"{_format_coord(vp.x)},{_format_coord(vp.y)}"
