#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .math_utils import Vec3, clamp
from .config import WorldConfig, LabelConfig, RenderConfig, Style
from .camera import Camera, ScreenPoint, Viewport
from .viewpoint import Direction, Viewpoint, ViewpointController
from .geometry import GridLine, Orientation, Polygon, RoomSnapshot, build_room
from .scene import LinePrimitive, PolygonPrimitive, Scene, compose
from .labels import LabelPlacement, place_label, place_labels
from .session import Frame, SessionState
from .renderer import DrawingSink, Renderer
from .svg import SvgSink
from .debounce import Debouncer
