#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from typing import NamedTuple, Optional


class ScreenPoint(NamedTuple):
    """Projected point: screen position plus camera-relative depth."""
    x: float
    y: float
    depth: float


class Viewport:
    """Output surface size; the optical axis passes through its centre."""
    __slots__ = ('width', 'height', 'center_x', 'center_y')

    def __init__(self, width: float = 800.0, height: float = 600.0):
        self.width = 0.0
        self.height = 0.0
        self.center_x = 0.0
        self.center_y = 0.0
        self.resize(width, height)

    def __repr__(self):
        return f"Viewport({self.width:g}x{self.height:g})"

    def resize(self, width: float, height: float):
        """Replace the surface dimensions wholesale."""
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)
        self.center_x = self.width / 2.0
        self.center_y = self.height / 2.0

    def contains(self, x: float, y: float, inset: float = 0.0) -> bool:
        """True when (x, y) lies inside the rectangle shrunk by `inset`."""
        return (inset <= x <= self.width - inset
                and inset <= y <= self.height - inset)


class Camera:
    """
    Pinhole camera fixed to look along the world depth axis.

    The viewer faces decreasing depth; there is no yaw or pitch. The camera
    position comes from the viewpoint passed to project(), the eye sits
    `eye_height` above `floor_level`.
    """
    __slots__ = ('focal_length', 'eye_height', 'near_clip', 'floor_level',
                 'viewport')

    def __init__(self, focal_length: float = 270.0, eye_height: float = 1.25,
                 near_clip: float = 0.2, viewport: Optional[Viewport] = None,
                 floor_level: float = 0.0):
        if focal_length <= 0:
            raise ValueError(f"focal_length must be > 0, got {focal_length}")
        if near_clip <= 0:
            raise ValueError(f"near_clip must be > 0, got {near_clip}")
        self.focal_length = float(focal_length)  # smaller = wider view
        self.eye_height = float(eye_height)
        self.near_clip = float(near_clip)
        self.floor_level = float(floor_level)
        self.viewport = viewport if viewport is not None else Viewport()

    def copy(self, floor_level: Optional[float] = None) -> "Camera":
        """Independent camera with the same optics, optionally on another floor."""
        return Camera(self.focal_length, self.eye_height, self.near_clip,
                      Viewport(self.viewport.width, self.viewport.height),
                      self.floor_level if floor_level is None else floor_level)

    @property
    def eye_level(self) -> float:
        return self.floor_level + self.eye_height

    def scale_at(self, depth_from_camera: float) -> float:
        return self.focal_length / depth_from_camera

    def project(self, viewpoint, x: float, height: float,
                depth: float) -> Optional[ScreenPoint]:
        """
        Project a world point for the given viewpoint.

        Returns None when the point is at or behind the near clip plane.
        """
        dz = viewpoint.y - depth
        if dz <= self.near_clip:
            return None

        scale = self.scale_at(dz)
        vp = self.viewport
        sx = vp.center_x + (x - viewpoint.x) * scale
        # Screen Y grows downward, world height grows upward
        sy = vp.center_y - (height - self.eye_level) * scale
        return ScreenPoint(sx, sy, dz)
