#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import os
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class WorldConfig:
    """Size and shape of the grid room."""
    size: int = 11
    room_height: float = 2.5
    floor_level: float = 0.0
    margin: float = 0.5

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ValueError(f"size must be an integer, got {self.size!r}")
        if self.size < 3 or self.size % 2 == 0:
            raise ValueError(f"size must be an odd integer >= 3, got {self.size}")
        if self.room_height <= 0:
            raise ValueError(f"room_height must be > 0, got {self.room_height}")
        # lower_bound <= upper_bound, so clamping always has room
        if not 0 <= self.margin <= (self.size - 1) / 2:
            raise ValueError(
                f"margin must be in [0, {(self.size - 1) / 2}], got {self.margin}")

    @property
    def max_index(self) -> int:
        return self.size - 1

    @property
    def center(self) -> float:
        return (self.size - 1) / 2

    @property
    def ceiling_level(self) -> float:
        return self.floor_level + self.room_height

    @property
    def lower_bound(self) -> float:
        return self.margin

    @property
    def upper_bound(self) -> float:
        return self.size - 1 - self.margin


@dataclass
class LabelConfig:
    """Font sizes and placement offsets for grid-line labels."""
    base_font_size: float = 14.0
    min_font_size: float = 8.0
    max_font_size: float = 22.0
    legible_font_size: float = 10.0
    # Depth-axis labels: font = depth_scale / average depth, then clamped
    depth_scale: float = 40.0
    safe_margin: float = 8.0
    offset: float = 6.0
    vertical_font_fraction: float = 0.8
    # Width-axis labels are shown within this many cells of the viewer
    vertical_radius: float = 2.0

    def __post_init__(self):
        if self.min_font_size <= 0 or self.min_font_size > self.max_font_size:
            raise ValueError("label font range must satisfy 0 < min <= max")
        if self.depth_scale <= 0:
            raise ValueError(f"depth_scale must be > 0, got {self.depth_scale}")
        if self.safe_margin < 0:
            raise ValueError(f"safe_margin must be >= 0, got {self.safe_margin}")


@dataclass
class Style:
    """Draw attributes for one style tag."""
    stroke: str
    fill: Optional[str] = None
    # Terminal dither for filled polygons: 'none', 'sparse' or 'dense'
    pattern: str = 'none'
    stroke_width: float = 1.0


def default_styles() -> Dict[str, Style]:
    return {
        'room-floor': Style('#6B5238', fill='#8B6F4E', pattern='sparse'),
        'room-ceiling': Style('#9A9AAE', fill='#C8C8D6', pattern='sparse'),
        'room-wall-back': Style('#2F4F6F', fill='#5A7C9F', pattern='dense'),
        'room-wall-left': Style('#3F5F7F', fill='#6A8CAF', pattern='dense'),
        'room-wall-right': Style('#3F5F7F', fill='#6A8CAF', pattern='dense'),
        'grid-line': Style('#D0DD14', stroke_width=1.0),
        'grid-label': Style('#FFFFFF'),
        'horizon-line': Style('#FF0044', stroke_width=0.5),
        'vanishing-line': Style('#8D0582', stroke_width=0.5),
    }


@dataclass
class RenderConfig:
    """Configuration for the drawing sinks."""
    use_color: bool = True
    use_braille: bool = True
    show_guides: bool = False
    background: str = '#0E0E2C'
    styles: Dict[str, Style] = field(default_factory=default_styles)

    def style(self, tag: str) -> Style:
        """Look up a style tag, falling back to the grid-line style."""
        return self.styles.get(tag) or self.styles['grid-line']

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Pre-init guess; accurate colour detection needs curses started.
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )
