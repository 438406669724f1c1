#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging

logger = logging.getLogger(__name__)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

# The 6x6x6 color cube occupies xterm indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        """Find nearest index in the 6-level cube axis."""
        best_i = 0
        best_d = abs(v - _CUBE_VALUES[0])
        for i in range(1, 6):
            d = abs(v - _CUBE_VALUES[i])
            if d < best_d:
                best_d = d
                best_i = i
        return best_i

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color.
    Used on terminals that only support 8 colors."""
    best_idx = 0
    best_dist = None
    for i, (ar, ag, ab) in enumerate(_ANSI8):
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if best_dist is None or d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx


def style_colors(config):
    """Foreground RGB per style tag, in a stable order."""
    colors = {}
    for tag in sorted(config.styles):
        style = config.styles[tag]
        # Filled surfaces show their fill on the terminal, lines their stroke
        rgb = parse_hex_color(style.fill or style.stroke)
        colors[tag] = rgb if rgb is not None else (255, 255, 255)
    return colors


def init_colors(config):
    """
    Safely initialize curses colors, one pair per style tag.
    Color mode cascade:
      1. True color  - can_change_color(): init_color() with exact RGB
      2. xterm-256   - 256+ colors: nearest xterm-256 index
      3. 8-color     - basic ANSI palette approximation
      4. Mono        - no color
    Returns a {style tag: pair id} dict (empty for mono) and the bg pair id.
    """
    if not config.use_color:
        return {}, 0

    try:
        if not curses.has_colors():
            return {}, 0

        curses.start_color()

        default_bg = False
        try:
            curses.use_default_colors()
            default_bg = True
        except curses.error:
            pass

        bg_rgb = parse_hex_color(config.background) or (0, 0, 0)
        colors = style_colors(config)

        num_colors = getattr(curses, 'COLORS', 8)
        try:
            can_redefine = curses.can_change_color()
        except curses.error:
            can_redefine = False

        fg_slots = {}
        if can_redefine and num_colors >= 256:
            # Slots from 16 up keep ANSI 0-15 intact
            slot = 16
            for tag, (r, g, b) in colors.items():
                try:
                    curses.init_color(slot, r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)
                    fg_slots[tag] = slot
                except curses.error:
                    fg_slots[tag] = rgb_to_nearest_xterm(r, g, b)
                slot += 1
            try:
                curses.init_color(slot, *(c * 1000 // 255 for c in bg_rgb))
                bg_slot = slot
            except curses.error:
                bg_slot = rgb_to_nearest_xterm(*bg_rgb)
        elif num_colors >= 256:
            for tag, rgb in colors.items():
                fg_slots[tag] = rgb_to_nearest_xterm(*rgb)
            bg_slot = rgb_to_nearest_xterm(*bg_rgb)
        elif num_colors >= 8:
            for tag, rgb in colors.items():
                fg_slots[tag] = rgb_to_nearest_ansi8(*rgb)
            bg_slot = rgb_to_nearest_ansi8(*bg_rgb)
        else:
            return {}, 0

        if bg_rgb == (0, 0, 0) and default_bg:
            bg_slot = -1  # use terminal default

        pairs = {}
        for pair_id, (tag, fg) in enumerate(fg_slots.items(), start=1):
            try:
                curses.init_pair(pair_id, fg, bg_slot)
                pairs[tag] = pair_id
            except curses.error:
                pairs[tag] = 0

        bg_pair = 0
        try:
            fg_for_bg = 7 if bg_slot != 7 else 0  # contrast text on bg
            curses.init_pair(len(fg_slots) + 1, fg_for_bg, bg_slot)
            bg_pair = len(fg_slots) + 1
        except curses.error:
            pass

        return pairs, bg_pair

    except curses.error as exc:
        logger.warning("colour setup failed, falling back to mono: %s", exc)
        return {}, 0
