#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

class Canvas:
    """
    Dot canvas packed into 2x4 terminal cells.

    No depth buffer: every write overwrites what was there, so callers
    submit far-to-near. Each cell keeps the colour of its latest write.
    """
    __slots__ = ['w', 'h', 'grid', 'c_grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.clear()

    def clear(self):
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * (self.w // 2 + 1) for _ in range(self.h // 4 + 1)]
        # Colour grid stores a colour key per cell
        self.c_grid = [[0] * (self.w // 2 + 1) for _ in range(self.h // 4 + 1)]

    def set_pixel(self, x, y, color_idx):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        cx, cy = x >> 1, y >> 2
        # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
        self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))
        self.c_grid[cy][cx] = color_idx

    def clear_pixel(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        self.grid[y >> 2][x >> 1] &= ~(1 << ((y & 3) + (x & 1) * 4))


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '

    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
