#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/terminal.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses

from .canvas import Canvas, render_cell_ascii, render_cell_braille
from .config import RenderConfig
from .rasterizer import draw_line_dda, draw_polygon_outline, fill_polygon
from .renderer import DrawingSink


def canvas_size(stdscr):
    """Dot resolution available below the one-line HUD."""
    th, tw = stdscr.getmaxyx()
    return (tw - 1) * 2, (th - 2) * 4


def logical_viewport(stdscr, logical_width=800.0):
    """
    Viewport size in logical units for the current terminal.

    Width is held at `logical_width` so the camera's focal length keeps its
    meaning; height follows the terminal's aspect. Braille dots are close
    enough to square that no further correction is applied.
    """
    w, h = canvas_size(stdscr)
    if w <= 0 or h <= 0:
        return logical_width, logical_width * 0.75
    return logical_width, h * logical_width / w


class TerminalSink(DrawingSink):
    """
    Draws onto a curses screen through a braille/ASCII dot canvas.

    Coordinates arrive in logical viewport units and are scaled to dots.
    Text is kept aside and written over the canvas on flush().
    """

    def __init__(self, stdscr, config: RenderConfig, pairs=None, bg_pair=0,
                 logical_width=800.0, bold_font_size=10.0):
        self.stdscr = stdscr
        self.config = config
        self.pairs = pairs or {}
        self.bg_pair = bg_pair
        self.logical_width = logical_width
        self.bold_font_size = bold_font_size
        self.canvas = None
        self.scale = 1.0
        self.texts = []
        self.color_keys = {}
        self.clear()

    def _color(self, style):
        # Canvas cells store small ints; map tags to stable keys
        if style not in self.color_keys:
            self.color_keys[style] = len(self.color_keys) + 1
        return self.color_keys[style]

    def _to_dots(self, pt):
        return (pt[0] * self.scale, pt[1] * self.scale)

    def clear(self):
        w, h = canvas_size(self.stdscr)
        self.canvas = Canvas(max(w, 0), max(h, 0))
        self.scale = w / self.logical_width if w > 0 else 0.0
        self.texts = []

    def polygon(self, points, style):
        pts = [self._to_dots(p) for p in points]
        s = self.config.style(style)
        c = self._color(style)
        fill_polygon(self.canvas, pts, c, s.pattern)
        draw_polygon_outline(self.canvas, pts, c)

    def line(self, start, end, style):
        draw_line_dda(self.canvas, self._to_dots(start), self._to_dots(end),
                      self._color(style))

    def text(self, x, y, content, font_size, align='start', style='grid-label'):
        dx, dy = self._to_dots((x, y))
        col, row = int(dx) // 2, int(dy) // 4
        if align == 'middle':
            col -= len(content) // 2
        elif align == 'end':
            col -= len(content)
        self.texts.append((row, col, content, font_size, style))

    def _attr(self, style):
        pair = self.pairs.get(style, 0) if self.config.use_color else 0
        return curses.color_pair(pair)

    def flush(self):
        """Erase the screen, then write canvas cells and text (HUD row excluded)."""
        stdscr = self.stdscr
        th, tw = stdscr.getmaxyx()
        stdscr.erase()

        if self.config.use_color and self.bg_pair:
            try:
                stdscr.bkgd(' ', curses.color_pair(self.bg_pair))
            except curses.error:
                pass

        styles_by_key = {v: k for k, v in self.color_keys.items()}
        render_cell = render_cell_braille if self.config.use_braille else render_cell_ascii
        grid = self.canvas.grid
        c_grid = self.canvas.c_grid

        for y in range(min(th - 2, len(grid))):
            row_grid = grid[y]
            row_color = c_grid[y]
            for x in range(min(tw - 1, len(row_grid))):
                mask = row_grid[x]
                if not mask:
                    continue
                try:
                    stdscr.addstr(y + 1, x, render_cell(mask),
                                  self._attr(styles_by_key.get(row_color[x])))
                except curses.error:
                    pass

        for row, col, content, font_size, style in self.texts:
            if row < 0 or row >= th - 2 or col >= tw - 1:
                continue
            if col < 0:
                content = content[-col:]
                col = 0
            attr = self._attr(style)
            if font_size >= self.bold_font_size:
                attr |= curses.A_BOLD
            try:
                stdscr.addstr(row + 1, col, content[:tw - 1 - col], attr)
            except curses.error:
                pass
