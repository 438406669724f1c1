#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .canvas import Canvas

# Which dots a filled polygon lights; unlit dots inside it are cleared
PATTERNS = {
    'none': lambda x, y: False,
    'sparse': lambda x, y: (x & 1) == 0 and (y & 3) == 0,
    'dense': lambda x, y: ((x + y) & 1) == 0,
    'solid': lambda x, y: True,
}


def fill_polygon(canvas: Canvas, points, color_idx, pattern='sparse'):
    """
    Scanline-fills a polygon with a dither pattern, overwriting every dot
    it covers. points are (x, y) pairs in dot coordinates.
    """
    if len(points) < 3:
        return
    lit = PATTERNS.get(pattern, PATTERNS['sparse'])
    w, h = canvas.w, canvas.h

    ys = [p[1] for p in points]
    y_start = max(0, int(min(ys)))
    y_end = min(h - 1, int(max(ys)))
    n = len(points)

    for y in range(y_start, y_end + 1):
        sy = y + 0.5  # sample at dot centre
        xs = []
        for i in range(n):
            x1, y1 = points[i][0], points[i][1]
            x2, y2 = points[(i + 1) % n][0], points[(i + 1) % n][1]
            if (y1 <= sy < y2) or (y2 <= sy < y1):
                xs.append(x1 + (sy - y1) * (x2 - x1) / (y2 - y1))
        xs.sort()
        for a, b in zip(xs[0::2], xs[1::2]):
            for x in range(max(0, int(a + 0.5)), min(w, int(b + 0.5))):
                if lit(x, y):
                    canvas.set_pixel(x, y, color_idx)
                else:
                    canvas.clear_pixel(x, y)


def clip_line(p1, p2, w, h):
    """
    Liang-Barsky clip of segment p1-p2 to [0, w-1] x [0, h-1].
    Returns the clipped endpoints, or None when nothing is on the canvas.
    """
    x1, y1 = p1[0], p1[1]
    dx, dy = p2[0] - x1, p2[1] - y1
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x1), (dx, (w - 1) - x1), (-dy, y1), (dy, (h - 1) - y1)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1: return None
            if t > t0: t0 = t
        else:
            if t < t0: return None
            if t < t1: t1 = t
    return ((x1 + t0 * dx, y1 + t0 * dy), (x1 + t1 * dx, y1 + t1 * dy))


def draw_line_dda(canvas: Canvas, p1, p2, color_idx):
    """Draws a line using the DDA algorithm, clipped to the canvas."""
    clipped = clip_line(p1, p2, canvas.w, canvas.h)
    if clipped is None:
        return
    p1, p2 = clipped
    x1, y1 = int(round(p1[0])), int(round(p1[1]))
    x2, y2 = int(round(p2[0])), int(round(p2[1]))

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1, color_idx)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)

    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(int(step) + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)), color_idx)
        cx += x_inc; cy += y_inc


def draw_polygon_outline(canvas: Canvas, points, color_idx):
    for i in range(len(points)):
        draw_line_dda(canvas, points[i], points[(i + 1) % len(points)], color_idx)
