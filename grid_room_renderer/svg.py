#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/svg.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Sequence

from .config import RenderConfig
from .renderer import DrawingSink, Point2

logger = logging.getLogger(__name__)

SVG_NS = 'http://www.w3.org/2000/svg'


def points_to_path(points: Sequence[Point2]) -> str:
    """Closed SVG path data through `points`."""
    if not points:
        return ''
    cmds = [f"M {points[0][0]:.2f} {points[0][1]:.2f}"]
    cmds.extend(f"L {x:.2f} {y:.2f}" for x, y in points[1:])
    cmds.append('Z')
    return ' '.join(cmds)


class SvgSink(DrawingSink):
    """Collects drawing commands as elements of one SVG document."""

    def __init__(self, width: float, height: float,
                 config: Optional[RenderConfig] = None):
        self.width = width
        self.height = height
        self.config = config or RenderConfig()
        self.root = None
        self.clear()

    def clear(self):
        self.root = ET.Element('svg', {
            'xmlns': SVG_NS,
            'width': f"{self.width:g}",
            'height': f"{self.height:g}",
            'viewBox': f"0 0 {self.width:g} {self.height:g}",
        })
        if self.config.background:
            ET.SubElement(self.root, 'rect', {
                'width': '100%', 'height': '100%',
                'fill': self.config.background,
            })

    def polygon(self, points, style):
        s = self.config.style(style)
        ET.SubElement(self.root, 'path', {
            'd': points_to_path(points),
            'class': style,
            'fill': s.fill or 'none',
            'stroke': s.stroke,
            'stroke-width': f"{s.stroke_width:g}",
        })

    def line(self, start, end, style):
        s = self.config.style(style)
        ET.SubElement(self.root, 'line', {
            'x1': f"{start[0]:.2f}", 'y1': f"{start[1]:.2f}",
            'x2': f"{end[0]:.2f}", 'y2': f"{end[1]:.2f}",
            'class': style,
            'stroke': s.stroke,
            'stroke-width': f"{s.stroke_width:g}",
        })

    def text(self, x, y, content, font_size, align='start', style='grid-label'):
        s = self.config.style(style)
        el = ET.SubElement(self.root, 'text', {
            'x': f"{x:.2f}", 'y': f"{y:.2f}",
            'class': style,
            'fill': s.stroke,
            'font-size': f"{font_size:.1f}",
            'text-anchor': align,
        })
        el.text = content

    def elements(self, tag: str):
        return self.root.findall(tag)

    def tostring(self) -> str:
        return ET.tostring(self.root, encoding='unicode')

    def write(self, path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        ET.ElementTree(self.root).write(path, encoding='utf-8', xml_declaration=True)
        logger.info("wrote %s (%d elements)", path, len(self.root))
        return path
