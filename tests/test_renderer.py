"""Tests for frame submission to drawing sinks."""

import xml.etree.ElementTree as ET

from grid_room_renderer.config import RenderConfig
from grid_room_renderer.renderer import DrawingSink, Renderer, guide_lines
from grid_room_renderer.scene import PolygonPrimitive
from grid_room_renderer.session import SessionState
from grid_room_renderer.svg import SvgSink, points_to_path


class RecordingSink(DrawingSink):
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(('clear',))

    def polygon(self, points, style):
        self.calls.append(('polygon', style, list(points)))

    def line(self, start, end, style):
        self.calls.append(('line', style, start, end))

    def text(self, x, y, content, font_size, align='start', style='grid-label'):
        self.calls.append(('text', style, content, align))


def render(session, **config):
    sink = RecordingSink()
    Renderer().render(sink, session.frame, session.camera, RenderConfig(**config))
    return sink.calls


def test_clear_then_primitives_then_labels():
    session = SessionState(clip_surfaces=True)
    calls = render(session)
    ops = [c[0] for c in calls]

    assert ops[0] == 'clear'
    first_text = ops.index('text')
    assert all(op == 'text' for op in ops[first_text:])
    assert calls[1][1] == 'room-floor'
    assert calls[first_text - 1][1] == 'room-ceiling'
    assert ops.count('text') == len(session.frame.labels)


def test_guides_drawn_after_ceiling_before_labels():
    session = SessionState(clip_surfaces=True)
    calls = render(session, show_guides=True)
    styles = [c[1] for c in calls if c[0] != 'clear']

    ceiling = styles.index('room-ceiling')
    horizon = styles.index('horizon-line')
    first_label = styles.index('grid-label')
    assert ceiling < horizon < first_label
    assert styles.count('vanishing-line') == 4


def test_guides_reach_viewport_border():
    session = SessionState()
    vp = session.viewport
    guides = guide_lines(session.frame, session.camera)
    horizon = guides[0]
    assert horizon == ((0.0, vp.center_y), (vp.width, vp.center_y), 'horizon-line')
    for start, end, style in guides[1:]:
        assert start == (vp.center_x, vp.center_y)
        on_edge = (abs(end[0]) < 1e-6 or abs(end[0] - vp.width) < 1e-6
                   or abs(end[1]) < 1e-6 or abs(end[1] - vp.height) < 1e-6)
        assert on_edge


def test_points_to_path():
    assert points_to_path([]) == ''
    assert points_to_path([(0, 0), (10, 0), (10, 5)]) == \
        'M 0.00 0.00 L 10.00 0.00 L 10.00 5.00 Z'


def test_svg_sink_collects_frame(tmp_path):
    session = SessionState(clip_surfaces=True)
    config = RenderConfig()
    sink = SvgSink(800, 600, config)
    Renderer().render(sink, session.frame, session.camera, config)

    polygons = [p for p in session.frame.primitives if isinstance(p, PolygonPrimitive)]
    assert len(sink.elements('path')) == len(polygons)
    assert len(sink.elements('line')) == len(session.frame.snapshot.grid_lines)
    texts = sink.elements('text')
    assert len(texts) == len(session.frame.labels)
    assert {t.get('text-anchor') for t in texts} <= {'start', 'middle', 'end'}

    floor = sink.elements('path')[0]
    assert floor.get('class') == 'room-floor'
    assert floor.get('fill') == config.styles['room-floor'].fill

    out = sink.write(tmp_path / 'frames' / 'room.svg')
    root = ET.parse(out).getroot()
    assert root.tag.endswith('svg')
    assert root.get('viewBox') == '0 0 800 600'


def test_svg_sink_clear_drops_previous_frame():
    sink = SvgSink(100, 100)
    sink.line((0, 0), (10, 10), 'grid-line')
    sink.text(5, 5, '3', 12.0)
    sink.clear()
    assert sink.elements('line') == []
    assert sink.elements('text') == []
    # Background rect survives a clear
    assert len(sink.elements('rect')) == 1


def test_unknown_style_falls_back():
    sink = SvgSink(100, 100)
    sink.line((0, 0), (1, 1), 'no-such-style')
    line = sink.elements('line')[0]
    assert line.get('stroke') == RenderConfig().styles['grid-line'].stroke
