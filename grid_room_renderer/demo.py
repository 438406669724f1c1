#
# PROJECT: grid-room-renderer
# MODULE: grid_room_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging

from .camera import Camera, Viewport
from .color import init_colors
from .config import LabelConfig, RenderConfig, WorldConfig
from .debounce import Debouncer
from .renderer import Renderer
from .session import SessionState
from .svg import SvgSink
from .terminal import TerminalSink, logical_viewport
from .viewpoint import Direction, Viewpoint, direction_for_key

logger = logging.getLogger(__name__)

LOGICAL_WIDTH = 800.0
HELP = "arrows/WASD move | g guides | q quit"


def build_session(args, viewport=None) -> SessionState:
    """SessionState from parsed CLI arguments."""
    world = WorldConfig(size=args.size, room_height=args.room_height,
                        floor_level=args.floor_level, margin=args.margin)
    camera = Camera(focal_length=args.focal_length, eye_height=args.eye_height,
                    near_clip=args.near_clip, viewport=viewport)
    start = None
    if args.start:
        sx, sy = (float(v) for v in args.start.split(','))
        start = Viewpoint(sx, sy)
    return SessionState(world, camera, LabelConfig(), start,
                        clip_surfaces=args.clip_surfaces)


def build_render_config(args, detect=True) -> RenderConfig:
    config = RenderConfig.detect_terminal() if detect else RenderConfig()
    if args.no_color or args.mono:
        config.use_color = False
    if args.ascii:
        config.use_braille = False
    config.show_guides = args.guides
    return config


def apply_moves(session: SessionState, moves: str) -> int:
    """Run a scripted move string (f/b/l/r or w/s/a/d); returns committed moves."""
    committed = 0
    for ch in moves:
        if ch in ' ,':
            continue
        if session.move(Direction.parse(ch)):
            committed += 1
    return committed


def export_svg(args) -> SvgSink:
    """Headless mode: render one frame after `args.moves` and write it as SVG."""
    session = build_session(args, Viewport(args.width, args.height))
    if args.moves:
        apply_moves(session, args.moves)
    config = build_render_config(args, detect=False)
    sink = SvgSink(args.width, args.height, config)
    Renderer().render(sink, session.frame, session.camera, config)
    sink.write(args.svg)
    logger.info("position %s", session.position_text())
    return sink


class DemoApp:
    """
    Interactive terminal harness: keyboard input source, HUD position
    readout and debounced resize around the session pipeline.
    """

    def __init__(self, stdscr, args):
        self.stdscr = stdscr
        self.running = True

        curses.curs_set(0)
        # Short blocking reads so the resize debouncer gets polled
        stdscr.timeout(50)

        self.config = build_render_config(args)
        self.pairs, self.bg_pair = init_colors(self.config)

        w, h = logical_viewport(stdscr, LOGICAL_WIDTH)
        self.session = build_session(args, Viewport(w, h))
        if args.moves:
            apply_moves(self.session, args.moves)

        self.renderer = Renderer()
        self.resize_debouncer = Debouncer(wait=0.25)
        self.dirty = True

        logger.info("grid room renderer initialized")
        logger.info("use arrow keys or WASD to move around the %dx%d world",
                    self.session.world.size, self.session.world.size)
        logger.info("current position: %s", self.session.position_text())

    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        if key == ord('q'):
            self.running = False
        elif key == curses.KEY_RESIZE:
            self.resize_debouncer.trigger()
        elif key in (ord('g'), ord('G')):
            self.config.show_guides = not self.config.show_guides
            self.dirty = True
        else:
            direction = direction_for_key(key)
            if direction is not None and self.session.move(direction):
                self.dirty = True

    def handle_resize(self):
        if not self.resize_debouncer.due():
            return
        w, h = logical_viewport(self.stdscr, LOGICAL_WIDTH)
        self.session.resize(w, h)
        self.dirty = True

    def draw(self):
        sink = TerminalSink(self.stdscr, self.config, self.pairs, self.bg_pair,
                            logical_width=LOGICAL_WIDTH)
        self.renderer.render(sink, self.session.frame, self.session.camera, self.config)
        sink.flush()

        # HUD overlay (line 0)
        th, tw = self.stdscr.getmaxyx()
        rel = self.session.relative_position()
        hdr = (f" POS:{self.session.position_text()}"
               f" | CENTER:{rel.center_distance:.2f}"
               f" ({rel.normalized_distance:.0%})"
               f" | {HELP} ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(tw - 1, '='),
                               curses.color_pair(0) | curses.A_BOLD)
        except curses.error:
            pass

        self.stdscr.refresh()

    def run(self):
        while self.running:
            self.handle_input()
            self.handle_resize()
            if self.dirty:
                self.draw()
                self.dirty = False


def main(stdscr, args):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args)
    app.run()
