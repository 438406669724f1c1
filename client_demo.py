#!/usr/bin/env python3
#
# PROJECT: grid-room-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from grid_room_renderer.demo import export_svg, main as demo_main


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                   Walk the 11x11 room in the terminal
  %(prog)s --guides                          Show horizon and vanishing lines
  %(prog)s --start 2,8 --ascii --mono        Start near the left wall, plain ASCII
  %(prog)s --svg room.svg --moves ffffl      Write one frame after five moves
  %(prog)s --size 7 --focal-length 200       Smaller room, wider view
"""
    parser = argparse.ArgumentParser(
        description="First-person grid room renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--size", type=int, default=11,
                        help="Grid size, odd and >= 3 (default: 11)")
    parser.add_argument("--room-height", type=float, default=2.5,
                        help="Room height in world units (default: 2.5)")
    parser.add_argument("--floor-level", type=float, default=0.0,
                        help="Floor elevation (default: 0.0)")
    parser.add_argument("--margin", type=float, default=0.5,
                        help="Minimum distance from walls (default: 0.5)")
    parser.add_argument("--focal-length", type=float, default=270.0,
                        help="Focal length, smaller is wider (default: 270)")
    parser.add_argument("--eye-height", type=float, default=1.25,
                        help="Eye height above the floor (default: 1.25)")
    parser.add_argument("--near-clip", type=float, default=0.2,
                        help="Near clip distance (default: 0.2)")
    parser.add_argument("--start", metavar="X,Y",
                        help="Starting viewpoint (default: room centre)")
    parser.add_argument("--moves", default="",
                        help="Moves to apply first: f/b/l/r or w/s/a/d letters")
    parser.add_argument("--clip-surfaces", action="store_true",
                        help="Cut floor, ceiling and side walls at the near plane "
                             "instead of dropping them")
    parser.add_argument("--guides", action="store_true",
                        help="Draw horizon and vanishing lines")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--mono", action="store_true",
                        help="Force monochrome output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--svg", metavar="PATH",
                        help="Write one frame as SVG and exit (no terminal UI)")
    parser.add_argument("--width", type=float, default=800.0,
                        help="SVG viewport width (default: 800)")
    parser.add_argument("--height", type=float, default=600.0,
                        help="SVG viewport height (default: 600)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-file", metavar="PATH",
                        help="Log file; the terminal UI only logs to a file")
    return parser.parse_args(argv)


def setup_logging(args):
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=args.log_level, format=fmt)
    elif args.svg:
        logging.basicConfig(stream=sys.stderr, level=args.log_level, format=fmt)
    else:
        # Anything on stderr would corrupt the curses screen
        logging.getLogger().addHandler(logging.NullHandler())


if __name__ == "__main__":
    args = parse_args()
    setup_logging(args)
    if args.svg:
        try:
            export_svg(args)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        sys.exit(0)
    try:
        curses.wrapper(lambda s: demo_main(s, args))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        curses.endwin()
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
