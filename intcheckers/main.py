"""Command-line entry point."""

from __future__ import annotations

import argparse

from . import gui, terminal_ui
from .game import Checkers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intcheckers", description="Play international checkers on a 10x10 board."
    )
    parser.add_argument(
        "--terminal", action="store_true", help="play in the terminal instead of a window"
    )
    parser.add_argument(
        "--moves", metavar="FILE", help="read terminal moves from FILE (implies --terminal)"
    )
    parser.add_argument(
        "--no-force-capture", action="store_true", help="do not oblige players to capture"
    )
    parser.add_argument(
        "--no-ai", action="store_true", help="let a second person play the dark pieces"
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    game = Checkers(force_capture=not args.no_force_capture, enable_ai=not args.no_ai)
    if args.moves is not None:
        try:
            stream = open(args.moves, encoding="utf-8")
        except OSError as exc:
            parser.error(f"cannot open {args.moves}: {exc.strerror}")
        with stream:
            terminal_ui.run(game, stream)
    elif args.terminal:
        terminal_ui.run(game)
    else:
        gui.run(game)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())