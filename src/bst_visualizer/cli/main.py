# Line-oriented CLI using argparse: reads commands, prints results, optionally renders them.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from bst_visualizer.components.commands import Session
from bst_visualizer.components.storyboard import Storyboard
from bst_visualizer.core.config import VisualizerConfig, load_config
from bst_visualizer.core.errors import BSTError, ConfigError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bst-viz", description="Insert, delete, search and traverse a binary search tree"
    )
    p.add_argument("--config", type=Path, help="TOML config file with a [visualizer] table")
    p.add_argument(
        "--script", type=Path, help="File with one command per line (default: stdin)"
    )
    p.add_argument("--speed", type=float, help="Animation speed multiplier (0.5 - 2.0)")
    output = p.add_mutually_exclusive_group()
    output.add_argument("--render", help="Save the animation to a GIF or MP4 file")
    output.add_argument("--show", action="store_true", help="Play the animation in a window")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def run_commands(lines: TextIO, session: Session, storyboard: Storyboard | None = None) -> int:
    """Execute each command line, printing its message. Returns number of failures."""
    failures = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            result = session.execute(line)
        except BSTError as e:
            logger.warning(f"Line {lineno}: {e}")
            print(f"Error: {e}")
            failures += 1
            continue

        print(result.message)
        if storyboard is not None:
            storyboard.record(result)
    return failures


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else VisualizerConfig()
        if args.speed is not None:
            config.speed = args.speed
            config.validate()
    except ConfigError as e:
        print(f"Error loading config: {e}")
        return 2

    session = Session(config)
    storyboard = Storyboard(config) if (args.render or args.show) else None

    if args.script:
        try:
            with args.script.open(encoding="utf-8") as f:
                failures = run_commands(f, session, storyboard)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading script: {e}")
            return 2
    else:
        failures = run_commands(sys.stdin, session, storyboard)

    if storyboard is not None:
        # Imported lazily so plain text runs never load matplotlib
        from bst_visualizer.render.plot import animate_frames

        written = animate_frames(storyboard.frames, config, output=args.render)
        if written:
            print(f"Wrote animation to {written}")

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
