from __future__ import annotations

import argparse
import sys

from hanoi_console.clock import SystemClock
from hanoi_console.config import ConfigError, resolve_config
from hanoi_console.controller import GameController
from hanoi_console.render import TerminalRenderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanoi-console",
        description="Play the Tower of Hanoi in the terminal.",
    )
    parser.add_argument(
        "--disks",
        type=int,
        default=None,
        help="Number of disks (skips the prompt; clamped to the configured range).",
    )
    parser.add_argument(
        "--config", help="Path to JSON config (delays, disk range, color)."
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to pause after each move frame (overrides frame_delay_s).",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output.",
    )
    parser.add_argument(
        "--autosolve",
        action="store_true",
        help="Start the optimal-solution animation right away.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print diagnostic lines to stderr.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {
        "frame_delay_s": args.delay,
        "color": False if args.no_color else None,
    }
    try:
        config = resolve_config(args.config, overrides)
    except (ConfigError, OSError) as exc:
        print(f"Invalid config: {exc}", file=sys.stderr)
        return 2

    renderer = TerminalRenderer(color=config.color)
    controller = GameController(
        renderer,
        renderer.console.input,
        clock=SystemClock(),
        config=config,
        debug=args.debug,
    )
    try:
        controller.run(args.disks, autosolve=args.autosolve)
    except KeyboardInterrupt:
        renderer.console.print()
        renderer.farewell()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
