# describe_cli.py
# plutchik-describe SENSITIVITY ATTENTION PLEASANTNESS APTITUDE
#
# Prints the wording for a state; optionally its colour and a wheel image.
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from emotional_state import EmotionalState

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plutchik-describe",
        description="Describe a point on Plutchik's wheel of emotions in words.",
    )
    for name in ("sensitivity", "attention", "pleasantness", "aptitude"):
        parser.add_argument(name, type=float, help=f"{name} axis value, usually in [-1, 1]")
    parser.add_argument("--color", action="store_true", help="also print the state's display colour")
    parser.add_argument("--plot", metavar="FILE", help="save a wheel rendering of the state to FILE")
    parser.add_argument("--size", type=int, default=480, help="plot width/height in pixels (default 480)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def save_wheel(state: EmotionalState, path: str, size: int) -> None:
    from matplotlib.figure import Figure
    from wheel_renderer import WheelRenderer

    fig = Figure()
    WheelRenderer().draw(fig, size, size, state)
    fig.savefig(path)
    logger.info("Wrote %s", path)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        state = EmotionalState(args.sensitivity, args.attention, args.pleasantness, args.aptitude)
    except ValueError as e:
        parser.error(str(e))

    print(state.describe())
    if args.color:
        from state_palette import state_color
        print(state_color(state).hex)
    if args.plot:
        save_wheel(state, args.plot, args.size)
    return 0


if __name__ == "__main__":
    sys.exit(main())
