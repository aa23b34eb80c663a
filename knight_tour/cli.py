"""Interactive command line front-end.

Asks whether to animate and for a 1-based start square (re-prompting until
both row and column are on the board), runs :func:`knight_tour.driver.run_tour`
and prints the outcome. Any value given as an option is not prompted for::

    knight-tour --row 1 --col 1 --no-animate --image tour.png
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from knight_tour.animation import TerminalAnimator
from knight_tour.config import DEFAULT_ANIMATION_DELAY_MS
from knight_tour.driver import AttemptResult, ResultFn, run_tour
from knight_tour.moves import BOARD_SIZE
from knight_tour.renderer.text import render_text
from knight_tour.renderer.texture import render_image
from knight_tour.types import Coord, Strategy

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

RESULT_MESSAGES = {
    (Strategy.WARNSDORFF, True): "A complete tour was found!",
    (Strategy.WARNSDORFF, False): "No complete tour was found from that square.",
    (Strategy.RANDOM, True): "Backtracking found a complete tour!",
    (Strategy.RANDOM, False): "Sorry, still no complete tour.",
}


def parse_start(text: str) -> Optional[int]:
    """Parse a 1-based board coordinate, returning it 0-based.

    Returns ``None`` for anything that is not an integer in ``[1, 8]``.
    """
    try:
        value = int(text.strip())
    except ValueError:
        return None
    if not 1 <= value <= BOARD_SIZE:
        return None
    return value - 1


def parse_yes_no(text: str) -> bool:
    return text.strip().lower() in ("y", "yes")


def prompt_start(input_fn: InputFn = input, output_fn: OutputFn = print) -> Coord:
    """Prompt until both row and column are on the board."""
    while True:
        row = parse_start(input_fn(f"start row (1-{BOARD_SIZE}): "))
        col = parse_start(input_fn(f"start column (1-{BOARD_SIZE}): "))
        if row is not None and col is not None:
            return row, col
        output_fn(f"Position is off the board, enter values between 1 and {BOARD_SIZE}.\n")


def _coordinate(text: str) -> int:
    value = parse_start(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"expected an integer in 1-{BOARD_SIZE}, got {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knight-tour",
        description="Find a knight's tour on an 8x8 board (Warnsdorff, then randomized backtracking).",
    )
    parser.add_argument("--row", type=_coordinate, help="start row, 1-8")
    parser.add_argument("--col", type=_coordinate, help="start column, 1-8")
    parser.add_argument(
        "--animate",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="print the board after every move and backtrack",
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=DEFAULT_ANIMATION_DELAY_MS,
        help="animation delay in milliseconds (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for randomized backtracking")
    parser.add_argument(
        "--step-limit",
        type=int,
        default=None,
        help="maximum placements per search attempt (default: unbounded)",
    )
    parser.add_argument("--image", default=None, help="save a PNG of the final board to this path")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)",
    )
    return parser


def attempt_reporter(animate: bool, output_fn: OutputFn = print) -> ResultFn:
    """Result hook printing each attempt as soon as it finishes.

    The board is printed only when it was not already animated. A failed
    Warnsdorff attempt announces the fallback before its frames start.
    """

    def report(attempt: AttemptResult) -> None:
        if not animate:
            output_fn(render_text(attempt.grid))
        output_fn(RESULT_MESSAGES[(attempt.strategy, attempt.success)])
        if attempt.strategy == Strategy.WARNSDORFF and not attempt.success:
            output_fn("Trying again with standard backtracking...")

    return report


def main(
    argv: Optional[List[str]] = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must be non-negative")
    if args.step_limit is not None and args.step_limit <= 0:
        parser.error("--step-limit must be positive")
    logging.basicConfig(level=args.log_level, format="%(levelname)s:%(name)s:%(message)s")

    output_fn("=== KNIGHT'S TOUR ===")
    try:
        animate = (
            args.animate
            if args.animate is not None
            else parse_yes_no(input_fn("animate? (y/n): "))
        )
        if args.row is not None and args.col is not None:
            start = (args.row, args.col)
        else:
            start = prompt_start(input_fn, output_fn)
    except (EOFError, KeyboardInterrupt):
        output_fn("")
        return 1

    logger.debug("Starting search from %s (animate=%s)", start, animate)
    report = run_tour(
        *start,
        animate=animate,
        animation_delay_ms=args.delay,
        seed=args.seed,
        step_limit=args.step_limit,
        on_frame=TerminalAnimator(args.delay) if animate else None,
        on_result=attempt_reporter(animate, output_fn),
    )

    if args.image and report.final_grid is not None:
        render_image(report.final_grid).save(args.image)
        logger.info("Saved board image to %s", args.image)

    return 0 if report.solved else 1


if __name__ == "__main__":
    sys.exit(main())
