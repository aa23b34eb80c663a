"""Tour driver: Warnsdorff first, randomized backtracking as fallback.

:func:`run_tour` is the user-facing entry point. It runs a Warnsdorff-ordered
:class:`~knight_tour.board.Board` and, only if that fails, a second and fully
independent board configured for randomized plain backtracking from the
same start square. Nothing beyond those two attempts is tried.

The outcome is a frozen :class:`TourReport` holding one
:class:`AttemptResult` per attempt (grid snapshot, strategy, success flag).
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from knight_tour.board import Board
from knight_tour.config import DEFAULT_ANIMATION_DELAY_MS, SearchConfig
from knight_tour.types import Coord, FrameFn, Grid, Strategy
from knight_tour.utils.tour import count_visited, square_name, tour_path

logger = logging.getLogger(__name__)

ResultFn = Callable[["AttemptResult"], None]


@dataclass(frozen=True, eq=False)
class AttemptResult:
    """Outcome of one engine run.

    Attributes:
        strategy (Strategy): Move ordering the engine used.
        success (bool): True if the engine filled all 64 squares.
        grid (Grid): Read-only snapshot of the engine's final grid.
        steps (int): Tentative placements made in the engine's last attempt.
        attempts (int): Search passes the engine made (restarts included).
    """

    strategy: Strategy
    success: bool
    grid: Grid
    steps: int
    attempts: int = 1


@dataclass(frozen=True)
class TourReport:
    """All attempts made for one start square, in the order they ran."""

    start: Coord
    attempts: PVector[AttemptResult] = pvector()

    @property
    def solved(self) -> bool:
        return any(attempt.success for attempt in self.attempts)

    @property
    def final_grid(self) -> Optional[Grid]:
        """Grid of the attempt that ran last (``None`` if none ran)."""
        return self.attempts[-1].grid if self.attempts else None

    @property
    def winning_strategy(self) -> Optional[Strategy]:
        for attempt in self.attempts:
            if attempt.success:
                return attempt.strategy
        return None

    @property
    def description(self) -> Dict[str, Any]:
        """JSON-friendly summary of the report."""
        return {
            "start": list(self.start),
            "solved": self.solved,
            "winning_strategy": (
                str(self.winning_strategy) if self.winning_strategy else None
            ),
            "attempts": [
                {
                    "strategy": str(attempt.strategy),
                    "success": attempt.success,
                    "steps": attempt.steps,
                    "attempts": attempt.attempts,
                    "visited": count_visited(attempt.grid),
                    "path": [square_name(pos) for pos in tour_path(attempt.grid)],
                }
                for attempt in self.attempts
            ],
        }


def run_attempt(
    config: SearchConfig,
    start: Coord,
    on_frame: Optional[FrameFn] = None,
) -> AttemptResult:
    """Run a fresh board with ``config`` from ``start``."""
    board = Board(config, on_frame=on_frame)
    success = board.attempt_tour(*start)
    return AttemptResult(
        strategy=config.strategy,
        success=success,
        grid=board.snapshot(),
        steps=board.steps,
        attempts=board.attempts,
    )


def run_tour(
    start_row: int,
    start_col: int,
    animate: bool = False,
    animation_delay_ms: int = DEFAULT_ANIMATION_DELAY_MS,
    seed: Optional[int] = None,
    step_limit: Optional[int] = None,
    on_frame: Optional[FrameFn] = None,
    on_result: Optional[ResultFn] = None,
) -> TourReport:
    """Search for a tour from ``(start_row, start_col)`` (0-based).

    Args:
        start_row (int): Start row, expected in ``[0, 8)``.
        start_col (int): Start column, expected in ``[0, 8)``.
        animate (bool): Emit a frame after every placement and undo.
        animation_delay_ms (int): Pause per frame for the terminal animator.
        seed (int | None): Seed for the fallback's random source.
        step_limit (int | None): Per-attempt bound on tentative placements.
        on_frame (FrameFn | None): Frame sink; defaults to the terminal
            animator when ``animate`` is set.
        on_result (ResultFn | None): Called with each attempt's result as
            soon as that attempt finishes, before any fallback starts.

    Returns:
        TourReport: One attempt if Warnsdorff succeeds, two otherwise.
    """
    start = (start_row, start_col)
    config = SearchConfig(
        animate=animate,
        animation_delay_ms=animation_delay_ms,
        use_warnsdorff=True,
        seed=seed,
        step_limit=step_limit,
    )

    primary = _run_and_report(config, start, on_frame, on_result)
    if primary.success:
        return TourReport(start=start, attempts=pvector([primary]))

    logger.info("Falling back to randomized backtracking from %s", start)
    fallback = _run_and_report(
        replace(config, use_warnsdorff=False), start, on_frame, on_result
    )
    return TourReport(start=start, attempts=pvector([primary, fallback]))


def _run_and_report(
    config: SearchConfig,
    start: Coord,
    on_frame: Optional[FrameFn],
    on_result: Optional[ResultFn],
) -> AttemptResult:
    result = run_attempt(config, start, on_frame)
    logger.info(
        "%s search from %s: %s",
        result.strategy,
        start,
        "solved" if result.success else "failed",
    )
    if on_result is not None:
        on_result(result)
    return result
