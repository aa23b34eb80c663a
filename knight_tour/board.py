"""Board and backtracking search engine.

A :class:`Board` owns one 8x8 grid of move-order integers and searches for
an open knight's tour from a given start square. Cell value ``0`` means the
square is unvisited; ``k > 0`` means it was the ``k``-th square visited.

Search outline (depth-first, chronological backtracking):

1. Collect the unvisited on-board knight destinations of the current square.
2. Order them with the configured :data:`knight_tour.types.OrderFn`
   (Warnsdorff's rule or a random shuffle).
3. For each candidate: *apply* the next move number, recurse, and on failure
   *undo* the assignment before trying the next candidate.

Every apply has a matching undo on the failure path, so at any point the
nonzero cells form a single knight path with values ``1..m``.

Failure to find a tour is a normal outcome and is reported as ``False``;
the engine never raises for it.
"""

import logging
import random
from typing import List, Optional

import numpy as np

from knight_tour.animation import TerminalAnimator, no_frame
from knight_tour.config import SearchConfig
from knight_tour.moves import (
    BOARD_SIZE,
    SQUARE_COUNT,
    get_order_fn,
    in_bounds,
    knight_destinations,
)
from knight_tour.types import Coord, FrameFn, Grid, OrderFn

logger = logging.getLogger(__name__)


class Board:
    """Mutable 8x8 board plus the search that fills it.

    Attributes:
        config (SearchConfig): Settings fixed at construction.
        rng (random.Random): Random source used by the shuffling strategy.
    """

    config: SearchConfig
    rng: random.Random

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        rng: Optional[random.Random] = None,
        on_frame: Optional[FrameFn] = None,
    ):
        self.config = config or SearchConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        if on_frame is None:
            on_frame = (
                TerminalAnimator(self.config.animation_delay_ms)
                if self.config.animate
                else no_frame
            )
        self._on_frame: FrameFn = on_frame
        self._order_fn: OrderFn = get_order_fn(self.config.strategy)
        self._grid: Grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int_)
        self._move_count = 0
        self._steps = 0
        self._attempts = 0

    # -------- Public API --------

    def reset(self) -> None:
        """Clear every cell and the visited count."""
        self._grid.fill(0)
        self._move_count = 0

    def attempt_tour(self, start_row: int, start_col: int) -> bool:
        """Try to build a full tour starting at ``(start_row, start_col)``.

        An off-board start returns ``False`` without touching the grid.
        Warnsdorff mode makes a single attempt; random mode makes up to
        ``RANDOM_RESTARTS`` attempts, each from a freshly reset board.

        Returns:
            bool: True if some attempt visited all 64 squares. The grid then
            holds the tour; otherwise it holds only the start square.
        """
        self._attempts = 0
        if not self.is_valid_position(start_row, start_col):
            logger.debug("Rejected off-board start %s", (start_row, start_col))
            return False

        for attempt in range(self.config.max_attempts):
            self._begin(start_row, start_col)
            if attempt == 0:
                # Restarts re-mark the start square silently
                self._emit_frame()
            self._attempts += 1
            solved = self._search(start_row, start_col, 2)
            logger.debug(
                "%s attempt %d from %s: %s after %d steps",
                self.config.strategy,
                self._attempts,
                (start_row, start_col),
                "solved" if solved else "failed",
                self._steps,
            )
            if solved:
                return True
        return False

    def read_cell(self, row: int, col: int) -> int:
        """Return the move number at ``(row, col)`` (0 if unvisited)."""
        self._check_bounds(row, col)
        return int(self._grid[row, col])

    def accessibility_count(self, row: int, col: int) -> int:
        """Number of unvisited on-board squares a knight reaches from here.

        Read-only; the candidate square itself need not be occupied.
        """
        return sum(1 for pos in knight_destinations(row, col) if self.is_valid_move(*pos))

    def candidate_moves(self, row: int, col: int) -> List[Coord]:
        """Unvisited knight destinations from ``(row, col)`` in move order."""
        return [pos for pos in knight_destinations(row, col) if self.is_valid_move(*pos)]

    def is_valid_position(self, row: int, col: int) -> bool:
        return in_bounds(row, col)

    def is_valid_move(self, row: int, col: int) -> bool:
        return in_bounds(row, col) and bool(self._grid[row, col] == 0)

    def view(self) -> Grid:
        """Read-only view of the live grid (changes as the search runs)."""
        grid_view = self._grid.view()
        grid_view.setflags(write=False)
        return grid_view

    def snapshot(self) -> Grid:
        """Read-only copy of the grid as it is now."""
        grid_copy = self._grid.copy()
        grid_copy.setflags(write=False)
        return grid_copy

    @property
    def move_count(self) -> int:
        """Length of the current path (number of visited squares)."""
        return self._move_count

    @property
    def steps(self) -> int:
        """Tentative placements made during the most recent attempt."""
        return self._steps

    @property
    def attempts(self) -> int:
        """Search passes made by the most recent ``attempt_tour`` call."""
        return self._attempts

    # -------- Search internals --------

    def _begin(self, row: int, col: int) -> None:
        self.reset()
        self._steps = 0
        self._grid[row, col] = 1
        self._move_count = 1

    def _search(self, row: int, col: int, next_move: int) -> bool:
        if next_move > SQUARE_COUNT:
            return True

        candidates = self._order_fn(self, self.candidate_moves(row, col))
        for new_row, new_col in candidates:
            if self._out_of_steps():
                return False
            self._apply(new_row, new_col, next_move)
            if self._search(new_row, new_col, next_move + 1):
                return True
            self._undo(new_row, new_col)
        return False

    def _out_of_steps(self) -> bool:
        limit = self.config.step_limit
        return limit is not None and self._steps >= limit

    def _apply(self, row: int, col: int, move_number: int) -> None:
        self._steps += 1
        self._grid[row, col] = move_number
        self._move_count += 1
        self._emit_frame()

    def _undo(self, row: int, col: int) -> None:
        self._grid[row, col] = 0
        self._move_count -= 1
        self._emit_frame()

    def _emit_frame(self) -> None:
        if self.config.animate:
            self._on_frame(self)

    def _check_bounds(self, row: int, col: int) -> None:
        if not in_bounds(row, col):
            raise IndexError(
                f"Out of bounds: {(row, col)} for board {BOARD_SIZE}x{BOARD_SIZE}"
            )
