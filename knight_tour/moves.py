"""Knight move vectors and move-ordering functions.

``KNIGHT_MOVES`` is the canonical enumeration of the eight L-shaped knight
displacements. Its order matters: it is the order in which candidate
squares are generated and therefore the tie-break order of the Warnsdorff
heuristic.

Each *order function* maps (board, candidates) -> candidates in the order
the search should try them. Contract (``OrderFn``):

* Must return a permutation of ``candidates``.
* Must not mutate the board's grid.
"""

from typing import Dict, Iterator, List, TYPE_CHECKING

from pyrsistent import pvector
from pyrsistent.typing import PVector

from knight_tour.types import Coord, MoveVector, OrderFn, Strategy

if TYPE_CHECKING:
    from knight_tour.board import Board


BOARD_SIZE = 8
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

KNIGHT_MOVES: PVector[MoveVector] = pvector(
    [
        (-2, -1),
        (-2, 1),
        (-1, -2),
        (-1, 2),
        (1, -2),
        (1, 2),
        (2, -1),
        (2, 1),
    ]
)


def in_bounds(row: int, col: int) -> bool:
    """Return True if ``(row, col)`` lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def knight_destinations(row: int, col: int) -> Iterator[Coord]:
    """Yield every on-board square a knight reaches from ``(row, col)``.

    Squares come out in ``KNIGHT_MOVES`` order. Occupancy is not checked.
    """
    for d_row, d_col in KNIGHT_MOVES:
        new_row, new_col = row + d_row, col + d_col
        if in_bounds(new_row, new_col):
            yield (new_row, new_col)


def is_knight_move(src: Coord, dst: Coord) -> bool:
    """Return True if ``dst`` is one knight move away from ``src``."""
    return (dst[0] - src[0], dst[1] - src[1]) in KNIGHT_MOVES


def warnsdorff_order(board: "Board", candidates: List[Coord]) -> List[Coord]:
    """Most constrained square first.

    Sorts ascending by the accessibility count of each destination.
    ``sorted`` is stable, so ties keep move-vector order.
    """
    return sorted(candidates, key=lambda pos: board.accessibility_count(*pos))


def random_order(board: "Board", candidates: List[Coord]) -> List[Coord]:
    """Uniformly random permutation drawn from the board's random source."""
    shuffled = list(candidates)
    board.rng.shuffle(shuffled)
    return shuffled


# Order function registry keyed by strategy
ORDER_FN_REGISTRY: Dict[Strategy, OrderFn] = {
    Strategy.WARNSDORFF: warnsdorff_order,
    Strategy.RANDOM: random_order,
}
"""Registry of move ordering strategies to callables."""


def get_order_fn(name: str) -> OrderFn:
    """Look up an order function by strategy name.

    Raises:
        ValueError: If ``name`` is not a known strategy.
    """
    try:
        return ORDER_FN_REGISTRY[Strategy(name)]
    except ValueError:
        raise ValueError(f"Unknown move ordering strategy: {name}") from None
