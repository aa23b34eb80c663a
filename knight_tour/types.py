"""Common type aliases and enumerations.

``OrderFn`` and ``FrameFn`` are the two extension points of the search
engine: the first decides in which order candidate squares are tried, the
second observes every placement and undo (animation, tracing).
"""

from enum import StrEnum, auto
from typing import Callable, List, Tuple, TYPE_CHECKING

import numpy as np
import numpy.typing as npt


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from knight_tour.board import Board

# (row, col), both 0-based
Coord = Tuple[int, int]
MoveVector = Tuple[int, int]

Grid = npt.NDArray[np.int_]

OrderFn = Callable[["Board", List[Coord]], List[Coord]]
FrameFn = Callable[["Board"], None]


class Strategy(StrEnum):
    """Move ordering strategies known to the engine."""

    WARNSDORFF = auto()
    RANDOM = auto()
