"""Frame sinks for observing the search.

A frame sink is any ``FrameFn``: a callable receiving the :class:`Board`
after each placement or undo. Sinks only read the board (through
``board.view()``); they never influence the search.
"""

import sys
import time
from typing import TextIO, Optional, TYPE_CHECKING

from knight_tour.renderer.text import render_text

if TYPE_CHECKING:
    from knight_tour.board import Board


def no_frame(board: "Board") -> None:
    """Discard the frame."""


class TerminalAnimator:
    """Print the board after every change, then pause.

    Attributes:
        delay_ms: Pause after each frame in milliseconds; 0 disables it.
        stream: Text stream frames are written to (stdout by default).
    """

    delay_ms: int
    stream: Optional[TextIO]

    def __init__(self, delay_ms: int, stream: Optional[TextIO] = None):
        self.delay_ms = delay_ms
        self.stream = stream
        self.frames = 0

    def __call__(self, board: "Board") -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(render_text(board.view()))
        out.flush()
        self.frames += 1
        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000)
