"""Search configuration.

A :class:`SearchConfig` is fixed for the lifetime of one :class:`Board`.
Use :func:`dataclasses.replace` to derive variants (the driver does this to
build its randomized fallback from the same settings).
"""

from dataclasses import dataclass
from typing import Optional

from knight_tour.types import Strategy


DEFAULT_ANIMATION_DELAY_MS = 150
RANDOM_RESTARTS = 10


@dataclass(frozen=True)
class SearchConfig:
    """Immutable settings for one search engine.

    Attributes:
        animate: Emit a frame after every placement and undo.
        animation_delay_ms: Pause after each frame of the terminal animator.
        use_warnsdorff: Order candidates by Warnsdorff's rule; otherwise
            shuffle them and allow ``RANDOM_RESTARTS`` attempts.
        seed: Seed for the engine's random source (``None`` for OS entropy).
        step_limit: Maximum tentative placements per attempt; ``None`` for
            an unbounded search.
    """

    animate: bool = False
    animation_delay_ms: int = DEFAULT_ANIMATION_DELAY_MS
    use_warnsdorff: bool = True
    seed: Optional[int] = None
    step_limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.animation_delay_ms < 0:
            raise ValueError(
                f"animation_delay_ms must be non-negative, got {self.animation_delay_ms}"
            )
        if self.step_limit is not None and self.step_limit <= 0:
            raise ValueError(f"step_limit must be positive, got {self.step_limit}")

    @property
    def strategy(self) -> Strategy:
        return Strategy.WARNSDORFF if self.use_warnsdorff else Strategy.RANDOM

    @property
    def max_attempts(self) -> int:
        """One pass for the deterministic heuristic, bounded restarts otherwise."""
        return 1 if self.use_warnsdorff else RANDOM_RESTARTS
