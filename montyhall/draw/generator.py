"""
Random draws without replacement.

A generator holds a shrinking pool of candidate values and hands them out
one at a time in uniformly random order. Values can also be struck from the
pool explicitly when they were obtained some other way.
"""

import numpy as np
from typing import List, Optional, Sequence, Tuple


class ValueNotAvailableError(ValueError):
    """Raised when force-removing a value that is not in the candidate pool."""


class DrawExhaustedError(LookupError):
    """Raised when drawing from an empty candidate pool."""


class NoRepeatGenerator:
    """
    Draws unique values from an integer range or an explicit candidate list.

    Args:
        low: Lower bound of the range (inclusive). Ignored if remaining is given.
        high: Upper bound of the range (inclusive). Ignored if remaining is given.
        remaining: Explicit candidate values, used in the given order
        seed: Random source (accepts None, int, SeedSequence or Generator)
    """

    def __init__(
        self,
        low: Optional[int] = None,
        high: Optional[int] = None,
        remaining: Optional[Sequence[int]] = None,
        seed=None
    ):
        if remaining is None:
            if low is None or high is None:
                raise ValueError("Either low/high or remaining must be provided")
            self._remaining: List[int] = list(range(low, high + 1))
        else:
            self._remaining = list(remaining)

        # default_rng returns a Generator argument unaltered
        self._rng = np.random.default_rng(seed)

    def __len__(self) -> int:
        return len(self._remaining)

    def __contains__(self, value) -> bool:
        return value in self._remaining

    @property
    def remaining(self) -> Tuple[int, ...]:
        """Values that can still be drawn."""
        return tuple(self._remaining)

    def draw(self) -> int:
        """
        Draw one value uniformly at random and remove it from the pool.

        Raises:
            DrawExhaustedError: If every value has already been drawn or removed
        """
        if not self._remaining:
            raise DrawExhaustedError("No values left to draw")

        index = int(self._rng.integers(len(self._remaining)))
        return self._remaining.pop(index)

    def force_remove(self, value: int) -> None:
        """
        Remove a specific value so it is never drawn.

        Raises:
            ValueNotAvailableError: If the value is outside the bounds or already gone
        """
        try:
            self._remaining.remove(value)
        except ValueError:
            raise ValueNotAvailableError(
                f"Value {value!r} is out of bounds or no longer available"
            ) from None
