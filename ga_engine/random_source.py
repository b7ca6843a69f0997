"""
Random sources for the GA engine.

The engine never touches a global generator. Every uniform draw used for
sampling comes from an object implementing RandomSource, so tests can
replace it with a fixed sequence of values.
"""

from itertools import cycle
from typing import Iterable, Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Anything that produces uniform floats in [0, 1)."""

    def random(self) -> float:
        ...


class NumpyRandomSource:
    """
    RandomSource backed by a numpy Generator.

    Args:
        rng: Generator to draw from (a fresh unseeded one if omitted)
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> "NumpyRandomSource":
        """Create a source from an integer seed (None for OS entropy)."""
        return cls(np.random.default_rng(seed))

    def random(self) -> float:
        return float(self.rng.random())


class SequenceRandomSource:
    """
    RandomSource that replays a fixed list of values.

    Values are returned in order and the sequence starts over once it is
    exhausted, so a short list can drive an arbitrarily long run.

    Args:
        values: Uniform values, each in [0, 1)

    Raises:
        ValueError: If values is empty or any value is outside [0, 1)
    """

    def __init__(self, values: Iterable[float]):
        self.values = [float(v) for v in values]
        if not self.values:
            raise ValueError("SequenceRandomSource needs at least one value")
        for value in self.values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Random values must be in [0, 1), got: {value}")
        self._iterator = cycle(self.values)
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return next(self._iterator)
