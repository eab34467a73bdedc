# bloom_api/utils/rand.py
import math
from typing import Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1). `random.Random` qualifies."""

    def random(self) -> float: ...


class NumpyRandomSource:
    """Production source backed by a numpy Generator seeded from OS entropy."""

    def __init__(self, seed: int | None = None):
        self._rng = np.random.default_rng(seed)

    def random(self) -> float:
        return float(self._rng.random())


def random_float(rng: RandomSource, lo: float, hi: float) -> float:
    """Uniform float in [lo, hi). With lo > hi the draw lands in (hi, lo]."""
    return rng.random() * (hi - lo) + lo


def random_int(rng: RandomSource, lo: float, hi: float) -> int:
    """Uniform integer in [ceil(lo), floor(hi)], both ends inclusive."""
    lo = math.ceil(lo)
    hi = math.floor(hi)
    return math.floor(rng.random() * (hi - lo + 1)) + lo


def uniform_pick(rng: RandomSource, choices: Sequence[T]) -> T:
    if not choices:
        raise ValueError("uniform_pick needs at least one choice")
    idx = int(rng.random() * len(choices))
    return choices[min(idx, len(choices) - 1)]
