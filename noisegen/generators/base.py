from dataclasses import dataclass
from typing import Optional

import numpy as np

DEFAULT_SAMPLE_RATE = 44100

# smallest double above 1.0, so uniform() can return exactly 1.0
_UPPER = np.nextafter(1.0, 2.0)


class UniformSource:
    """Seedable uniform source on [-1, 1], both ends inclusive."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next(self) -> float:
        return min(float(self._rng.uniform(-1.0, _UPPER)), 1.0)

    def draw(self, n: int) -> np.ndarray:
        if n <= 0:
            return np.zeros(0, dtype=np.float64)
        return np.minimum(self._rng.uniform(-1.0, _UPPER, n), 1.0)

    def __repr__(self) -> str:
        return f"UniformSource(seed={self.seed!r})"


@dataclass
class FilterBase:
    sample_rate: int = DEFAULT_SAMPLE_RATE

    def next_sample(self, white: float) -> float:
        raise NotImplementedError

    def process(self, white: np.ndarray) -> np.ndarray:
        out = np.empty(len(white), dtype=np.float64)
        for i, w in enumerate(white):
            out[i] = self.next_sample(float(w))
        return out

    def reset(self) -> None:
        pass
