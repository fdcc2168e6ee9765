import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure the repository root is on sys.path so tests can import the package without installing it
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedSource:
    """Replays a fixed list of white draws, wrapping around when exhausted."""

    def __init__(self, values):
        self.values = np.asarray(values, dtype=np.float64)
        self.pos = 0

    def next(self) -> float:
        v = float(self.values[self.pos % len(self.values)])
        self.pos += 1
        return v

    def draw(self, n: int) -> np.ndarray:
        idx = (self.pos + np.arange(n)) % len(self.values)
        self.pos += n
        return self.values[idx]


@pytest.fixture
def scripted():
    return ScriptedSource
