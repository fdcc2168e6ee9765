from enum import Enum
from typing import Protocol, Union

import numpy as np


class NoiseType(Enum):
    WHITE = "white"
    PINK = "pink"
    BROWN = "brown"
    BLUE = "blue"
    GRAY = "gray"

    @classmethod
    def parse(cls, value: Union["NoiseType", str]) -> "NoiseType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown noise type {value!r} (expected one of: {names})") from None

    def __str__(self) -> str:
        return self.value


class RandomSource(Protocol):
    def next(self) -> float: ...

    def draw(self, n: int) -> np.ndarray: ...
