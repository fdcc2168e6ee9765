from .base import DEFAULT_SAMPLE_RATE, UniformSource
from .noise import (
    DEFAULT_GRAY_FREQUENCY,
    BlueFilter,
    BrownFilter,
    GrayFilter,
    NoiseGenerator,
    PinkFilter,
    WhiteFilter,
)

__all__ = [
    "DEFAULT_SAMPLE_RATE",
    "DEFAULT_GRAY_FREQUENCY",
    "UniformSource",
    "NoiseGenerator",
    "WhiteFilter",
    "PinkFilter",
    "BrownFilter",
    "BlueFilter",
    "GrayFilter",
]
