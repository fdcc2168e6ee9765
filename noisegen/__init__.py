"""Colored noise synthesis and a binned spectrum view for it."""

from .errors import NoiseGenError, PlaybackError, WaveWriteError
from .generators import NoiseGenerator, UniformSource
from .spectrum import Spectrum, SpectrumAnalyzer, analyze_spectrum
from .types import NoiseType

__version__ = "0.1.0"

__all__ = [
    "NoiseType",
    "NoiseGenerator",
    "UniformSource",
    "Spectrum",
    "SpectrumAnalyzer",
    "analyze_spectrum",
    "NoiseGenError",
    "WaveWriteError",
    "PlaybackError",
]
