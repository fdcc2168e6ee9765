"""Colored noise filters and the generator that drives them.

Every filter consumes uniform white draws in [-1, 1] and keeps its own state,
so a generator can switch between noise types without one type disturbing
another. Block processing (``process``) and per-sample processing
(``next_sample``) share the same state.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import numpy as np
from scipy.signal import lfilter

from ..types import NoiseType, RandomSource
from .base import DEFAULT_SAMPLE_RATE, FilterBase, UniformSource

logger = logging.getLogger(__name__)

DEFAULT_GRAY_FREQUENCY = 1000.0

# (decay, gain) per first-order section, see https://www.firstpr.com.au/dsp/pink-noise/
PINK_SECTIONS = (
    (0.99886, 0.0555179),
    (0.99332, 0.0750759),
    (0.96900, 0.1538520),
    (0.86650, 0.3104856),
    (0.55000, 0.5329522),
    (-0.7616, -0.0168980),
)
PINK_DIRECT_GAIN = 0.5362
PINK_DELAY_GAIN = 0.115926
PINK_SCALE = 0.11

BROWN_STEP = 0.02
BROWN_GAIN = 3.5

BLUE_WEIGHT = 0.5

GRAY_GAIN = 0.3


@dataclass
class WhiteFilter(FilterBase):
    def next_sample(self, white: float) -> float:
        return white

    def process(self, white: np.ndarray) -> np.ndarray:
        return np.asarray(white, dtype=np.float64).copy()


@dataclass
class PinkFilter(FilterBase):
    """Voss-McCartney style bank of six leaky sections plus a delayed tap.

    ``state[0:6]`` are the section accumulators and ``state[6]`` holds the
    delayed white tap that is added to the *next* output.
    """
    state: List[float] = field(default_factory=lambda: [0.0] * 7)

    def next_sample(self, white: float) -> float:
        s = self.state
        for k, (decay, gain) in enumerate(PINK_SECTIONS):
            s[k] = decay * s[k] + white * gain
        pink = sum(s) + white * PINK_DIRECT_GAIN
        s[6] = white * PINK_DELAY_GAIN
        return min(max(pink * PINK_SCALE, -1.0), 1.0)

    def process(self, white: np.ndarray) -> np.ndarray:
        white = np.asarray(white, dtype=np.float64)
        if white.size == 0:
            return np.zeros(0, dtype=np.float64)
        acc = white * PINK_DIRECT_GAIN
        for k, (decay, gain) in enumerate(PINK_SECTIONS):
            section, _ = lfilter([gain], [1.0, -decay], white, zi=[decay * self.state[k]])
            self.state[k] = float(section[-1])
            acc += section
        delayed = np.empty_like(white)
        delayed[0] = self.state[6]
        delayed[1:] = white[:-1] * PINK_DELAY_GAIN
        acc += delayed
        self.state[6] = float(white[-1]) * PINK_DELAY_GAIN
        return np.clip(acc * PINK_SCALE, -1.0, 1.0)

    def reset(self) -> None:
        self.state = [0.0] * 7


@dataclass
class BrownFilter(FilterBase):
    # integrator, always within [-1, 1]; output carries BROWN_GAIN of headroom
    value: float = 0.0

    def next_sample(self, white: float) -> float:
        self.value = min(max(self.value + BROWN_STEP * white, -1.0), 1.0)
        return self.value * BROWN_GAIN

    def reset(self) -> None:
        self.value = 0.0


@dataclass
class BlueFilter(FilterBase):
    previous: float = 0.0

    def next_sample(self, white: float) -> float:
        out = (white - self.previous) * BLUE_WEIGHT
        self.previous = white
        return out

    def process(self, white: np.ndarray) -> np.ndarray:
        white = np.asarray(white, dtype=np.float64)
        if white.size == 0:
            return np.zeros(0, dtype=np.float64)
        prev = np.empty_like(white)
        prev[0] = self.previous
        prev[1:] = white[:-1]
        self.previous = float(white[-1])
        return (white - prev) * BLUE_WEIGHT

    def reset(self) -> None:
        self.previous = 0.0


@dataclass
class GrayFilter(FilterBase):
    """White noise under an |sin| envelope whose phase restarts every second."""
    frequency: float = DEFAULT_GRAY_FREQUENCY

    def envelope(self, frequency: Optional[float] = None) -> np.ndarray:
        freq = self.frequency if frequency is None else frequency
        t = np.arange(self.sample_rate) / self.sample_rate
        return np.abs(np.sin(2 * np.pi * freq * t))

    def block(self, source: RandomSource, frequency: Optional[float] = None) -> np.ndarray:
        return self.process(source.draw(self.sample_rate), frequency)

    def process(self, white: np.ndarray, frequency: Optional[float] = None) -> np.ndarray:
        white = np.asarray(white, dtype=np.float64)
        env = self.envelope(frequency)
        # envelope phase restarts at every block boundary
        idx = np.arange(white.size) % self.sample_rate
        return white * env[idx] * GRAY_GAIN


FILTERS = {
    NoiseType.WHITE: WhiteFilter,
    NoiseType.PINK: PinkFilter,
    NoiseType.BROWN: BrownFilter,
    NoiseType.BLUE: BlueFilter,
    NoiseType.GRAY: GrayFilter,
}


class NoiseGenerator:
    """Produces complete in-memory noise buffers.

    Filter state is kept per noise type for the lifetime of the generator, so
    consecutive calls with the same type continue one trajectory. Use
    :meth:`reset` to start over; state is never cleared implicitly.

    A generator is not meant to be shared between threads; give each worker
    its own instance.
    """

    def __init__(
        self,
        sample_rate: int = DEFAULT_SAMPLE_RATE,
        source: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ):
        if sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {sample_rate}")
        if source is not None and seed is not None:
            raise ValueError("Pass either a random source or a seed, not both")
        self.sample_rate = int(sample_rate)
        self.source = source if source is not None else UniformSource(seed)
        self._filters: Dict[NoiseType, FilterBase] = {}

    def filter_for(self, noise_type: Union[NoiseType, str]) -> FilterBase:
        kind = NoiseType.parse(noise_type)
        filt = self._filters.get(kind)
        if filt is None:
            filt = FILTERS[kind](sample_rate=self.sample_rate)
            self._filters[kind] = filt
        return filt

    def reset(self) -> None:
        for filt in self._filters.values():
            filt.reset()

    def num_samples(self, duration: float) -> int:
        if duration <= 0:
            return 0
        # halves round up, 5512.5 -> 5513
        return int(math.floor(self.sample_rate * duration + 0.5))

    def generate(
        self,
        noise_type: Union[NoiseType, str],
        duration: float,
        frequency: Optional[float] = None,
    ) -> np.ndarray:
        kind = NoiseType.parse(noise_type)
        num = self.num_samples(duration)
        logger.debug("generating %d %s samples at %d Hz", num, kind, self.sample_rate)
        if num == 0:
            return np.zeros(0, dtype=np.float32)
        if kind is NoiseType.GRAY and frequency is not None and frequency <= 0:
            raise ValueError(f"Frequency must be positive, got {frequency}")

        filt = self.filter_for(kind)
        if kind is NoiseType.GRAY:
            blocks = []
            total = 0
            while total < num:
                block = filt.block(self.source, frequency)
                blocks.append(block)
                total += len(block)
            samples = np.concatenate(blocks)[:num]
        else:
            samples = filt.process(self.source.draw(num))
        return samples.astype(np.float32)
