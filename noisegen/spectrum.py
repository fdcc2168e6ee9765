"""Binned magnitude spectrum of a sample buffer, for the text chart."""

import logging
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np
from scipy import fft as sp_fft

logger = logging.getLogger(__name__)

GRAPH_WIDTH = 60


@dataclass(frozen=True)
class Spectrum:
    bins: np.ndarray
    nyquist: float
    chunk_size: int
    sample_rate: int

    @property
    def max_bin(self) -> float:
        return float(self.bins.max()) if self.bins.size else 0.0

    def __len__(self) -> int:
        return int(self.bins.size)


def magnitudes(samples: Union[np.ndarray, Sequence[float]]) -> np.ndarray:
    """Normalized magnitudes |X[k]| / N for k = 0..N//2 (DC through Nyquist)."""
    x = np.asarray(samples, dtype=np.float64)
    n = x.size
    if n == 0:
        return np.zeros(0, dtype=np.float64)
    coeffs = sp_fft.fft(x)
    return np.abs(coeffs[: n // 2 + 1]) / n


def bin_magnitudes(mags: np.ndarray, num_bins: int = GRAPH_WIDTH) -> np.ndarray:
    """Sum ``mags`` into ``num_bins`` contiguous chunks.

    The chunk size is ``len(mags) // num_bins``; the trailing remainder is
    dropped so every column covers the same number of coefficients. With fewer
    magnitudes than bins, each magnitude is its own bin and fewer bins come
    back.
    """
    if num_bins <= 0:
        raise ValueError(f"Number of bins must be positive, got {num_bins}")
    mags = np.asarray(mags, dtype=np.float64)
    if mags.size < num_bins:
        return mags.copy()
    chunk = mags.size // num_bins
    return mags[: chunk * num_bins].reshape(num_bins, chunk).sum(axis=1)


class SpectrumAnalyzer:
    def __init__(self, num_bins: int = GRAPH_WIDTH):
        if num_bins <= 0:
            raise ValueError(f"Number of bins must be positive, got {num_bins}")
        self.num_bins = num_bins

    def analyze(self, samples, sample_rate: int) -> Spectrum:
        if sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {sample_rate}")
        mags = magnitudes(samples)
        bins = bin_magnitudes(mags, self.num_bins)
        chunk = max(mags.size // self.num_bins, 1) if mags.size else 0
        if 0 < mags.size < self.num_bins:
            logger.warning(
                "only %d magnitudes for %d bins, returning one bin per magnitude",
                mags.size, self.num_bins,
            )
        return Spectrum(bins=bins, nyquist=sample_rate / 2, chunk_size=chunk, sample_rate=int(sample_rate))


def analyze_spectrum(samples, sample_rate: int, num_bins: int = GRAPH_WIDTH) -> Spectrum:
    return SpectrumAnalyzer(num_bins).analyze(samples, sample_rate)
