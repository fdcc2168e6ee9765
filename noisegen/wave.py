import logging
import os

import numpy as np
import soundfile as sf

from .errors import WaveWriteError

logger = logging.getLogger(__name__)

PCM_MAX = 32767


def to_pcm16(samples) -> np.ndarray:
    """Clamp to [-1, 1] and quantize to signed 16-bit, truncating toward zero."""
    x = np.clip(np.asarray(samples, dtype=np.float64), -1.0, 1.0)
    return (x * PCM_MAX).astype(np.int16)


def write_wav(path, samples, sample_rate: int) -> None:
    """Write a mono 16-bit PCM WAV file."""
    if sample_rate <= 0:
        raise ValueError(f"Sample rate must be positive, got {sample_rate}")
    pcm = to_pcm16(samples)
    try:
        sf.write(os.fspath(path), pcm, int(sample_rate), subtype="PCM_16", format="WAV")
    except (OSError, RuntimeError) as e:
        raise WaveWriteError(f"Could not write {path}: {e}") from e
    logger.info("wrote %d samples to %s", len(pcm), path)
