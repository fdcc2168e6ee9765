import logging

import numpy as np

from .errors import PlaybackError

logger = logging.getLogger(__name__)


def _sounddevice():
    # PortAudio is loaded on import, keep it out of module import time
    try:
        import sounddevice as sd
    except OSError as e:
        raise PlaybackError(f"Audio output unavailable: {e}") from e
    return sd


class AudioSink:
    """Plays mono float buffers on the default output device.

    Construct it before generating audio; opening the device can take a while.
    """

    def __init__(self, device=None):
        self._sd = _sounddevice()
        self.device = device
        try:
            info = self._sd.query_devices(device, kind="output")
        except (ValueError, self._sd.PortAudioError) as e:
            raise PlaybackError(f"No usable output device: {e}") from e
        logger.debug("using output device %s", info.get("name", device))

    def play(self, samples, sample_rate: int) -> None:
        data = np.asarray(samples, dtype=np.float32)
        if data.size == 0:
            return
        print("Playing audio... Press Ctrl+C to stop.")
        try:
            self._sd.play(data, samplerate=int(sample_rate), device=self.device)
            self._sd.wait()
        except self._sd.PortAudioError as e:
            raise PlaybackError(f"Playback failed: {e}") from e
        finally:
            self._sd.stop()


def play_audio(samples, sample_rate: int) -> None:
    AudioSink().play(samples, sample_rate)
