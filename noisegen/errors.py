class NoiseGenError(Exception):
    """Base class for failures outside the synthesis core."""


class WaveWriteError(NoiseGenError):
    pass


class PlaybackError(NoiseGenError):
    pass
