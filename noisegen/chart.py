import numpy as np

from .spectrum import GRAPH_WIDTH, Spectrum

GRAPH_HEIGHT = 20
LABEL_WIDTH = 10


def render_chart(bins, height: int = GRAPH_HEIGHT, width: int = GRAPH_WIDTH) -> str:
    """Render ``bins`` as a column chart ``height`` rows tall.

    Columns are scaled against the largest bin. At most ``width`` columns are
    drawn. An all-zero input gives a flat chart.
    """
    if height <= 0 or width <= 0:
        raise ValueError(f"Chart size must be positive, got {height}x{width}")
    values = np.asarray(bins, dtype=np.float64)[:width]
    peak = float(values.max()) if values.size else 0.0
    if peak > 0:
        levels = np.rint(values / peak * height).astype(int)
    else:
        levels = np.zeros(values.size, dtype=int)

    lines = []
    for row in range(height, 0, -1):
        label = peak * row / height
        cells = "".join("#" if level >= row else " " for level in levels)
        lines.append(f"{label:{LABEL_WIDTH}.4f} |{cells}")
    lines.append(f"{0.0:{LABEL_WIDTH}.4f} +" + "-" * len(levels))
    return "\n".join(lines)


def format_spectrum(spectrum: Spectrum, height: int = GRAPH_HEIGHT, width: int = GRAPH_WIDTH) -> str:
    return "\n".join([
        "Linear FFT:",
        render_chart(spectrum.bins, height, width),
        f"Frequency 0 to {spectrum.nyquist:g} - linear",
    ])
