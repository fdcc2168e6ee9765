import numpy as np
import pytest

from noisegen.generators import NoiseGenerator
from noisegen.spectrum import SpectrumAnalyzer, analyze_spectrum, bin_magnitudes, magnitudes
from noisegen.types import NoiseType


@pytest.mark.parametrize("length", [1, 50, 200, 1000, 44100])
def test_zero_input_gives_zero_bins(length):
    spectrum = analyze_spectrum(np.zeros(length), 44100)
    assert np.all(spectrum.bins == 0.0)
    assert spectrum.max_bin == 0.0


def test_sine_lands_in_its_bin():
    sample_rate = 12000
    t = np.arange(sample_rate) / sample_rate
    tone = np.sin(2 * np.pi * 2550.0 * t)
    spectrum = analyze_spectrum(tone, sample_rate)

    # 6001 magnitudes -> 100 coefficients (100 Hz) per bin
    assert len(spectrum) == 60
    assert spectrum.chunk_size == 100
    assert int(np.argmax(spectrum.bins)) == 25
    assert spectrum.bins[25] == pytest.approx(0.5, abs=1e-6)
    assert spectrum.bins.sum() - spectrum.bins[25] < 1e-6


def test_dc_component():
    spectrum = analyze_spectrum(np.ones(600), 1000)
    assert spectrum.bins[0] == pytest.approx(1.0)
    assert spectrum.bins[1:].sum() == pytest.approx(0.0, abs=1e-9)


def test_magnitudes_cover_dc_to_nyquist():
    assert len(magnitudes(np.zeros(1000))) == 501
    assert len(magnitudes(np.zeros(999))) == 500
    assert len(magnitudes([])) == 0


def test_remainder_is_dropped():
    samples = np.random.default_rng(0).uniform(-1, 1, 1000)
    mags = magnitudes(samples)
    spectrum = analyze_spectrum(samples, 1000)
    # 501 magnitudes, 8 per bin, the last 21 are not charted
    assert spectrum.chunk_size == 8
    assert len(spectrum) == 60
    assert spectrum.bins.sum() == pytest.approx(mags[:480].sum())
    np.testing.assert_allclose(spectrum.bins[0], mags[:8].sum())


def test_bins_are_sums_not_means():
    mags = np.ones(120)
    np.testing.assert_array_equal(bin_magnitudes(mags), np.full(60, 2.0))


def test_short_input_gives_one_bin_per_magnitude():
    samples = np.random.default_rng(1).uniform(-1, 1, 50)
    spectrum = analyze_spectrum(samples, 8000)
    assert len(spectrum) == 26
    assert spectrum.chunk_size == 1
    np.testing.assert_allclose(spectrum.bins, magnitudes(samples))


def test_empty_input():
    spectrum = analyze_spectrum([], 44100)
    assert len(spectrum) == 0
    assert spectrum.chunk_size == 0
    assert spectrum.nyquist == 22050


def test_nyquist_label():
    assert analyze_spectrum(np.zeros(500), 44100).nyquist == 22050
    assert analyze_spectrum(np.zeros(500), 11025).nyquist == 5512.5


def test_custom_bin_count():
    spectrum = SpectrumAnalyzer(num_bins=10).analyze(np.zeros(1000), 1000)
    assert len(spectrum) == 10
    with pytest.raises(ValueError):
        SpectrumAnalyzer(num_bins=0)
    with pytest.raises(ValueError):
        analyze_spectrum(np.zeros(10), 0)


def test_pink_noise_falls_off():
    audio = NoiseGenerator(8000, seed=7).generate(NoiseType.PINK, 4.0)
    bins = analyze_spectrum(audio, 8000).bins
    assert bins[:10].mean() > 1.5 * bins[-10:].mean()


def test_brown_and_blue_tilt():
    brown = analyze_spectrum(NoiseGenerator(8000, seed=8).generate(NoiseType.BROWN, 4.0), 8000).bins
    blue = analyze_spectrum(NoiseGenerator(8000, seed=8).generate(NoiseType.BLUE, 4.0), 8000).bins
    assert brown[:10].mean() > 5 * brown[-10:].mean()
    assert blue[-10:].mean() > 3 * blue[:10].mean()
