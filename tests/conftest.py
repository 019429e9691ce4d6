"""Pytest fixtures for PeakSynth tests."""

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from peaksynth.core.domain.config import SynthesisConfig
from peaksynth.core.lineshapes import Gaussian, Lorentzian, Skew
from peaksynth.core.pipeline import Pipeline


@pytest.fixture
def axis():
    """Reference channel axis 0..1339."""
    return np.arange(1340, dtype=float)


@pytest.fixture
def mixed_pipeline():
    """Plain and skewed shapes of both kinds."""
    return Pipeline(
        [
            Gaussian(500.0, 4.0, 20.0),
            Lorentzian(200.0, 6.0, 50.0),
            Skew.left(Gaussian(900.0, 300.0, 12.0), 0.05),
            Skew.right(Lorentzian(1100.0, 800.0, 7.5), 0.08),
        ]
    )


@pytest.fixture
def small_config(tmp_path):
    """Fast configuration writing into a temporary directory."""
    return SynthesisConfig.model_validate(
        {
            "spectrum_count": 4,
            "seed": 1234,
            "workers": 2,
            "axis": {"channel_count": 64},
            "ensemble": {"peaks_per_spectrum": 5},
            "frames": {"min_frames": 1, "max_frames": 3},
            "output": {"directory": str(tmp_path / "spectra")},
        }
    )


@pytest.fixture
def sample_config_file(tmp_path):
    """Create a sample configuration file."""
    config_content = """
spectrum_count = 10
seed = 7

[axis]
channel_count = 256

[ensemble]
mode = "fixed"
peaks_per_spectrum = 8
width_range = [2.0, 10.0]

[noise]
kind = "uniform"
scale = 0.5

[frames]
min_frames = 2
max_frames = 4

[outliers]
enabled = false

[output]
directory = "Results"
"""
    config_path = tmp_path / "config.toml"
    config_path.write_text(config_content)
    return config_path
