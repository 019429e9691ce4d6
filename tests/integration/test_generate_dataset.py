"""End-to-end dataset generation through the CLI."""

import numpy as np
import pytest
from typer.testing import CliRunner

from peaksynth.cli.app import app
from peaksynth.core.ensemble import reference_pipeline

runner = CliRunner()


def _read_frames(path, channel_count):
    rows = np.loadtxt(path, delimiter=",")
    assert rows.shape[0] % channel_count == 0
    frames = rows.reshape(-1, channel_count, 2)
    for frame in frames:
        np.testing.assert_array_equal(frame[:, 0], np.arange(1, channel_count + 1))
    return frames[:, :, 1]


@pytest.fixture
def noiseless_config(tmp_path):
    path = tmp_path / "noiseless.toml"
    path.write_text(
        """
spectrum_count = 3
seed = 2024

[ensemble]
mode = "reference"

[noise]
scale = 0.0

[outliers]
enabled = false
"""
    )
    return path


def test_reference_dataset_is_pure_superposition(tmp_path, noiseless_config):
    out = tmp_path / "reference"
    result = runner.invoke(app, ["generate", "-c", str(noiseless_config), "-o", str(out)])
    assert result.exit_code == 0, result.stdout

    axis = np.arange(1340, dtype=float)
    expected = reference_pipeline().superpose(axis, np.zeros_like(axis))
    files = sorted(out.glob("spectrum_*.csv"))
    assert len(files) == 3
    for path in files:
        frames = _read_frames(path, 1340)
        assert 3 <= len(frames) < 12
        for frame in frames:
            np.testing.assert_allclose(frame, expected, rtol=1e-12, atol=1e-9)


def test_default_random_dataset(tmp_path):
    out = tmp_path / "random"
    result = runner.invoke(app, ["generate", "-o", str(out), "-n", "5", "-s", "11"])
    assert result.exit_code == 0, result.stdout

    files = sorted(out.glob("spectrum_*.csv"))
    assert len(files) == 5
    maxima = []
    for path in files:
        frames = _read_frames(path, 1340)
        assert np.isfinite(frames).all()
        maxima.append(frames.max())
    assert len(set(maxima)) == 5


def test_rerun_with_same_seed_is_identical(tmp_path):
    args = ["-n", "2", "--channels", "128", "-s", "99"]
    first = runner.invoke(app, ["generate", "-o", str(tmp_path / "a"), *args])
    second = runner.invoke(app, ["generate", "-o", str(tmp_path / "b"), *args])
    assert first.exit_code == second.exit_code == 0

    for name in ("spectrum_0000.csv", "spectrum_0001.csv"):
        assert (tmp_path / "a" / name).read_text() == (tmp_path / "b" / name).read_text()
