"""Headless tests for spectrum plots."""

import numpy as np
from matplotlib.figure import Figure

from peaksynth.plotting import plot_spectrum, save_figure


def test_plot_spectrum_with_components(axis, mixed_pipeline, tmp_path):
    frame = mixed_pipeline.superpose(axis, np.random.default_rng(0).normal(size=axis.size))
    fig = plot_spectrum(axis, frame, mixed_pipeline, title="Spectrum 0")

    assert isinstance(fig, Figure)
    ax = fig.axes[0]
    assert len(ax.lines) == 2 + len(mixed_pipeline)
    assert ax.get_title() == "Spectrum 0"

    path = tmp_path / "plots" / "spectrum.png"
    save_figure(fig, path)
    assert path.stat().st_size > 0


def test_plot_spectrum_signal_only(axis, mixed_pipeline):
    fig = plot_spectrum(axis, np.zeros_like(axis), mixed_pipeline, show_components=False)
    assert len(fig.axes[0].lines) == 2
