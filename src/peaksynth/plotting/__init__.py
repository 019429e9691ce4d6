"""Plotting utilities for PeakSynth."""

from peaksynth.plotting.spectrum import plot_spectrum, save_figure

__all__ = ["plot_spectrum", "save_figure"]
