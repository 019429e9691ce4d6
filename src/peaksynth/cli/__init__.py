"""Command-line interface for PeakSynth."""

from peaksynth.cli.app import app

__all__ = ["app"]
