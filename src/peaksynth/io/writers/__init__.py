"""Spectrum output writers."""

from peaksynth.io.writers.csv_writer import SpectrumWriter, WriteReport

__all__ = ["SpectrumWriter", "WriteReport"]
