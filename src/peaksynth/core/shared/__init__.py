"""Shared foundational utilities for PeakSynth."""

from peaksynth.core.shared.exceptions import (
    ConfigError,
    NoiseSourceError,
    NumericsError,
    OutputError,
    PeakSynthError,
)
from peaksynth.core.shared.reporter import (
    CompositeReporter,
    LoggingReporter,
    NullReporter,
    Reporter,
)

__all__ = [
    "CompositeReporter",
    "ConfigError",
    "LoggingReporter",
    "NoiseSourceError",
    "NullReporter",
    "NumericsError",
    "OutputError",
    "PeakSynthError",
    "Reporter",
]
