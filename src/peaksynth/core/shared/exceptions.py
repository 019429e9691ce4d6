"""Exception taxonomy for PeakSynth.

Peak construction is deliberately unchecked: malformed shape parameters
surface as non-finite numbers rather than exceptions. Everything below
concerns configuration and the I/O boundary.
"""

from __future__ import annotations

from pathlib import Path


class PeakSynthError(Exception):
    """Base class for all PeakSynth-specific exceptions."""


class ConfigError(PeakSynthError):
    """Configuration-related errors (invalid/missing options, schema issues)."""


class NoiseSourceError(PeakSynthError):
    """The entropy device could not be read."""


class OutputError(PeakSynthError):
    """A spectrum destination could not be opened."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot open destination {path}: {cause}")


class NumericsError(PeakSynthError):
    """Numeric instability or invalid arithmetic conditions (NaNs, overflows)."""


__all__ = [
    "ConfigError",
    "NoiseSourceError",
    "NumericsError",
    "OutputError",
    "PeakSynthError",
]
