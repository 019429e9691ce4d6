"""Core constants for PeakSynth.

Defaults of the reference configuration and the sampling ranges used by the
ensemble generator. Every value can be overridden from a configuration file
or the command line.
"""

# =============================================================================
# Channel Axis
# =============================================================================

DEFAULT_CHANNEL_COUNT = 1340
"""Number of channels in the reference spectra."""

DEFAULT_SPECTRUM_COUNT = 100
"""Number of spectrum files written by a default ``generate`` run."""

# =============================================================================
# Ensemble Sampling Ranges (half-open intervals)
# =============================================================================

DEFAULT_PEAKS_PER_SPECTRUM = 20

AMPLITUDE_RANGE = (100.0, 1100.0)
WIDTH_RANGE = (1.0, 26.0)
STEEPNESS_RANGE = (0.0, 0.1)

# Cut points of the categorical draw over
# {gaussian-left, gaussian-right, lorentzian-left, lorentzian-right}
SHAPE_CUT_POINTS = (0.25, 0.5, 0.75)

# =============================================================================
# Frames and Outliers
# =============================================================================

FRAME_RANGE = (3, 12)
"""Per-spectrum frame count is drawn from ``[min, max)``."""

OUTLIER_PROBABILITY = 0.01
OUTLIER_SCALE = 30.0

# =============================================================================
# Noise
# =============================================================================

IRWIN_HALL_TERMS = 12
"""Uniform draws summed per approximately normal value."""

IRWIN_HALL_SHIFT = 6.0

ENTROPY_WORD_BYTES = 4
"""Bytes of entropy consumed per uniform value."""
