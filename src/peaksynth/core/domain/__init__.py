"""Domain models for PeakSynth."""

from peaksynth.core.domain.config import (
    AxisConfig,
    EnsembleConfig,
    FrameConfig,
    NoiseConfig,
    OutlierConfig,
    OutputConfig,
    SynthesisConfig,
)

__all__ = [
    "AxisConfig",
    "EnsembleConfig",
    "FrameConfig",
    "NoiseConfig",
    "OutlierConfig",
    "OutputConfig",
    "SynthesisConfig",
]
