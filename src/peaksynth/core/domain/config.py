"""Domain configuration models for PeakSynth."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from peaksynth.core.constants import (
    AMPLITUDE_RANGE,
    DEFAULT_CHANNEL_COUNT,
    DEFAULT_PEAKS_PER_SPECTRUM,
    DEFAULT_SPECTRUM_COUNT,
    FRAME_RANGE,
    OUTLIER_PROBABILITY,
    OUTLIER_SCALE,
    STEEPNESS_RANGE,
    WIDTH_RANGE,
)
from peaksynth.core.ensemble import EnsembleGenerator
from peaksynth.core.noise import EntropySource, NoiseKind, NoiseSource

EnsembleMode = Literal["random", "fixed", "reference"]
LogFormat = Literal["text", "json"]
Range = tuple[float, float]


def _check_range(name: str, bounds: Range | None) -> None:
    if bounds is not None and not bounds[0] < bounds[1]:
        msg = f"{name} must satisfy low < high, got {bounds}"
        raise ValueError(msg)


class AxisConfig(BaseModel):
    """Channel axis definition."""

    model_config = ConfigDict(extra="forbid")

    channel_count: Annotated[int, Field(gt=0)] = Field(
        default=DEFAULT_CHANNEL_COUNT,
        description="Number of channels per frame.",
    )


class EnsembleConfig(BaseModel):
    """How the peak pipeline of each spectrum is obtained.

    Example TOML:
        [ensemble]
        mode = "random"
        peaks_per_spectrum = 20
        width_range = [1.0, 26.0]
    """

    model_config = ConfigDict(extra="forbid")

    mode: EnsembleMode = Field(
        default="random",
        description="random: new ensemble per spectrum; fixed: one ensemble for all; "
        "reference: built-in 20-peak ensemble.",
    )
    peaks_per_spectrum: Annotated[int, Field(ge=0)] = Field(
        default=DEFAULT_PEAKS_PER_SPECTRUM,
        description="Number of peaks in a generated ensemble.",
    )
    center_range: Range | None = Field(
        default=None,
        description="Range of peak centers. Defaults to the whole channel axis.",
    )
    amplitude_range: Range = Field(default=AMPLITUDE_RANGE)
    width_range: Range = Field(default=WIDTH_RANGE)
    steepness_range: Range = Field(default=STEEPNESS_RANGE)

    @model_validator(mode="after")
    def _validate_ranges(self) -> EnsembleConfig:
        _check_range("center_range", self.center_range)
        _check_range("amplitude_range", self.amplitude_range)
        _check_range("width_range", self.width_range)
        if self.steepness_range[0] > self.steepness_range[1]:
            msg = f"steepness_range must satisfy low <= high, got {self.steepness_range}"
            raise ValueError(msg)
        return self


class NoiseConfig(BaseModel):
    """Noise added as the initial offset of every frame."""

    model_config = ConfigDict(extra="forbid")

    kind: NoiseKind = Field(
        default="normal",
        description="normal: Irwin-Hall approximation; uniform: raw entropy values in [0, 1).",
    )
    scale: Annotated[float, Field(ge=0)] = Field(
        default=1.0,
        description="Factor applied to every noise value.",
    )
    entropy_path: Path | None = Field(
        default=None,
        description="Entropy device for uniform noise. Defaults to os.urandom.",
    )

    def build_source(self) -> NoiseSource:
        return NoiseSource(self.kind, self.scale, EntropySource(self.entropy_path))


class FrameConfig(BaseModel):
    """Per-spectrum frame count, drawn from [min_frames, max_frames)."""

    model_config = ConfigDict(extra="forbid")

    min_frames: Annotated[int, Field(ge=1)] = FRAME_RANGE[0]
    max_frames: Annotated[int, Field(ge=2)] = FRAME_RANGE[1]

    @model_validator(mode="after")
    def _validate_bounds(self) -> FrameConfig:
        if self.min_frames >= self.max_frames:
            msg = "min_frames must be lower than max_frames (upper bound is exclusive)"
            raise ValueError(msg)
        return self


class OutlierConfig(BaseModel):
    """Sparse high-magnitude outlier injection."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    probability: Annotated[float, Field(ge=0, le=1)] = OUTLIER_PROBABILITY
    scale: float = OUTLIER_SCALE


class OutputConfig(BaseModel):
    """Where and how spectra are written."""

    model_config = ConfigDict(extra="forbid")

    directory: Path = Field(default=Path("spectra"), description="Output directory.")
    filename_template: str = Field(
        default="spectrum_{index:04d}.csv",
        description="File name per spectrum; '{index}' is the 0-based spectrum number.",
    )
    log_format: LogFormat = Field(
        default="text",
        description="Format for log file: text (human-readable) or json (structured).",
    )

    @model_validator(mode="after")
    def _validate_template(self) -> OutputConfig:
        try:
            first = self.filename_template.format(index=0)
            second = self.filename_template.format(index=1)
        except (KeyError, IndexError, ValueError) as exc:
            msg = f"Invalid filename_template {self.filename_template!r}: {exc}"
            raise ValueError(msg) from exc
        if first == second:
            msg = "filename_template must contain an '{index}' field"
            raise ValueError(msg)
        return self

    def path_for(self, index: int) -> Path:
        return self.directory / self.filename_template.format(index=index)


class SynthesisConfig(BaseModel):
    """Top-level PeakSynth configuration.

    Example TOML configuration:
        spectrum_count = 100
        seed = 42

        [axis]
        channel_count = 1340

        [ensemble]
        mode = "random"
        peaks_per_spectrum = 20

        [noise]
        kind = "normal"
        scale = 1.0

        [frames]
        min_frames = 3
        max_frames = 12

        [outliers]
        probability = 0.01
        scale = 30.0

        [output]
        directory = "spectra"
    """

    model_config = ConfigDict(extra="forbid")

    spectrum_count: Annotated[int, Field(ge=0)] = Field(
        default=DEFAULT_SPECTRUM_COUNT,
        description="Number of spectrum files to write.",
    )
    seed: Annotated[int, Field(ge=0)] | None = Field(
        default=None,
        description="Master seed. When absent, fresh OS entropy is used.",
    )
    workers: Annotated[int, Field(gt=0)] | None = Field(
        default=None,
        description="Number of parallel workers (default: CPU count).",
    )
    axis: AxisConfig = Field(default_factory=AxisConfig)
    ensemble: EnsembleConfig = Field(default_factory=EnsembleConfig)
    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    frames: FrameConfig = Field(default_factory=FrameConfig)
    outliers: OutlierConfig = Field(default_factory=OutlierConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def ensemble_generator(self) -> EnsembleGenerator:
        return EnsembleGenerator(
            self.axis.channel_count,
            center_range=self.ensemble.center_range,
            amplitude_range=self.ensemble.amplitude_range,
            width_range=self.ensemble.width_range,
            steepness_range=self.ensemble.steepness_range,
        )


__all__ = [
    "AxisConfig",
    "EnsembleConfig",
    "EnsembleMode",
    "FrameConfig",
    "LogFormat",
    "NoiseConfig",
    "OutlierConfig",
    "OutputConfig",
    "SynthesisConfig",
]
