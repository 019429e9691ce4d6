"""Synthesize complete spectra from a peak pipeline.

One spectrum is a sequence of frames sharing the same pipeline. For every
frame a fresh noise vector is drawn, the pipeline is folded over the channel
axis with that noise as the initial offset, and sparse outliers are injected:
a channel whose uniform draw exceeds ``1 - outlier_probability`` is replaced
by ``|value| * outlier_scale``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from peaksynth.core.constants import (
    DEFAULT_CHANNEL_COUNT,
    FRAME_RANGE,
    OUTLIER_PROBABILITY,
    OUTLIER_SCALE,
)
from peaksynth.core.noise import NoiseSource
from peaksynth.core.shared.exceptions import NumericsError

if TYPE_CHECKING:
    from peaksynth.core.domain.config import SynthesisConfig
    from peaksynth.core.pipeline import Pipeline
    from peaksynth.core.shared.typing import FloatArray


@dataclass(slots=True)
class Spectrum:
    """Frames of one synthesized spectrum, in generation order."""

    frames: list[FloatArray] = field(default_factory=list)

    @property
    def n_frames(self) -> int:
        return len(self.frames)

    @property
    def values(self) -> FloatArray:
        """All frames concatenated into one intensity stream."""
        if not self.frames:
            return np.zeros(0, dtype=np.float64)
        return np.concatenate(self.frames)

    def rows(self) -> Iterator[tuple[int, float]]:
        """Yield ``(channel_number, intensity)`` with 1-based channel numbers.

        Channel numbering restarts at 1 for every frame.
        """
        for frame in self.frames:
            for index, value in enumerate(frame.tolist(), start=1):
                yield index, value

    def check_finite(self) -> None:
        """Raise NumericsError if any frame holds NaN or infinite values."""
        bad = sum(int(np.count_nonzero(~np.isfinite(frame))) for frame in self.frames)
        if bad:
            msg = f"{bad} non-finite value(s) in {self.n_frames} frame(s)"
            raise NumericsError(msg)


class SpectrumSynthesizer:
    """Turn a pipeline plus a random stream into a multi-frame spectrum."""

    def __init__(
        self,
        channel_count: int = DEFAULT_CHANNEL_COUNT,
        *,
        noise: NoiseSource | None = None,
        frame_range: tuple[int, int] = FRAME_RANGE,
        outlier_probability: float = OUTLIER_PROBABILITY,
        outlier_scale: float = OUTLIER_SCALE,
        inject_outliers: bool = True,
    ) -> None:
        self.channel_count = channel_count
        self.noise = noise or NoiseSource()
        self.frame_range = frame_range
        self.outlier_probability = outlier_probability
        self.outlier_scale = outlier_scale
        self.inject_outliers = inject_outliers
        self.axis = np.arange(channel_count, dtype=np.float64)

    @classmethod
    def from_config(cls, config: SynthesisConfig) -> SpectrumSynthesizer:
        return cls(
            config.axis.channel_count,
            noise=config.noise.build_source(),
            frame_range=(config.frames.min_frames, config.frames.max_frames),
            outlier_probability=config.outliers.probability,
            outlier_scale=config.outliers.scale,
            inject_outliers=config.outliers.enabled,
        )

    def add_outliers(self, values: FloatArray, rng: np.random.Generator) -> FloatArray:
        """Replace channels whose uniform draw exceeds the threshold by scaled magnitudes."""
        draws = rng.random(values.shape)
        hits = draws > 1.0 - self.outlier_probability
        values[hits] = np.abs(values[hits]) * self.outlier_scale
        return values

    def synthesize_frame(self, pipeline: Pipeline, rng: np.random.Generator) -> FloatArray:
        """Fold ``pipeline`` over the axis with fresh noise as the initial offset."""
        offsets = self.noise.sample(self.channel_count, rng)
        values = pipeline.evaluate_batch(self.axis, offsets)
        if self.inject_outliers:
            values = self.add_outliers(values, rng)
        return values

    def draw_frame_count(self, rng: np.random.Generator) -> int:
        low, high = self.frame_range
        return int(rng.integers(low, high))

    def synthesize(
        self, pipeline: Pipeline, rng: np.random.Generator, n_frames: int | None = None
    ) -> Spectrum:
        """Synthesize one spectrum; the frame count is drawn from ``rng`` unless given."""
        if n_frames is None:
            n_frames = self.draw_frame_count(rng)
        return Spectrum([self.synthesize_frame(pipeline, rng) for _ in range(n_frames)])
