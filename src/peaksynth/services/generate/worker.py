"""Per-spectrum unit of work executed by the worker pool."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from peaksynth.core.shared.exceptions import PeakSynthError

if TYPE_CHECKING:
    from pathlib import Path

    from peaksynth.core.ensemble import EnsembleGenerator
    from peaksynth.core.pipeline import Pipeline
    from peaksynth.core.synthesis import Spectrum, SpectrumSynthesizer
    from peaksynth.io.writers import SpectrumWriter

logger = logging.getLogger("peaksynth.generate")

_SEED_BOUND = 2**63


@dataclass(frozen=True, slots=True)
class SpectrumTask:
    """Everything one worker needs; nothing is shared with other tasks.

    Attributes
    ----------
        index: 0-based spectrum number
        path: Destination file
        seed: Seed sequence owned by this task
        pipeline: Ensemble shared read-only by all tasks (fixed/reference
            modes), or None to sample a fresh one from ``seed``
        n_peaks: Ensemble size when sampling
    """

    index: int
    path: Path
    seed: np.random.SeedSequence
    pipeline: Pipeline | None = None
    n_peaks: int = 0

    def rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    def resolve_pipeline(self, generator: EnsembleGenerator, rng: np.random.Generator) -> Pipeline:
        """Return the shared pipeline, or sample one seeded from the first draw of ``rng``."""
        if self.pipeline is not None:
            return self.pipeline
        return generator.generate(self.n_peaks, int(rng.integers(_SEED_BOUND)))


@dataclass(frozen=True, slots=True)
class WorkerResult:
    """Outcome of one worker: success, or the reason it did not complete."""

    index: int
    path: Path
    success: bool
    n_frames: int = 0
    rows_written: int = 0
    failed_rows: int = 0
    error: str | None = None


def build_spectrum(
    task: SpectrumTask, synthesizer: SpectrumSynthesizer, generator: EnsembleGenerator
) -> tuple[Pipeline, Spectrum]:
    rng = task.rng()
    pipeline = task.resolve_pipeline(generator, rng)
    return pipeline, synthesizer.synthesize(pipeline, rng)


def synthesize_spectrum(
    task: SpectrumTask,
    *,
    synthesizer: SpectrumSynthesizer,
    generator: EnsembleGenerator,
    writer: SpectrumWriter,
) -> WorkerResult:
    """Synthesize and write one spectrum, converting failures into a result."""
    try:
        _, spectrum = build_spectrum(task, synthesizer, generator)
        report = writer.write(spectrum, task.path)
    except (PeakSynthError, OSError) as exc:
        logger.error("Spectrum %d (%s) failed: %s", task.index, task.path, exc)
        return WorkerResult(task.index, task.path, success=False, error=str(exc))

    return WorkerResult(
        task.index,
        task.path,
        success=True,
        n_frames=spectrum.n_frames,
        rows_written=report.rows_written,
        failed_rows=len(report.failed_rows),
    )
