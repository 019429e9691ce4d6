"""High-level dataset generation service.

CLI and other adapters should import only from this module.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING

import numpy as np

from peaksynth.core.domain.config import SynthesisConfig
from peaksynth.core.ensemble import reference_pipeline
from peaksynth.core.parallel import optimal_worker_count, run_parallel
from peaksynth.core.shared.reporter import NullReporter, Reporter
from peaksynth.core.synthesis import SpectrumSynthesizer
from peaksynth.io.writers import SpectrumWriter
from peaksynth.services.generate.worker import (
    SpectrumTask,
    WorkerResult,
    build_spectrum,
    synthesize_spectrum,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from peaksynth.core.pipeline import Pipeline
    from peaksynth.core.synthesis import Spectrum


@dataclass(frozen=True)
class GenerationSummary:
    """Result of a dataset generation run.

    Attributes
    ----------
        output_dir: Directory spectra were written to
        results: One result per spectrum, in spectrum order
        seed: Entropy of the master seed sequence, to reproduce the run
    """

    output_dir: Path
    results: list[WorkerResult] = field(default_factory=list)
    seed: int | None = None

    @property
    def failures(self) -> list[WorkerResult]:
        return [result for result in self.results if not result.success]

    @property
    def n_succeeded(self) -> int:
        return sum(result.success for result in self.results)

    @property
    def truncated(self) -> list[WorkerResult]:
        return [result for result in self.results if result.success and result.failed_rows]

    @property
    def success(self) -> bool:
        return not self.failures


class GenerateService:
    """Service generating whole synthetic datasets.

    Example:
        service = GenerateService()
        summary = service.generate(SynthesisConfig(spectrum_count=10, seed=1))
        print(f"Wrote {summary.n_succeeded} spectra to {summary.output_dir}")
    """

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter = reporter or NullReporter()

    @staticmethod
    def plan(config: SynthesisConfig) -> tuple[list[SpectrumTask], int]:
        """Build one independent task per spectrum.

        Returns the tasks and the master seed entropy. A single seed sequence
        is split into an ensemble stream plus one child stream per spectrum,
        so the plan for spectrum ``i`` does not depend on the spectrum count.
        """
        master = np.random.SeedSequence(config.seed)
        ensemble_seq = master.spawn(1)[0]
        spectrum_seqs = master.spawn(config.spectrum_count)

        shared: Pipeline | None = None
        if config.ensemble.mode == "reference":
            shared = reference_pipeline()
        elif config.ensemble.mode == "fixed":
            shared = config.ensemble_generator().generate_from(
                config.ensemble.peaks_per_spectrum, np.random.default_rng(ensemble_seq)
            )

        tasks = [
            SpectrumTask(
                index=index,
                path=config.output.path_for(index),
                seed=seq,
                pipeline=shared,
                n_peaks=config.ensemble.peaks_per_spectrum,
            )
            for index, seq in enumerate(spectrum_seqs)
        ]
        return tasks, int(master.entropy)

    def preview(self, config: SynthesisConfig, index: int = 0) -> tuple[Pipeline, Spectrum]:
        """Synthesize spectrum ``index`` of ``config`` without writing it."""
        planned = config.model_copy(update={"spectrum_count": index + 1})
        tasks, _ = self.plan(planned)
        return build_spectrum(
            tasks[index], SpectrumSynthesizer.from_config(config), config.ensemble_generator()
        )

    def generate(
        self,
        config: SynthesisConfig | None = None,
        *,
        progress_callback: Callable[[WorkerResult], None] | None = None,
    ) -> GenerationSummary:
        """Synthesize and write every spectrum described by ``config``.

        Workers that fail do not stop the others; their reasons are collected
        in the returned summary.
        """
        if config is None:
            config = SynthesisConfig()

        tasks, entropy = self.plan(config)
        n_workers = optimal_worker_count(len(tasks), config.workers)
        self._reporter.action(
            f"Generating {len(tasks)} spectra x {config.axis.channel_count} channels "
            f"with {n_workers} worker(s)"
        )

        worker = partial(
            synthesize_spectrum,
            synthesizer=SpectrumSynthesizer.from_config(config),
            generator=config.ensemble_generator(),
            writer=SpectrumWriter(),
        )
        results = run_parallel(
            worker, tasks, n_workers=n_workers, progress_callback=progress_callback
        )
        summary = GenerationSummary(config.output.directory, results, entropy)

        for result in summary.truncated:
            self._reporter.warning(
                f"Spectrum {result.index} is missing {result.failed_rows} row(s): {result.path}"
            )
        for result in summary.failures:
            self._reporter.error(f"Spectrum {result.index} failed: {result.error}")

        if summary.success:
            self._reporter.success(f"Wrote {summary.n_succeeded} spectra to {summary.output_dir}")
        else:
            self._reporter.warning(
                f"{len(summary.failures)} of {len(results)} spectra failed; "
                f"{summary.n_succeeded} written to {summary.output_dir}"
            )
        return summary
