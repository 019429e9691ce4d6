"""Generate service orchestrating dataset synthesis."""

from peaksynth.services.generate.service import GenerateService, GenerationSummary
from peaksynth.services.generate.worker import (
    SpectrumTask,
    WorkerResult,
    build_spectrum,
    synthesize_spectrum,
)

__all__ = [
    "GenerateService",
    "GenerationSummary",
    "SpectrumTask",
    "WorkerResult",
    "build_spectrum",
    "synthesize_spectrum",
]
