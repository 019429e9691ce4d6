"""Application service layer for orchestrating PeakSynth workflows."""

from peaksynth.services.generate import GenerateService, GenerationSummary, WorkerResult

__all__ = ["GenerateService", "GenerationSummary", "WorkerResult"]
