"""Core module for PeakSynth - peak functions, pipelines and synthesis."""

from peaksynth.core.ensemble import EnsembleGenerator, PeakDraw, reference_pipeline
from peaksynth.core.pipeline import Pipeline
from peaksynth.core.synthesis import Spectrum, SpectrumSynthesizer

__all__ = [
    "EnsembleGenerator",
    "PeakDraw",
    "Pipeline",
    "Spectrum",
    "SpectrumSynthesizer",
    "reference_pipeline",
]
