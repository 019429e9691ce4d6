"""PeakSynth - synthetic 1D spectral datasets from skewed peak ensembles.

Public API:
    - Gaussian, Lorentzian, Skew: peak functions
    - Pipeline: ordered, foldable composition of peak functions
    - EnsembleGenerator, reference_pipeline: random and fixed ensembles
    - SpectrumSynthesizer: multi-frame spectra with noise and outliers
    - GenerateService: whole-dataset generation with parallel workers

Configuration:
    - SynthesisConfig and its sections
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from peaksynth.core.domain.config import SynthesisConfig
from peaksynth.core.ensemble import EnsembleGenerator, reference_pipeline
from peaksynth.core.lineshapes import Gaussian, Lorentzian, Skew, SkewDirection
from peaksynth.core.noise import NoiseSource, approximate_normal, uniform
from peaksynth.core.pipeline import Pipeline
from peaksynth.core.synthesis import Spectrum, SpectrumSynthesizer
from peaksynth.services import GenerateService, GenerationSummary

__all__ = [
    "EnsembleGenerator",
    "Gaussian",
    "GenerateService",
    "GenerationSummary",
    "Lorentzian",
    "NoiseSource",
    "Pipeline",
    "Skew",
    "SkewDirection",
    "Spectrum",
    "SpectrumSynthesizer",
    "SynthesisConfig",
    "__version__",
    "approximate_normal",
    "reference_pipeline",
    "uniform",
]
