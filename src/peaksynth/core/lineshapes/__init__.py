"""Peak shape models.

Symmetric analytic shapes register themselves under one or more names so the
ensemble generator can build them by name. ``Skew`` wraps any peak function.
"""

from peaksynth.core.lineshapes.base import PeakFunction, PeakShape
from peaksynth.core.lineshapes.gaussian import Gaussian
from peaksynth.core.lineshapes.lorentzian import Lorentzian
from peaksynth.core.lineshapes.registry import SHAPES, get_shape, list_shapes, register_shape
from peaksynth.core.lineshapes.skew import Skew, SkewDirection

__all__ = [
    "SHAPES",
    "Gaussian",
    "Lorentzian",
    "PeakFunction",
    "PeakShape",
    "Skew",
    "SkewDirection",
    "get_shape",
    "list_shapes",
    "register_shape",
]
