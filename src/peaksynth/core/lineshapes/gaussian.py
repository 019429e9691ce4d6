"""Gaussian peak shape."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from peaksynth.core.lineshapes.base import PeakShape
from peaksynth.core.lineshapes.registry import register_shape

if TYPE_CHECKING:
    from peaksynth.core.shared.typing import FloatArray

_TWO_PI = 2.0 * np.pi


@register_shape(["gaussian", "gauss"])
class Gaussian(PeakShape):
    """Area-normalized Gaussian scaled by ``amplitude``.

    G(x) = amplitude / sqrt(2π·width²) · exp(-0.5·((x - center) / width)²)
    """

    name = "gaussian"

    def profile(self, x: FloatArray) -> FloatArray:
        norm = 1.0 / np.sqrt(_TWO_PI * self.width**2)
        exponent = -0.5 * ((x - self.center) / self.width) ** 2
        return self.amplitude * norm * np.exp(exponent)
