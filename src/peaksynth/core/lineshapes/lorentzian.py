"""Lorentzian peak shape."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from peaksynth.core.lineshapes.base import PeakShape
from peaksynth.core.lineshapes.registry import register_shape

if TYPE_CHECKING:
    from peaksynth.core.shared.typing import FloatArray


@register_shape(["lorentzian", "lorentz"])
class Lorentzian(PeakShape):
    """Area-normalized Lorentzian scaled by ``amplitude``.

    L(x) = amplitude / (π·width·(1 + ((x - center) / width)²))

    Heavier tails than a Gaussian of the same width.
    """

    name = "lorentzian"

    def profile(self, x: FloatArray) -> FloatArray:
        dx = (x - self.center) / self.width
        return self.amplitude / (np.pi * self.width * (1.0 + dx**2))
