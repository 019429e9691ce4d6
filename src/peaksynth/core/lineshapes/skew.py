"""Sigmoid skew applied on top of any peak function."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import expit

from peaksynth.core.lineshapes.base import PeakFunction, as_positions

if TYPE_CHECKING:
    from peaksynth.core.shared.typing import ArrayLike, FloatArray


class SkewDirection(str, Enum):
    """Side of the peak that keeps its weight."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Skew:
    """Multiplicative sigmoid mask over an inner peak function.

    The inner peak is always evaluated in isolation (offset 0); only the masked
    contribution is added to the running offset, so skewed peaks superpose
    additively. With ``steepness == 0`` the mask is exactly 0.5 for either
    direction.

    Attributes
    ----------
        inner: Wrapped peak function
        steepness: Sigmoid slope ``k``
        direction: ``LEFT`` mirrors the mask (``1 - sigmoid``) so the right
            flank is suppressed; ``RIGHT`` suppresses the left flank
    """

    inner: PeakFunction
    steepness: float
    direction: SkewDirection = SkewDirection.RIGHT

    @classmethod
    def left(cls, inner: PeakFunction, steepness: float) -> Skew:
        return cls(inner, steepness, SkewDirection.LEFT)

    @classmethod
    def right(cls, inner: PeakFunction, steepness: float) -> Skew:
        return cls(inner, steepness, SkewDirection.RIGHT)

    @property
    def center(self) -> float:
        return self.inner.center

    @property
    def label(self) -> str:
        return f"{self.inner.label}-{self.direction.value}"

    def mask(self, xs: ArrayLike) -> FloatArray:
        """Return the effective sigmoid weight at ``xs``."""
        sigmoid = expit(self.steepness * (as_positions(xs) - self.center))
        if self.direction is SkewDirection.LEFT:
            sigmoid = 1.0 - sigmoid
        return sigmoid

    def contribution(self, xs: ArrayLike) -> FloatArray:
        positions = as_positions(xs)
        return self.inner.contribution(positions) * self.mask(positions)

    def evaluate(self, x: float, y0: float = 0.0) -> float:
        y = self.inner.evaluate(x, 0.0)
        return float(np.float64(y0) + y * self.mask(np.float64(x)))

    def evaluate_batch(self, xs: ArrayLike, y0s: ArrayLike) -> FloatArray:
        return as_positions(y0s) + self.contribution(xs)
