"""Base classes for peak functions.

A peak function maps a channel position and a running offset to
``offset + contribution(position)``. Threading the offset through the call
is what lets a sequence of peaks be folded into a single signal value.

Every peak function exposes two evaluation modes that must agree:

- ``evaluate(x, y0)`` for one channel position, returning a float;
- ``evaluate_batch(xs, y0s)`` for a whole channel vector at once.

Peak functions are immutable and pure. Widths are not validated: a zero or
negative width yields ``inf``/``nan`` values instead of an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from peaksynth.core.shared.typing import ArrayLike, FloatArray


@runtime_checkable
class PeakFunction(Protocol):
    """Protocol for anything that can take part in a peak pipeline."""

    @property
    def center(self) -> float: ...

    @property
    def label(self) -> str: ...

    def evaluate(self, x: float, y0: float = 0.0) -> float: ...
    def evaluate_batch(self, xs: ArrayLike, y0s: ArrayLike) -> FloatArray: ...
    def contribution(self, xs: ArrayLike) -> FloatArray: ...


def as_positions(xs: ArrayLike) -> FloatArray:
    """Coerce channel positions to a float64 array."""
    return np.asarray(xs, dtype=np.float64)


@dataclass(frozen=True, slots=True)
class PeakShape:
    """Base class for symmetric analytic peak shapes (Gaussian, Lorentzian)."""

    center: float
    amplitude: float
    width: float

    name = "peak"

    def profile(self, x: FloatArray) -> FloatArray:
        """Return the shape value at positions ``x`` (no offset)."""
        raise NotImplementedError

    @property
    def label(self) -> str:
        return self.name

    def contribution(self, xs: ArrayLike) -> FloatArray:
        return np.asarray(self.profile(as_positions(xs)), dtype=np.float64)

    def evaluate(self, x: float, y0: float = 0.0) -> float:
        return float(np.float64(y0) + self.profile(np.float64(x)))

    def evaluate_batch(self, xs: ArrayLike, y0s: ArrayLike) -> FloatArray:
        return as_positions(y0s) + self.contribution(xs)

    def peak_value(self) -> float:
        """Return the contribution at the peak center."""
        return self.evaluate(self.center)
