"""Ordered composition of peak functions.

A pipeline folds its peaks left to right, each peak consuming the offset
produced by the previous one::

    y = peak_n(x, ... peak_2(x, peak_1(x, y0)))

Because every peak only adds its own isolated contribution to the running
offset, the fold is additive superposition::

    y = y0 + sum(peak_i.contribution(x))

``superpose`` computes the right-hand side directly; ``evaluate`` and
``evaluate_batch`` run the fold. All three agree to floating-point tolerance
whatever the order of the peaks.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import reduce
from typing import TYPE_CHECKING, overload

import numpy as np

from peaksynth.core.lineshapes.base import PeakFunction, as_positions

if TYPE_CHECKING:
    from peaksynth.core.shared.typing import ArrayLike, FloatArray


class Pipeline(Sequence[PeakFunction]):
    """Immutable ordered sequence of peak functions."""

    __slots__ = ("_peaks",)

    def __init__(self, peaks: Iterable[PeakFunction] = ()) -> None:
        self._peaks: tuple[PeakFunction, ...] = tuple(peaks)

    @overload
    def __getitem__(self, index: int) -> PeakFunction: ...
    @overload
    def __getitem__(self, index: slice) -> Pipeline: ...

    def __getitem__(self, index: int | slice) -> PeakFunction | Pipeline:
        if isinstance(index, slice):
            return Pipeline(self._peaks[index])
        return self._peaks[index]

    def __len__(self) -> int:
        return len(self._peaks)

    def __iter__(self) -> Iterator[PeakFunction]:
        return iter(self._peaks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pipeline):
            return NotImplemented
        return self._peaks == other._peaks

    def __hash__(self) -> int:
        return hash(self._peaks)

    def __repr__(self) -> str:
        return f"Pipeline({list(self._peaks)!r})"

    def __add__(self, other: Iterable[PeakFunction]) -> Pipeline:
        return Pipeline((*self._peaks, *other))

    @property
    def peaks(self) -> tuple[PeakFunction, ...]:
        return self._peaks

    def evaluate(self, x: float, y0: float = 0.0) -> float:
        """Fold every peak over a single channel position."""
        return reduce(lambda y, peak: peak.evaluate(x, y), self._peaks, float(y0))

    def evaluate_batch(self, xs: ArrayLike, y0s: ArrayLike) -> FloatArray:
        """Fold every peak over a whole channel vector.

        Each peak is applied to the full axis before moving to the next one.
        ``y0s`` must broadcast against ``xs``.
        """
        positions = as_positions(xs)
        start = np.broadcast_to(as_positions(y0s), positions.shape).copy()
        return reduce(lambda ys, peak: peak.evaluate_batch(positions, ys), self._peaks, start)

    def components(self, xs: ArrayLike) -> FloatArray:
        """Return the isolated contribution of every peak, shape ``(len(self), len(xs))``."""
        positions = as_positions(xs)
        if not self._peaks:
            return np.zeros((0, *positions.shape), dtype=np.float64)
        return np.stack([peak.contribution(positions) for peak in self._peaks])

    def superpose(self, xs: ArrayLike, y0s: ArrayLike) -> FloatArray:
        """Sum isolated contributions and add the initial offset, bypassing the fold."""
        positions = as_positions(xs)
        offsets = np.broadcast_to(as_positions(y0s), positions.shape)
        return offsets + self.components(positions).sum(axis=0)
