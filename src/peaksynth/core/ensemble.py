"""Randomized and reference peak ensembles.

An ensemble is simply a ``Pipeline`` whose members were sampled. For every
peak the generator draws, in this order: center, amplitude, width,
steepness and a uniform value that picks one of four shape classes::

    [0.00, 0.25) gaussian, skewed left
    [0.25, 0.50) gaussian, skewed right
    [0.50, 0.75) lorentzian, skewed left
    [0.75, 1.00) lorentzian, skewed right

The random stream is an explicit ``numpy.random.Generator``; the same seed
always yields the same draws.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from peaksynth.core.constants import (
    AMPLITUDE_RANGE,
    DEFAULT_CHANNEL_COUNT,
    SHAPE_CUT_POINTS,
    STEEPNESS_RANGE,
    WIDTH_RANGE,
)
from peaksynth.core.lineshapes import Gaussian, Lorentzian, Skew, SkewDirection, get_shape
from peaksynth.core.pipeline import Pipeline

# (registered shape name, skew direction) for each categorical bin
SHAPE_CLASSES: tuple[tuple[str, SkewDirection], ...] = (
    ("gaussian", SkewDirection.LEFT),
    ("gaussian", SkewDirection.RIGHT),
    ("lorentzian", SkewDirection.LEFT),
    ("lorentzian", SkewDirection.RIGHT),
)


@dataclass(frozen=True, slots=True)
class PeakDraw:
    """Parameters sampled for one ensemble member."""

    center: float
    amplitude: float
    width: float
    steepness: float
    shape: str
    direction: SkewDirection

    def build(self) -> Skew:
        """Construct the skewed peak function described by this draw."""
        shape_cls = get_shape(self.shape)
        inner = shape_cls(self.center, self.amplitude, self.width)
        return Skew(inner, self.steepness, self.direction)


def classify(u: float) -> tuple[str, SkewDirection]:
    """Map a uniform draw in ``[0, 1)`` to a shape class."""
    index = int(np.searchsorted(SHAPE_CUT_POINTS, u, side="right"))
    return SHAPE_CLASSES[index]


class EnsembleGenerator:
    """Sample random pipelines of skewed peaks over a channel axis."""

    def __init__(
        self,
        channel_count: int = DEFAULT_CHANNEL_COUNT,
        *,
        center_range: tuple[float, float] | None = None,
        amplitude_range: tuple[float, float] = AMPLITUDE_RANGE,
        width_range: tuple[float, float] = WIDTH_RANGE,
        steepness_range: tuple[float, float] = STEEPNESS_RANGE,
    ) -> None:
        self.center_range = center_range or (0.0, float(channel_count))
        self.amplitude_range = amplitude_range
        self.width_range = width_range
        self.steepness_range = steepness_range

    @staticmethod
    def _uniform(rng: np.random.Generator, bounds: tuple[float, float]) -> float:
        low, high = bounds
        return low + (high - low) * rng.random()

    def draw(self, rng: np.random.Generator) -> PeakDraw:
        """Draw the parameters of a single peak from ``rng``."""
        center = self._uniform(rng, self.center_range)
        amplitude = self._uniform(rng, self.amplitude_range)
        width = self._uniform(rng, self.width_range)
        steepness = self._uniform(rng, self.steepness_range)
        shape, direction = classify(rng.random())
        return PeakDraw(center, amplitude, width, steepness, shape, direction)

    def draws(self, count: int, rng: np.random.Generator) -> list[PeakDraw]:
        return [self.draw(rng) for _ in range(count)]

    def generate_from(self, count: int, rng: np.random.Generator) -> Pipeline:
        """Build a pipeline of ``count`` peaks consuming ``rng``."""
        return Pipeline(draw.build() for draw in self.draws(count, rng))

    def generate(self, count: int, seed: int | None = None) -> Pipeline:
        """Build a pipeline of ``count`` peaks from a fresh stream seeded with ``seed``."""
        return self.generate_from(count, np.random.default_rng(seed))


def reference_pipeline() -> Pipeline:
    """Return the fixed 20-peak reference ensemble.

    Ten left-skewed Gaussians between channels 800 and 1250 and ten
    right-skewed Lorentzians between channels 200 and 380; width, amplitude
    and steepness grow with the center.
    """
    gaussians = [
        Skew.left(Gaussian(800.0 + 50.0 * i, 4.0 + 0.5 * i, 90.0 + 5.0 * i), 0.1 + 0.02 * i)
        for i in range(10)
    ]
    # Listed from 1000 upward first, then 800..950
    gaussians = gaussians[4:] + gaussians[:4]
    lorentzians = [
        Skew.right(Lorentzian(200.0 + 20.0 * i, 6.0 + 0.5 * i, 50.0 + 5.0 * i), 1e-2 + 2e-3 * i)
        for i in range(10)
    ]
    return Pipeline(gaussians + lorentzians)
