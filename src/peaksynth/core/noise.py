"""Noise sources feeding the spectrum synthesizer.

Two kinds of perturbation are supported:

- ``uniform``: raw values in ``[0, 1)`` decoded from an entropy device
  (``os.urandom`` unless a device path is configured);
- ``approximate_normal``: the Irwin-Hall approximation of a standard normal,
  the sum of 12 independent uniforms minus 6. Its support is ``[-6, 6]``;
  it is kept as this exact construction rather than a library normal sampler
  so existing datasets can be regenerated.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Literal, Protocol

import numpy as np

from peaksynth.core.constants import ENTROPY_WORD_BYTES, IRWIN_HALL_SHIFT, IRWIN_HALL_TERMS
from peaksynth.core.shared.exceptions import NoiseSourceError

if TYPE_CHECKING:
    from peaksynth.core.shared.typing import FloatArray

NoiseKind = Literal["normal", "uniform"]

_WORD_SCALE = 1.0 / 2.0 ** (8 * ENTROPY_WORD_BYTES)


class ByteReader(Protocol):
    def __call__(self, size: int) -> bytes: ...


class EntropySource:
    """Uniform values decoded from an entropy device.

    Each call performs one independent read, so concurrent workers never
    share or interleave a single request. A file-backed source opens the
    device per read.
    """

    def __init__(self, path: Path | None = None, reader: ByteReader | None = None) -> None:
        self.path = path
        self._reader = reader

    def read_bytes(self, size: int) -> bytes:
        try:
            if self._reader is not None:
                data = self._reader(size)
            elif self.path is not None:
                with self.path.open("rb") as device:
                    data = device.read(size)
            else:
                data = os.urandom(size)
        except OSError as exc:
            source = self.path or "os.urandom"
            msg = f"Failed to read {size} bytes from entropy source {source}: {exc}"
            raise NoiseSourceError(msg) from exc

        if len(data) != size:
            source = self.path or "entropy reader"
            msg = f"Short read from {source}: expected {size} bytes, got {len(data)}"
            raise NoiseSourceError(msg)
        return data

    def uniform(self, n: int) -> FloatArray:
        """Return ``n`` values in ``[0, 1)``."""
        if n <= 0:
            return np.zeros(0, dtype=np.float64)
        raw = self.read_bytes(n * ENTROPY_WORD_BYTES)
        words = np.frombuffer(raw, dtype="<u4")
        return words.astype(np.float64) * _WORD_SCALE


def uniform(n: int, source: EntropySource | None = None) -> FloatArray:
    """Return ``n`` entropy-backed uniform values in ``[0, 1)``."""
    return (source or EntropySource()).uniform(n)


def approximate_normal(n: int, seed: int | np.random.Generator | None = None) -> FloatArray:
    """Return ``n`` Irwin-Hall approximately normal values.

    Args:
        n: Number of values
        seed: Integer seed, an existing generator to draw from, or ``None``
            for fresh OS entropy

    Returns
    -------
        Array of ``n`` values in ``[-6, 6]`` with mean 0 and variance 1
    """
    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
    draws = rng.random((n, IRWIN_HALL_TERMS))
    return draws.sum(axis=1) - IRWIN_HALL_SHIFT


class NoiseSource:
    """Per-spectrum noise provider selected by kind and scale."""

    def __init__(
        self,
        kind: NoiseKind = "normal",
        scale: float = 1.0,
        entropy: EntropySource | None = None,
    ) -> None:
        self.kind = kind
        self.scale = scale
        self.entropy = entropy or EntropySource()

    def sample(self, n: int, rng: np.random.Generator) -> FloatArray:
        """Return ``n`` scaled perturbation values.

        ``rng`` feeds the normal approximation; uniform noise always comes from
        the entropy source.
        """
        if self.kind == "uniform":
            values = self.entropy.uniform(n)
        else:
            values = approximate_normal(n, rng)
        return values * self.scale
