"""Name-to-class registry for symmetric peak shapes.

The ensemble generator looks shapes up by name, and ``peaksynth info`` lists
every registered name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from peaksynth.core.lineshapes.base import PeakShape

SHAPES: dict[str, type[PeakShape]] = {}


def register_shape(
    names: str | Iterable[str],
) -> Callable[[type[PeakShape]], type[PeakShape]]:
    """Class decorator adding a peak shape under one or more names.

    Example:
        @register_shape(["gaussian", "gauss"])
        class Gaussian(PeakShape):
            ...
    """
    aliases = [names] if isinstance(names, str) else list(names)

    def decorator(shape_class: type[PeakShape]) -> type[PeakShape]:
        for alias in aliases:
            SHAPES[alias] = shape_class
        return shape_class

    return decorator


def get_shape(name: str) -> type[PeakShape]:
    """Return the class registered as ``name``; raises KeyError if unknown."""
    return SHAPES[name]


def list_shapes() -> list[str]:
    return sorted(SHAPES)
