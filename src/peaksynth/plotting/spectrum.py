"""Spectrum visualization for PeakSynth.

Functions return matplotlib Figure objects for flexible usage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

if TYPE_CHECKING:
    from pathlib import Path

    from peaksynth.core.pipeline import Pipeline
    from peaksynth.core.shared.typing import FloatArray


def plot_spectrum(
    axis: FloatArray,
    frame: FloatArray,
    pipeline: Pipeline,
    *,
    show_components: bool = True,
    title: str | None = None,
) -> Figure:
    """Plot one frame with the noise-free signal and, optionally, each peak."""
    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(axis, frame, color="0.6", lw=0.8, label="frame")
    ax.plot(axis, pipeline.superpose(axis, np.zeros_like(axis)), color="C0", lw=1.5, label="signal")

    if show_components:
        for peak, component in zip(pipeline, pipeline.components(axis), strict=True):
            ax.plot(axis, component, lw=0.7, ls="--", alpha=0.7, label=None)
            ax.annotate(peak.label, (peak.center, float(component.max())), fontsize=6, ha="center")

    ax.set_xlabel("Channel")
    ax.set_ylabel("Intensity")
    ax.set_xlim(axis[0], axis[-1])
    if title:
        ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right")
    plt.tight_layout()
    return fig


def save_figure(fig: Figure, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=150)
    plt.close(fig)
