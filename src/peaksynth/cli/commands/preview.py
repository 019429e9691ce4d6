"""Preview command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated

import numpy as np
import typer
from rich.table import Table

from peaksynth.cli.commands._options import resolve_config
from peaksynth.core.shared.exceptions import NumericsError
from peaksynth.services import GenerateService
from peaksynth.ui import console, success, warning


def preview_command(
    config: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to TOML configuration file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    index: Annotated[
        int,
        typer.Option("--index", "-i", help="Spectrum number to preview", min=0),
    ] = 0,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Master random seed", min=0),
    ] = None,
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="Ensemble mode: random, fixed, reference"),
    ] = None,
    image: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Save a plot of the first frame (PNG, PDF, SVG)",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    components: Annotated[
        bool,
        typer.Option("--components/--no-components", help="Draw every peak separately"),
    ] = True,
) -> None:
    """Synthesize one spectrum without writing the dataset.

    With the same configuration and seed, spectrum [code]--index[/code] is
    identical to the file [code]generate[/code] would write for it.
    """
    settings = resolve_config(config, {"seed": seed, "ensemble.mode": mode})
    pipeline, spectrum = GenerateService().preview(settings, index)

    table = Table(title=f"Spectrum {index}", title_style="header")
    table.add_column("Frame", justify="right", style="key")
    table.add_column("Min", justify="right", style="value")
    table.add_column("Max", justify="right", style="value")
    table.add_column("Mean", justify="right", style="value")
    table.add_column("Non-finite", justify="right")
    for number, frame in enumerate(spectrum.frames, start=1):
        table.add_row(
            str(number),
            f"{np.nanmin(frame):.4g}",
            f"{np.nanmax(frame):.4g}",
            f"{np.nanmean(frame):.4g}",
            str(int(np.count_nonzero(~np.isfinite(frame)))),
        )
    console.print(table)
    console.print(f"[key]Peaks:[/key] [value]{len(pipeline)}[/value]")

    try:
        spectrum.check_finite()
    except NumericsError as exc:
        warning(f"{exc}; check that every width is positive")

    if image is not None:
        from peaksynth.plotting import plot_spectrum, save_figure

        axis = np.arange(settings.axis.channel_count, dtype=float)
        fig = plot_spectrum(
            axis,
            spectrum.frames[0],
            pipeline,
            show_components=components,
            title=f"Spectrum {index}, frame 1 of {spectrum.n_frames}",
        )
        save_figure(fig, image)
        success(f"Saved preview: [path]{image}[/path]")
