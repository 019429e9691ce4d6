"""Info command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated

import typer
from rich.table import Table

from peaksynth.cli.commands._options import resolve_config
from peaksynth.core.lineshapes import get_shape, list_shapes
from peaksynth.ui import VERSION, console


def info_command(
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
) -> None:
    """Show registered peak shapes and the effective configuration."""
    console.print(f"PeakSynth [metric]{VERSION}[/metric]\n")

    shapes = Table(title="Peak shapes", title_style="header")
    shapes.add_column("Name", style="key")
    shapes.add_column("Class", style="value")
    for name in list_shapes():
        shapes.add_row(name, get_shape(name).__name__)
    console.print(shapes)

    settings = resolve_config(config, {})
    table = Table(title="Configuration", title_style="header")
    table.add_column("Key", style="key")
    table.add_column("Value", style="value")
    for section, value in settings.model_dump(mode="json").items():
        if isinstance(value, dict):
            for key, item in value.items():
                table.add_row(f"{section}.{key}", str(item))
        else:
            table.add_row(section, str(value))
    console.print(table)
