"""Typer callbacks for CLI."""

import typer

from peaksynth.ui import VERSION, console


def version_callback(value: bool | None) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"PeakSynth [metric]{VERSION}[/metric]")
        raise typer.Exit
