"""Main Typer application for PeakSynth."""

from typing import Annotated

import typer

from peaksynth.cli.callbacks import version_callback
from peaksynth.cli.commands import generate_command, info_command, init_command, preview_command

app = typer.Typer(
    name="peaksynth",
    help="PeakSynth - Synthetic 1D spectral datasets from skewed peak ensembles",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """PeakSynth - Synthetic spectra for training and test data.

    Superpose random ensembles of skewed Gaussian and Lorentzian peaks, add
    noise and sparse outliers, and write one CSV file per spectrum.
    """


app.command(name="generate")(generate_command)
app.command(name="init")(init_command)
app.command(name="preview")(preview_command)
app.command(name="info")(info_command)
