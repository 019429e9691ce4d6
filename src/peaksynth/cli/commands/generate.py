"""Generate command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated

import typer
from rich.table import Table

from peaksynth.cli.commands._options import resolve_config
from peaksynth.core.shared.reporter import CompositeReporter, LoggingReporter
from peaksynth.services import GenerateService
from peaksynth.ui import (
    ConsoleReporter,
    close_logging,
    console,
    create_progress,
    error,
    log_dict,
    setup_logging,
    show_header,
)


def generate_command(
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
    output: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output directory for spectrum files",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    count: Annotated[
        int | None,
        typer.Option("--count", "-n", help="Number of spectra to write", min=0),
    ] = None,
    channels: Annotated[
        int | None,
        typer.Option("--channels", help="Channels per frame", min=1),
    ] = None,
    peaks: Annotated[
        int | None,
        typer.Option("--peaks", "-p", help="Peaks per generated ensemble", min=0),
    ] = None,
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="Ensemble mode: random, fixed, reference"),
    ] = None,
    noise: Annotated[
        str | None,
        typer.Option("--noise", help="Noise kind: normal (Irwin-Hall) or uniform (entropy)"),
    ] = None,
    noise_scale: Annotated[
        float | None,
        typer.Option("--noise-scale", help="Factor applied to every noise value", min=0.0),
    ] = None,
    outliers: Annotated[
        bool | None,
        typer.Option("--outliers/--no-outliers", help="Inject sparse outliers"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Master random seed", min=0),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option("--workers", "-w", help="Parallel workers (default: CPU count)", min=1),
    ] = None,
    log_file: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--log-file",
            help="Write a session log (JSON lines if the suffix is .json)",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Echo log records to the console"),
    ] = False,
) -> None:
    """Generate a synthetic spectral dataset.

    Writes one [path]row,intensity[/path] CSV file per spectrum. Exits with
    status 1 if any spectrum could not be written.

    Examples
    --------
      Default dataset (100 spectra, 1340 channels):
        $ peaksynth generate

      Reproducible run from a config file:
        $ peaksynth generate -c peaksynth.toml --seed 42 -o data/
    """
    settings = resolve_config(
        config,
        {
            "output.directory": output,
            "spectrum_count": count,
            "axis.channel_count": channels,
            "ensemble.peaks_per_spectrum": peaks,
            "ensemble.mode": mode,
            "noise.kind": noise,
            "noise.scale": noise_scale,
            "outliers.enabled": outliers,
            "seed": seed,
            "workers": workers,
        },
    )

    json_log = settings.output.log_format == "json"
    if log_file is None:
        log_file = settings.output.directory / ("peaksynth.log.json" if json_log else "peaksynth.log")
    try:
        setup_logging(log_file, verbose=verbose, json_format=True if json_log else None)
    except OSError as exc:
        close_logging()
        error(f"Cannot create [path]{log_file.parent}[/path]: {exc}")
        raise typer.Exit(1) from exc
    log_dict(settings.model_dump(mode="json"))

    show_header("PeakSynth - Generate")
    service = GenerateService(reporter=CompositeReporter([ConsoleReporter(), LoggingReporter()]))

    try:
        with create_progress(transient=True) as progress:
            task_id = progress.add_task("Synthesizing spectra", total=settings.spectrum_count)
            summary = service.generate(
                settings, progress_callback=lambda _result: progress.advance(task_id)
            )
    finally:
        close_logging()

    console.print(f"[key]Seed entropy:[/key] [value]{summary.seed}[/value]")

    if not summary.success:
        table = Table(title="Failed spectra", title_style="error")
        table.add_column("#", justify="right", style="key")
        table.add_column("Destination", style="path")
        table.add_column("Reason", style="error")
        for result in summary.failures:
            table.add_row(str(result.index), str(result.path), result.error or "unknown")
        console.print(table)
        raise typer.Exit(1)
