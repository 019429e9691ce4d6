"""CSV writer for synthesized spectra.

One file per spectrum, one ``row,intensity`` line per channel, no header.
Failing to open the destination is fatal for that spectrum; failing to write
a single row is logged and the remaining rows are still written.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

from peaksynth.core.shared.exceptions import OutputError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from peaksynth.core.synthesis import Spectrum

logger = logging.getLogger("peaksynth.io")


@dataclass(slots=True)
class WriteReport:
    """Outcome of writing one spectrum file."""

    path: Path
    rows_written: int = 0
    failed_rows: list[int] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failed_rows


class SpectrumWriter:
    """Writer for the flat ``row,intensity`` text format."""

    def __init__(self, delimiter: str = ",") -> None:
        self.delimiter = delimiter

    def write_rows(
        self, rows: Iterable[tuple[int, float]], stream: TextIO, report: WriteReport
    ) -> WriteReport:
        """Write rows to an open text stream, recording rows that fail."""
        writer = csv.writer(stream, delimiter=self.delimiter, lineterminator="\n")
        for row_number, intensity in rows:
            try:
                writer.writerow((row_number, intensity))
            except OSError as exc:
                report.failed_rows.append(row_number)
                logger.warning("Failed to write row %d of %s: %s", row_number, report.path, exc)
                continue
            report.rows_written += 1
        return report

    def write(self, spectrum: Spectrum, path: Path) -> WriteReport:
        """Write ``spectrum`` to ``path``.

        Raises
        ------
            OutputError: If the destination cannot be created or opened
        """
        report = WriteReport(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            stream = path.open("w", newline="")
        except OSError as exc:
            raise OutputError(path, exc) from exc

        with stream:
            self.write_rows(spectrum.rows(), stream, report)

        if report.failed_rows:
            logger.warning(
                "%s: %d of %d rows could not be written",
                path,
                len(report.failed_rows),
                report.rows_written + len(report.failed_rows),
            )
        return report
