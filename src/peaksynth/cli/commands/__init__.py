"""CLI command modules for PeakSynth.

Each module exports one command function carrying its Typer annotations;
``app.py`` registers them.
"""

from peaksynth.cli.commands.generate import generate_command
from peaksynth.cli.commands.info import info_command
from peaksynth.cli.commands.init import init_command
from peaksynth.cli.commands.preview import preview_command

__all__ = ["generate_command", "info_command", "init_command", "preview_command"]
