"""Input/output: configuration files and spectrum writers."""

from peaksynth.io.config import generate_default_config, load_config, save_config
from peaksynth.io.writers import SpectrumWriter, WriteReport

__all__ = [
    "SpectrumWriter",
    "WriteReport",
    "generate_default_config",
    "load_config",
    "save_config",
]
