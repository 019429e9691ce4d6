"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w

from peaksynth.core.domain.config import SynthesisConfig
from peaksynth.core.shared.exceptions import ConfigError


def load_config(path: Path) -> SynthesisConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        SynthesisConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the file is not valid TOML.
        pydantic.ValidationError: If the configuration is invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Cannot parse {path}: {exc}"
            raise ConfigError(msg) from exc

    return SynthesisConfig.model_validate(data)


def save_config(config: SynthesisConfig, path: Path) -> None:
    """Save configuration to a TOML file."""
    data = config.model_dump(mode="json", exclude_none=True)

    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config() -> str:
    """Generate a documented default configuration file as a string."""
    return """# PeakSynth Configuration File
# Generated automatically - edit as needed

spectrum_count = 100   # number of spectrum files
# seed = 42            # master seed; omit for a fresh dataset every run
# workers = 8          # parallel workers (default: CPU count)

[axis]
channel_count = 1340

[ensemble]
mode = "random"          # random, fixed, reference
peaks_per_spectrum = 20
# center_range = [0.0, 1340.0]   # defaults to the whole axis
amplitude_range = [100.0, 1100.0]
width_range = [1.0, 26.0]
steepness_range = [0.0, 0.1]

[noise]
kind = "normal"          # normal (Irwin-Hall) or uniform (entropy device)
scale = 1.0
# entropy_path = "/dev/urandom"

[frames]
min_frames = 3           # inclusive
max_frames = 12          # exclusive

[outliers]
enabled = true
probability = 0.01
scale = 30.0

[output]
directory = "spectra"
filename_template = "spectrum_{index:04d}.csv"
log_format = "text"      # text or json
"""
