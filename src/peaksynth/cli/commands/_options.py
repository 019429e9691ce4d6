"""Configuration loading shared by the commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import typer
from pydantic import ValidationError

from peaksynth.core.domain.config import SynthesisConfig
from peaksynth.core.shared.exceptions import ConfigError
from peaksynth.io.config import load_config
from peaksynth.ui import error

if TYPE_CHECKING:
    from pathlib import Path


def resolve_config(config_path: Path | None, overrides: dict[str, Any]) -> SynthesisConfig:
    """Load ``config_path`` (or defaults) and apply CLI overrides.

    ``overrides`` maps dotted keys such as ``"axis.channel_count"`` to values;
    ``None`` values are ignored. Exits with status 2 on invalid configuration.
    """
    try:
        config = load_config(config_path) if config_path else SynthesisConfig()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(2) from exc
    except ValidationError as exc:
        error(f"Invalid configuration in [path]{config_path}[/path]:\n{exc}")
        raise typer.Exit(2) from exc

    data = config.model_dump()
    for dotted, value in overrides.items():
        if value is None:
            continue
        *parents, key = dotted.split(".")
        section = data
        for parent in parents:
            section = section[parent]
        section[key] = value

    try:
        return SynthesisConfig.model_validate(data)
    except ValidationError as exc:
        error(f"Invalid option value:\n{exc}")
        raise typer.Exit(2) from exc
