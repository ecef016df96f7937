"""Settings for a backport-pending run."""

import json
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ValidationError

from backport_pending.errors import ConfigError

CONFIG_FILENAME = ".backport-pending.json"

TimestampFormat = Literal["datetime", "iso", "epoch"]


class Settings(BaseModel):
    """Branch names and output options."""

    main_branch: str = "main"
    backport_branch: str = "backport"
    timestamp_format: TimestampFormat = "datetime"
    collapse_unnumbered: bool = False

    model_config = {"extra": "forbid"}


def load_config_file(repo_path: Path) -> Dict[str, Any]:
    """Read ``.backport-pending.json`` from the repository root, if present."""
    config_file = Path(repo_path) / CONFIG_FILENAME
    if not config_file.exists():
        return {}

    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_file} must contain a JSON object")
    return data


def load_settings(repo_path: Path, overrides: Optional[Dict[str, Any]] = None) -> Settings:
    """Build settings from defaults, the config file and explicit overrides.

    Overrides whose value is ``None`` are ignored so unset command-line
    options fall through to the file.
    """
    values = load_config_file(repo_path)
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
