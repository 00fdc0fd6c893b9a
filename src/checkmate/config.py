"""Project configuration loaded from ``[tool.checkmate]`` in pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from checkmate.errors import ConfigError

logger = logging.getLogger(__name__)

PYPROJECT_NAME = "pyproject.toml"


class CheckmateConfig(BaseModel):
    """Settings for diff rendering and the built-in sinks.

    Attributes
    ----------
    diff_width
        Line width passed to ``pprint.pformat`` when rendering values for a diff.
    sort_dicts
        Whether dict keys are sorted before diffing.
    show_diff_types
        Always label both sides of a diff with the value's type name.
    log_level
        Level used by :class:`~checkmate.sinks.LoggingSink` for reported lines.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    diff_width: int = Field(default=80, ge=20)
    sort_dicts: bool = True
    show_diff_types: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_NAME
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> CheckmateConfig:
    """Load configuration from the nearest pyproject.toml.

    Missing files or a missing ``[tool.checkmate]`` table give the defaults.

    Raises
    ------
    ConfigError
        If the file cannot be parsed or the table holds invalid values.
    """
    path = find_pyproject(start)
    if path is None:
        return CheckmateConfig()

    try:
        with path.open("rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e

    table = data.get("tool", {}).get("checkmate")
    if table is None:
        return CheckmateConfig()
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: [tool.checkmate] must be a table")

    try:
        config = CheckmateConfig.model_validate(table)
    except ValidationError as e:
        raise ConfigError(f"{path}: invalid [tool.checkmate]: {e}") from e

    logger.debug("Loaded checkmate config from %s", path)
    return config


_config: CheckmateConfig | None = None


def get_config() -> CheckmateConfig:
    """Return the process-wide config, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: CheckmateConfig) -> None:
    """Replace the process-wide config."""
    global _config
    _config = config


def reset_config() -> None:
    """Forget the cached config so the next ``get_config`` reloads it."""
    global _config
    _config = None
