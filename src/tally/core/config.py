"""Configuration models for counter sessions.

TallyConfig

`command_name` (`str`)
: Word addressing the counter inside a session. A leading occurrence is
  stripped from each line, so `counter inc 2` and `inc 2` are equivalent.

`prompt` (`str`)
: Prompt displayed when a session reads from an interactive terminal.

`announce_lifecycle` (`bool`)
: Print a banner when the counter is loaded into a session and when it is
  unloaded.

`comment_prefix` (`str`)
: Session lines starting with this prefix are skipped.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from .exceptions import ConfigError


CONFIG_ENV_VAR = "TALLY_CONFIG"

__all__ = ["CONFIG_ENV_VAR", "TallyConfig", "load_config"]


class TallyConfig(BaseModel):
    """Settings controlling how a session hosts the counter."""

    model_config = ConfigDict(extra="forbid")

    command_name: str = Field(default="counter", description="Counter command word")
    prompt: str = Field(default="counter> ", description="Interactive prompt")
    announce_lifecycle: bool = False
    comment_prefix: str = "#"

    @field_validator("command_name", "comment_prefix")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        candidate = value.strip()
        if not candidate or any(char.isspace() for char in candidate):
            raise ValueError("must be a single non-empty word")
        return candidate


def load_config(path: str | Path | None = None) -> TallyConfig:
    """Load a :class:`TallyConfig` from a YAML file.

    Without an explicit ``path`` the ``TALLY_CONFIG`` environment variable is
    consulted; when neither is set the defaults are returned.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return TallyConfig()
        path = env_path

    config_path = Path(path).expanduser()
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration '{config_path}': {exc}") from exc

    try:
        payload: Any = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in '{config_path}': {exc}") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ConfigError(f"Configuration '{config_path}' must contain a mapping.")

    try:
        return TallyConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in '{config_path}': {exc}") from exc
