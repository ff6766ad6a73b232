"""Settings loader.

Settings come from a YAML file (default: .rewind.yml in the working
directory) with environment overrides:

  REWIND_EQUALITY   value | identity
  REWIND_LOG_LEVEL  DEBUG | INFO | WARNING | ERROR

File layout:

  history:
    equality: value
  logging:
    level: WARNING
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from rewind.equality import POLICIES
from rewind.errors import ConfigError


DEFAULT_CONFIG_NAME = ".rewind.yml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    equality: str = "value"
    log_level: str = "WARNING"
    source: Path | None = None

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _read_yaml(cfg_path: Path) -> dict:
    try:
        raw = yaml.safe_load(cfg_path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {cfg_path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Invalid config file {cfg_path}: expected a mapping")
    return raw


def _section(cfg: dict, name: str, cfg_path: Path) -> dict:
    section = cfg.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Invalid config file {cfg_path}: '{name}' must be a mapping")
    return section


def _check_equality(value: str) -> str:
    if not isinstance(value, str) or value not in POLICIES:
        names = ", ".join(sorted(POLICIES))
        raise ConfigError(f"Invalid equality policy: {value!r} (must be one of: {names})")
    return value


def _check_log_level(value: str) -> str:
    level = value.upper() if isinstance(value, str) else None
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"Invalid log level: {value!r} (must be one of: {', '.join(LOG_LEVELS)})"
        )
    return level


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from path (or the default file) plus env overrides.

    A missing default file is fine; a missing explicit path is an error.
    """
    equality = "value"
    log_level = "WARNING"
    source = None

    if path is not None:
        cfg_path = Path(path)
        if not cfg_path.exists():
            raise ConfigError(f"Config file not found: {cfg_path}")
    else:
        cfg_path = Path.cwd() / DEFAULT_CONFIG_NAME

    if cfg_path.exists():
        cfg = _read_yaml(cfg_path)
        history = _section(cfg, "history", cfg_path)
        logs = _section(cfg, "logging", cfg_path)
        equality = history.get("equality", equality)
        log_level = logs.get("level", log_level)
        source = cfg_path.resolve()

    equality = os.environ.get("REWIND_EQUALITY", equality)
    log_level = os.environ.get("REWIND_LOG_LEVEL", log_level)

    return Settings(
        equality=_check_equality(equality),
        log_level=_check_log_level(log_level),
        source=source,
    )
