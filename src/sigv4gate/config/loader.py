"""Load and merge configuration from .sigv4gate.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from sigv4gate.config.schema import (
    OUTPUT_FORMATS,
    LoggingConfig,
    OutputConfig,
    PolicyConfig,
    Sigv4GateConfig,
)
from sigv4gate.log import LOG_LEVELS
from sigv4gate.policy.loader import RELOAD_MODES

CONFIG_FILENAME = ".sigv4gate.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    return cls(**{k: v for k, v in raw.items() if k in valid_fields})


def _validate(cfg: Sigv4GateConfig) -> None:
    if cfg.policy.reload not in RELOAD_MODES:
        raise ConfigError(f"policy.reload must be one of {', '.join(RELOAD_MODES)}")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"output.format must be one of {', '.join(OUTPUT_FORMATS)}")
    cfg.logging.level = str(cfg.logging.level).upper()  # type: ignore[assignment]
    if cfg.logging.level not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")


def _merge_env_overrides(cfg: Sigv4GateConfig) -> None:
    """Apply SIGV4GATE_* environment variable overrides."""
    if val := os.environ.get("SIGV4GATE_POLICY"):
        cfg.policy.path = val
    if val := os.environ.get("SIGV4GATE_POLICY_RELOAD"):
        if val in RELOAD_MODES:
            cfg.policy.reload = val  # type: ignore[assignment]
    if val := os.environ.get("SIGV4GATE_LOG_LEVEL"):
        if val.upper() in LOG_LEVELS:
            cfg.logging.level = val.upper()  # type: ignore[assignment]
    if val := os.environ.get("SIGV4GATE_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> Sigv4GateConfig:
    """Load, validate, and return a Sigv4GateConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = Sigv4GateConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = Sigv4GateConfig(
            policy=_build_section(raw, PolicyConfig, "policy"),
            logging=_build_section(raw, LoggingConfig, "logging"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        _validate(cfg)
        # Relative policy paths are relative to the config file
        policy_path = Path(cfg.policy.path)
        if not policy_path.is_absolute():
            cfg.policy.path = str(config_path.parent / policy_path)

    _merge_env_overrides(cfg)
    return cfg
