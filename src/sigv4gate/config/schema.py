"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

ReloadMode = Literal["always", "mtime"]
OutputFormat = Literal["terminal", "json"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class PolicyConfig:
    path: str = "policy.yaml"
    reload: ReloadMode = "always"  # mtime: reuse parsed policy until the file changes


@dataclass
class LoggingConfig:
    level: LogLevel = "WARNING"


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"


@dataclass
class Sigv4GateConfig:
    policy: PolicyConfig = field(default_factory=PolicyConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
