"""
Application Settings

Ambient settings for a benchmark run: where reports go, how much to log and
whether to draw a chart. The workload itself is fixed and not configurable.
"""

import os
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in FALSE_VALUES


def _parse_level(value: Any) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {value!r}")
    return level


@dataclass
class Settings:
    """Benchmark settings."""

    output_dir: Optional[Path] = None
    log_level: str = "WARNING"
    chart: bool = True

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        output_dir = os.getenv("DISPATCHBENCH_OUTPUT_DIR")
        return cls(
            output_dir=Path(output_dir) if output_dir else None,
            log_level=_parse_level(os.getenv("DISPATCHBENCH_LOG_LEVEL", "WARNING")),
            chart=_parse_bool(os.getenv("DISPATCHBENCH_CHART", "true")),
        )

    @classmethod
    def from_yaml(cls, path: Path, base: Optional["Settings"] = None) -> "Settings":
        """
        Load settings from a YAML mapping, layered over `base`.

        Raises:
            ConfigError: If the file is missing, unreadable, unparsable or
                has unknown keys or bad values
        """
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Could not read {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        return (base or cls()).merge(data)

    def merge(self, overrides: Dict[str, Any]) -> "Settings":
        """Return a copy with `overrides` applied; None values are ignored."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(sorted(map(str, unknown)))}")

        changes: Dict[str, Any] = {}
        for key, value in overrides.items():
            if value is None:
                continue
            if key == "output_dir":
                if not isinstance(value, (str, os.PathLike)):
                    raise ConfigError(f"output_dir must be a path, got {value!r}")
                changes[key] = Path(value)
            elif key == "log_level":
                changes[key] = _parse_level(value)
            elif key == "chart":
                changes[key] = _parse_bool(value)
        return replace(self, **changes)
