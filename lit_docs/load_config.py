"""Logic for loading and validating configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from lit_docs.deep_merge import deep_merge
from lit_docs.errors import ConfigError

OUTPUT_FORMATS = ("json", "yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG: dict[str, Any] = {
    "patterns": ["**/*.lit.ts"],
    "ignore_dirs": ["node_modules", "dist"],
    "output": {
        "file_name": "component-docs.json",
        "format": "json",
        "overwrite": False,
    },
    "log_level": "WARNING",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A missing file leaves the defaults in place.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = f"Invalid YAML in {path}: {e}"
                raise ConfigError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"Configuration root in {path} must be a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
    validate_config(config)
    return config


def validate_config(config: dict[str, Any]) -> None:
    """Raise ConfigError for values the generator cannot use."""
    if not isinstance(config.get("output"), dict):
        msg = "'output' must be a mapping"
        raise ConfigError(msg)
    output_format = config["output"].get("format")
    if output_format not in OUTPUT_FORMATS:
        msg = f"Unknown output format {output_format!r}; expected one of {', '.join(OUTPUT_FORMATS)}"
        raise ConfigError(msg)
    if not isinstance(config.get("patterns"), list) or not all(
        isinstance(p, str) for p in config["patterns"]
    ):
        msg = "'patterns' must be a list of glob strings"
        raise ConfigError(msg)
    if not isinstance(config.get("ignore_dirs"), list):
        msg = "'ignore_dirs' must be a list of directory names"
        raise ConfigError(msg)
    if str(config.get("log_level", "")).upper() not in LOG_LEVELS:
        msg = f"Unknown log level {config.get('log_level')!r}"
        raise ConfigError(msg)
