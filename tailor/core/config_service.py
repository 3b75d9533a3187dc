"""Layered configuration service for tailor.

Priority (highest to lowest):
1. Environment variables (TAILOR_*)
2. Project config (.tailor.toml in current directory)
3. Global config (~/.config/tailor/config.toml)
4. Built-in defaults
"""
from __future__ import annotations

import copy
import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import tomli_w

from tailor.errors import ConfigError

logger = logging.getLogger("tailor.config")

IGNORE_MATCH_MODES = ("segment", "substring")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Default configuration values
DEFAULTS: dict[str, Any] = {
    "scan": {
        "max_depth": 3,
        "max_reported_files": 100,
        "ignore_match": "segment",
        "default_path": "",
    },
    "logging": {
        "level": "INFO",
    },
}

KNOWN_KEYS = tuple(
    f"{section}.{key}" for section, values in DEFAULTS.items() for key in values
)

# Mapping of env vars to config paths
ENV_VAR_MAP = {
    "TAILOR_LOG_LEVEL": "logging.level",
    "TAILOR_MAX_DEPTH": "scan.max_depth",
    "TAILOR_MAX_FILES": "scan.max_reported_files",
    "TAILOR_IGNORE_MATCH": "scan.ignore_match",
    "TAILOR_PROJECT_PATH": "scan.default_path",
}

_INT_KEYS = {"scan.max_depth", "scan.max_reported_files"}


def _global_config_dir() -> Path:
    """Return the global config directory: ~/.config/tailor/."""
    return Path.home() / ".config" / "tailor"


def _global_config_path() -> Path:
    """Return the global config file path."""
    return _global_config_dir() / "config.toml"


def _project_config_path() -> Path:
    """Return the project config file path (.tailor.toml in cwd)."""
    return Path.cwd() / ".tailor.toml"


def _read_toml(path: Path) -> dict:
    """Read a TOML file, returning empty dict if missing or unreadable."""
    if not path.is_file():
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to read %s: %s", path, e)
        return {}


def _write_toml(data: dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        tomli_w.dump(data, f)


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge override into base (override wins)."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _get_nested(data: dict, dotted_key: str, default: Any = None) -> Any:
    """Get a value from a nested dict using dotted key notation."""
    keys = dotted_key.split(".")
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def _set_nested(data: dict, dotted_key: str, value: Any) -> None:
    """Set a value in a nested dict using dotted key notation."""
    keys = dotted_key.split(".")
    current = data
    for key in keys[:-1]:
        if key not in current or not isinstance(current[key], dict):
            current[key] = {}
        current = current[key]
    current[keys[-1]] = value


def _coerce_value(config_path: str, raw: str) -> Any:
    """Convert a string from the environment or command line into the key's type.

    Integer keys are parsed; everything else, paths included, stays a string.
    """
    if config_path in _INT_KEYS:
        try:
            return int(raw)
        except ValueError:
            raise ConfigError(
                f"Expected an integer for {config_path}, got {raw!r}",
                context={"key": config_path},
            )
    return raw


def _validate(data: dict) -> None:
    """Reject values the scanner cannot work with."""
    mode = _get_nested(data, "scan.ignore_match")
    if mode not in IGNORE_MATCH_MODES:
        raise ConfigError(
            f"scan.ignore_match must be one of {', '.join(IGNORE_MATCH_MODES)}, got {mode!r}",
            context={"key": "scan.ignore_match"},
        )
    for key in _INT_KEYS:
        value = _get_nested(data, key)
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ConfigError(
                f"{key} must be a non-negative integer, got {value!r}",
                context={"key": key},
            )
    default_path = _get_nested(data, "scan.default_path", "")
    if not isinstance(default_path, str):
        raise ConfigError(
            f"scan.default_path must be a path string, got {default_path!r}",
            context={"key": "scan.default_path"},
        )
    level = str(_get_nested(data, "logging.level", "")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}",
            context={"key": "logging.level"},
        )


@dataclass
class ResolvedConfig:
    """Fully resolved configuration after merging all layers."""
    data: dict = field(default_factory=dict)
    global_config_path: Optional[Path] = None
    project_config_path: Optional[Path] = None

    def get(self, dotted_key: str, default: Any = None) -> Any:
        """Get a config value using dotted key notation."""
        return _get_nested(self.data, dotted_key, default)


class ConfigService:
    """Layered configuration service.

    Resolves config from multiple sources with clear precedence:
    1. Environment variables (TAILOR_*)
    2. Project config (.tailor.toml)
    3. Global config (~/.config/tailor/config.toml)
    4. Built-in defaults
    """

    def __init__(self):
        self._resolved: Optional[ResolvedConfig] = None

    def resolve(self, force: bool = False) -> ResolvedConfig:
        """Resolve the full config from all layers.

        Raises:
            ConfigError: If a layer holds a value the scanner cannot use.
        """
        if self._resolved is not None and not force:
            return self._resolved

        resolved = self._merge_layers()
        _validate(resolved.data)
        self._resolved = resolved
        return self._resolved

    def _merge_layers(self) -> ResolvedConfig:
        merged = copy.deepcopy(DEFAULTS)

        global_path = _global_config_path()
        global_data = _read_toml(global_path)
        if global_data:
            merged = _deep_merge(merged, global_data)
            logger.debug("Loaded global config from %s", global_path)

        project_path = _project_config_path()
        project_data = _read_toml(project_path)
        if project_data:
            merged = _deep_merge(merged, project_data)
            logger.debug("Loaded project config from %s", project_path)

        for env_var, config_path in ENV_VAR_MAP.items():
            env_value = os.environ.get(env_var)
            if env_value is not None:
                _set_nested(merged, config_path, _coerce_value(config_path, env_value))

        return ResolvedConfig(
            data=merged,
            global_config_path=global_path if global_path.is_file() else None,
            project_config_path=project_path if project_path.is_file() else None,
        )

    def get(self, dotted_key: str, default: Any = None) -> Any:
        """Get a resolved config value."""
        return self.resolve().get(dotted_key, default)

    def get_max_depth(self) -> int:
        return self.get("scan.max_depth", 3)

    def get_max_reported_files(self) -> int:
        return self.get("scan.max_reported_files", 100)

    def get_ignore_match(self) -> str:
        return self.get("scan.ignore_match", "segment")

    def get_log_level(self) -> str:
        return str(self.get("logging.level", "INFO")).upper()

    def get_default_path(self) -> Optional[Path]:
        """Get the configured default project path, if any."""
        value = self.get("scan.default_path", "")
        if value:
            return Path(value).expanduser()
        return None

    def set_global(self, dotted_key: str, value: Any) -> Any:
        """Set a value in the global config file and return the stored value.

        String values are coerced to the key's type. The updated file is
        validated over the defaults before it is written, so a rejected
        value never reaches disk.

        Raises:
            ConfigError: For an unknown key or a value that fails validation.
        """
        if dotted_key not in KNOWN_KEYS:
            raise ConfigError(
                f"Unknown config key: {dotted_key}. Known keys: {', '.join(KNOWN_KEYS)}",
                context={"key": dotted_key},
            )
        if isinstance(value, str):
            value = _coerce_value(dotted_key, value)

        path = _global_config_path()
        data = _read_toml(path)
        _set_nested(data, dotted_key, value)
        _validate(_deep_merge(copy.deepcopy(DEFAULTS), data))
        _write_toml(data, path)
        # Invalidate cache
        self._resolved = None
        logger.info("Set %s = %s in %s", dotted_key, value, path)
        return value

    def init_project_config(self) -> Path:
        """Create a .tailor.toml in the current directory with defaults."""
        path = _project_config_path()
        if path.exists():
            raise ConfigError(
                f"Project config already exists: {path}",
                context={"file": str(path)},
            )

        data = {
            "scan": {
                "max_depth": DEFAULTS["scan"]["max_depth"],
                "ignore_match": DEFAULTS["scan"]["ignore_match"],
            },
            "logging": {
                "level": DEFAULTS["logging"]["level"],
            },
        }
        _write_toml(data, path)
        logger.info("Created project config: %s", path)
        return path

    def show(self) -> dict:
        """Return the merged config with its sources and any validation error.

        Invalid values are reported rather than raised so the merged layers
        can still be inspected and repaired.
        """
        resolved = self._merge_layers()
        try:
            _validate(resolved.data)
            error = None
        except ConfigError as e:
            error = str(e)
        return {
            "resolved": resolved.data,
            "sources": {
                "global_config": str(resolved.global_config_path) if resolved.global_config_path else None,
                "project_config": str(resolved.project_config_path) if resolved.project_config_path else None,
            },
            "error": error,
        }

    def config_paths(self) -> dict[str, str]:
        """Return all config file locations and their existence status."""
        global_path = _global_config_path()
        project_path = _project_config_path()
        return {
            "global_config": f"{global_path} ({'exists' if global_path.is_file() else 'not found'})",
            "project_config": f"{project_path} ({'exists' if project_path.is_file() else 'not found'})",
        }


# Module-level singleton
_config_service: Optional[ConfigService] = None


def get_config_service() -> ConfigService:
    """Get or create the global ConfigService instance."""
    global _config_service
    if _config_service is None:
        _config_service = ConfigService()
    return _config_service


def reset_config_service() -> None:
    """Reset the global config service (useful for testing)."""
    global _config_service
    _config_service = None
