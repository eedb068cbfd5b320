"""
================================================================================
Global Configuration for Automation Tools
================================================================================

This module provides centralized configuration management for the test suite
tooling, most importantly the logging setup.

Features:
    - YAML-based configuration loading
    - Environment variable support (LOGGING__LEVEL=DEBUG)
    - Centralized Loguru logging configuration:
        * colored console sink
        * rotating JSON files split by level (all / error / info / debug)
        * console-only mode for interactive runs

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_logger_initialized: bool = False
_handler_ids: List[int] = []

DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"

# (sub directory, file prefix, minimum level) for the level-split log files
LEVEL_FILES = [
    ("", "application", "DEBUG"),
    ("errors", "error", "ERROR"),
    ("info", "info", "INFO"),
    ("debug", "debug", "DEBUG"),
]


def _default_level() -> str:
    """DEBUG in development, WARNING anywhere else."""
    env = os.getenv("ENVIRONMENT", os.getenv("ENV", "development"))
    return "DEBUG" if env in ("dev", "development") else "WARNING"


def init_logger(
    level: Optional[str] = None,
    format_str: Optional[str] = None,
    log_dir: Optional[Union[str, Path]] = None,
    console_only: Optional[bool] = None,
    force: bool = False,
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom console format string. Defaults to config value.
        log_dir: Directory for rotating log files. Defaults to config value.
        console_only: Only log WARNING+ to the console, no files.
        force: Re-initialize even if already configured.
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    _ensure_config_loaded()

    log_level = (level or get_config("logging.level", None) or _default_level()).upper()
    log_format = format_str or get_config("logging.format", DEFAULT_FORMAT)
    if console_only is None:
        console_only = _as_bool(get_config("logging.console_only", False))

    if _handler_ids:
        for handler_id in _handler_ids:
            logger.remove(handler_id)
        _handler_ids.clear()
    else:
        logger.remove()

    if console_only:
        _handler_ids.append(
            logger.add(sys.stderr, level="WARNING", format=log_format, colorize=True, catch=True)
        )
        _logger_initialized = True
        return

    _handler_ids.append(
        logger.add(
            sys.stderr,
            level=log_level,
            format=log_format,
            colorize=True,
            backtrace=True,
            diagnose=True,
            catch=True,
        )
    )

    base_dir = Path(log_dir or get_config("logging.dir", "logs"))
    rotation = get_config("logging.rotation", "20 MB")
    retention = get_config("logging.retention", "4 days")
    for sub_dir, prefix, min_level in LEVEL_FILES:
        target_dir = base_dir / sub_dir if sub_dir else base_dir
        target_dir.mkdir(parents=True, exist_ok=True)
        file_level = min_level if logger.level(min_level).no >= logger.level(log_level).no else log_level
        _handler_ids.append(
            logger.add(
                str(target_dir / f"{prefix}-{{time:YYYY-MM-DD}}.log"),
                level=file_level,
                serialize=True,
                rotation=rotation,
                retention=retention,
                compression="zip",
                enqueue=True,
                catch=True,
            )
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level} (files in {base_dir})")


def shutdown_logger() -> None:
    """Flush queued records and detach the sinks added by init_logger()."""
    global _logger_initialized
    logger.complete()
    for handler_id in _handler_ids:
        logger.remove(handler_id)
    _handler_ids.clear()
    _logger_initialized = False


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


def _ensure_config_loaded() -> None:
    global _config
    if not _config:
        _load_config()


def _load_config() -> None:
    """
    Loads configuration from YAML files and environment variables.

    Configuration loading order:
        1. Default configuration file (config.yaml)
        2. Environment-specific configuration ({ENV}.yaml)
        3. Environment variables (override YAML settings)
    """
    global _config

    possible_config_dirs = [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
        Path(__file__).parent.parent.parent / "testsuites" / "config",
    ]

    config_dir = None
    for dir_path in possible_config_dirs:
        if dir_path.exists():
            config_dir = dir_path
            break

    if not config_dir:
        logger.warning("No configuration directory found. Using defaults.")
        _config = _get_defaults()
        _apply_env_overrides()
        return

    default_config_path = config_dir / "config.yaml"
    if default_config_path.exists():
        with open(default_config_path, "r", encoding="utf-8") as f:
            _config = _deep_merge(_get_defaults(), yaml.safe_load(f) or {})
        logger.debug(f"Loaded configuration from {default_config_path}")
    else:
        _config = _get_defaults()

    env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
    env_config_path = config_dir / f"{env}.yaml"
    if env_config_path.exists():
        with open(env_config_path, "r", encoding="utf-8") as f:
            env_config = yaml.safe_load(f) or {}
        _config = _deep_merge(_config, env_config)
        logger.debug(f"Merged environment config: {env_config_path}")

    _apply_env_overrides()


def _get_defaults() -> Dict[str, Any]:
    return {
        "logging": {
            "format": DEFAULT_FORMAT,
            "dir": "logs",
            "rotation": "20 MB",
            "retention": "4 days",
            "console_only": False,
        },
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merges two dictionaries, with override taking precedence.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Applies environment variable overrides to the configuration.

    Double underscore separates nested keys: LOGGING__LEVEL=DEBUG
    overrides logging.level.
    """
    for key, value in os.environ.items():
        if "__" in key and not key.startswith("__"):
            parts = [p.lower() for p in key.split("__")]
            _set_nested(_config, parts, value)


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    for key in keys[:-1]:
        existing = d.get(key)
        if not isinstance(existing, dict):
            existing = {}
            d[key] = existing
        d = existing
    d[keys[-1]] = value


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Examples:
        >>> get_config("logging.rotation", "20 MB")
        '20 MB'
    """
    _ensure_config_loaded()

    value = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value

