"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - Hierarchical YAML configuration loading
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access
    - Default value support
    - Immutable UISettings value handed to page objects

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .errors import UIAutomationError


# Default configuration file path (testsuites/config/config.yaml)
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

DEFAULT_BASE_URL = "https://www.saucedemo.com/"


class ConfigurationError(UIAutomationError):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url", "https://www.saucedemo.com/")
        'https://www.saucedemo.com/'

        >>> config.get("ui.timeout", 5000)
        5000

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - ui.headless -> UI_HEADLESS
        - ui.debug_highlight -> UI_DEBUG_HIGHLIGHT
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton: configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.strip().lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """Reset singleton instance (tests only)."""
        cls._instance = None
        cls._config = {}


@dataclass(frozen=True)
class UISettings:
    """
    Settings consumed by the browser fixtures and page objects.

    Read once at process start; page objects receive the value explicitly
    so the debug-highlight flag never has to be read from the environment
    at call time.
    """
    base_url: str = DEFAULT_BASE_URL
    timeout: int = 5000
    action_timeout: int = 10000
    navigation_timeout: int = 30000
    headless: bool = True
    debug_highlight: bool = False
    browser: str = "chromium"
    viewport_width: int = 1920
    viewport_height: int = 929
    screenshot_on_failure: bool = True

    @property
    def viewport(self) -> Dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "UISettings":
        defaults = cls()
        return cls(
            base_url=config.get("ui.base_url", defaults.base_url),
            timeout=config.get("ui.timeout", defaults.timeout),
            action_timeout=config.get("ui.action_timeout", defaults.action_timeout),
            navigation_timeout=config.get("ui.navigation_timeout", defaults.navigation_timeout),
            headless=config.get("ui.headless", defaults.headless),
            debug_highlight=config.get("ui.debug_highlight", defaults.debug_highlight),
            browser=config.get("ui.browser", defaults.browser),
            viewport_width=config.get("ui.viewport_width", defaults.viewport_width),
            viewport_height=config.get("ui.viewport_height", defaults.viewport_height),
            screenshot_on_failure=config.get(
                "ui.screenshot_on_failure", defaults.screenshot_on_failure
            ),
        )


def load_settings(config_path: Optional[Path] = None) -> UISettings:
    """Build UISettings from the process-wide ConfigLoader."""
    return UISettings.from_config(ConfigLoader(config_path))


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UISettings",
    "load_settings",
    "DEFAULT_BASE_URL",
]
