"""
Scenario data loading.

Selectors, expected UI copy and user credentials live in YAML files under
`testsuites/ui_testing/testdata/`. The framework treats them as plain data.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from loguru import logger

from .config_loader import ConfigurationError


SCENARIO_DATA_DIR = Path(__file__).parent.parent / "testdata"


@lru_cache(maxsize=None)
def load_scenario_data(name: str, directory: Union[str, Path] = SCENARIO_DATA_DIR) -> Dict[str, Any]:
    """
    Load a scenario data file by name (without extension).

    Args:
        name: File stem, e.g. "auth_users"
        directory: Directory holding the YAML files

    Raises:
        ConfigurationError: File missing or not valid YAML.
    """
    path = Path(directory) / f"{name}.yaml"
    if not path.exists():
        raise ConfigurationError(f"Test data file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in test data file {path}: {e}") from e

    logger.debug(f"Loaded test data: {path}")
    return data


__all__ = [
    "SCENARIO_DATA_DIR",
    "load_scenario_data",
]
