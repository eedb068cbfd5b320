"""
Repository-level pytest configuration.

Why this exists:
  - Provide safe defaults so a fresh clone runs against the public demo site
  - Keep behavior explicit and discoverable

Every value below is only a default: anything already exported by the user
or CI wins.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


ENV_DEFAULTS = {
    "ENVIRONMENT": "development",
}


def pytest_configure(config):
    """Set environment defaults before any configuration is read."""
    for k, v in ENV_DEFAULTS.items():
        os.environ.setdefault(k, v)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
