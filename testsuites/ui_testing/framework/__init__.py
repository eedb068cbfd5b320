"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based page-object framework.

Components:
    - abstract_page: navigation base owning the Playwright page
    - page_object: assertion-backed interaction helpers (click, fill, lists,
      headings, visibility probes, scrolling)
    - highlight: debug highlighting of touched elements
    - browser_manager: browser lifecycle management
    - config_loader: YAML + environment configuration, UISettings
    - scenario_data: YAML scenario data (selectors, copy, users)
    - errors: NavigationError, ElementNotFoundError, HighlightError

Author: Automation Team
License: MIT
================================================================================
"""

from .errors import (
    UIAutomationError,
    NavigationError,
    ElementNotFoundError,
    HighlightError,
)
from .config_loader import ConfigLoader, ConfigurationError, UISettings, load_settings
from .abstract_page import AbstractPage
from .page_object import Click, PageObject
from .browser_manager import BrowserManager
from .scenario_data import load_scenario_data

__all__ = [
    "UIAutomationError",
    "NavigationError",
    "ElementNotFoundError",
    "HighlightError",
    "ConfigLoader",
    "ConfigurationError",
    "UISettings",
    "load_settings",
    "AbstractPage",
    "Click",
    "PageObject",
    "BrowserManager",
    "load_scenario_data",
]
