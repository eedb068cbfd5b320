"""
================================================================================
UI Framework Errors
================================================================================

Exception taxonomy for the page-object layer.

    - NavigationError: page.goto() failed or timed out
    - ElementNotFoundError: a locator never reached the required state
    - HighlightError: debug styling failed (logged and swallowed, never raised
      out of the framework)

AssertionError is not redefined here: Playwright's `expect` raises the builtin.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional


class UIAutomationError(Exception):
    """Base class for all UI framework errors."""
    pass


class NavigationError(UIAutomationError):
    """Raised when navigation does not complete or the target is unreachable."""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Navigation to '{url}' failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ElementNotFoundError(UIAutomationError):
    """Raised when an element never becomes attached/visible in time."""

    def __init__(self, selector: str, state: str = "visible", reason: Optional[str] = None):
        self.selector = selector
        self.state = state
        message = f"Element '{selector}' did not reach state '{state}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class HighlightError(UIAutomationError):
    """Debug highlight could not be applied (e.g. element detached)."""
    pass


__all__ = [
    "UIAutomationError",
    "NavigationError",
    "ElementNotFoundError",
    "HighlightError",
]
