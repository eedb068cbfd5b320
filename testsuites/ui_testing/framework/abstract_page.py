"""
================================================================================
Abstract Page
================================================================================

Navigation base for all page objects. Owns the Playwright page (one browser
tab per test) and the settings it was created with.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from .config_loader import UISettings, load_settings
from .errors import NavigationError


class AbstractPage:
    """
    Base class for page objects.

    Usage:
        class LoginPage(AbstractPage):
            async def open(self):
                await self.navigate_to(self.settings.base_url)
    """

    def __init__(
        self,
        page: Page,
        settings: Optional[UISettings] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object (owned for the lifetime of the test)
            settings: UI settings; loaded from config/env when omitted
        """
        self.page = page
        self.settings = settings or load_settings()

    @property
    def current_url(self) -> str:
        """URL the page is currently showing."""
        return self.page.url

    async def navigate_to(self, url: str) -> None:
        """
        Navigate to a specific URL.

        Args:
            url: URL to open

        Raises:
            NavigationError: The page did not load within the navigation timeout.
        """
        with allure.step(f"Navigate to {url}"):
            try:
                await self.page.goto(url, timeout=self.settings.navigation_timeout)
            except PlaywrightError as e:
                logger.error(f"Navigation to {url} failed: {e}")
                raise NavigationError(url, str(e)) from e
            logger.debug(f"Navigated to: {url}")


__all__ = [
    "AbstractPage",
]
