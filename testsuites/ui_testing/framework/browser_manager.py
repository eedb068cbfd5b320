"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser instance per test session (per xdist worker)
    - One isolated context + page per test
    - Launch and context options driven by UISettings

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Playwright,
)

from .config_loader import UISettings, load_settings


class BrowserManager:
    """
    Manages browser instances and contexts for UI testing.

    Usage:
        manager = BrowserManager(settings)
        await manager.start()
        context = await manager.new_context()
        page = await context.new_page()
        ...
        await manager.close_context(context)
        await manager.close()
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "ignore_https_errors": True,
    }

    SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

    def __init__(self, settings: Optional[UISettings] = None):
        """
        Initialize browser manager.

        Args:
            settings: UI settings (headless, browser, viewport, timeouts)
        """
        self.settings = settings or load_settings()
        if self.settings.browser not in self.SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{self.settings.browser}', "
                f"expected one of {self.SUPPORTED_BROWSERS}"
            )

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.settings.browser)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.settings.headless,
        }
        if self.settings.browser != "chromium":
            launch_options.pop("args")

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.settings.browser} "
            f"(headless={self.settings.headless})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext with default timeouts applied
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {
            **self.DEFAULT_CONTEXT_OPTIONS,
            "viewport": self.settings.viewport,
            **options,
        }
        context = await self._browser.new_context(**context_options)
        context.set_default_timeout(self.settings.action_timeout)
        context.set_default_navigation_timeout(self.settings.navigation_timeout)
        self._contexts.append(context)

        return context

    async def close_context(self, context: BrowserContext) -> None:
        """Close a single context created by this manager."""
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()


__all__ = [
    "BrowserManager",
]
