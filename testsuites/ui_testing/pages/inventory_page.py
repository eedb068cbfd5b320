"""
================================================================================
Inventory Page Object (Async / Playwright)
================================================================================

The product list shown after a successful login. Used by the per-user
special-case checks (problem_user, performance_glitch_user, ...).

================================================================================
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

import allure
from playwright.async_api import Page, expect

from testsuites.ui_testing.framework.config_loader import UISettings
from testsuites.ui_testing.framework.page_object import PageObject
from testsuites.ui_testing.framework.scenario_data import load_scenario_data


INVENTORY_URL_PATTERN = re.compile(r".*/inventory\.html")


class InventoryPage(PageObject):
    """Inventory page object (async)."""

    def __init__(
        self,
        page: Page,
        settings: Optional[UISettings] = None,
        selectors: Optional[Dict[str, Any]] = None,
        debug_mode: Optional[bool] = None,
    ):
        super().__init__(page, settings, debug_mode)
        self.selectors = selectors or load_scenario_data("auth_users")["elements"]["inventoryPageSelectors"]

    @allure.step("Verify inventory page loaded")
    async def expect_loaded(self, timeout: Optional[int] = None) -> None:
        """
        Verify the browser is on the inventory URL.

        Args:
            timeout: Override for slow accounts (performance_glitch_user)
        """
        await expect(self.page).to_have_url(
            INVENTORY_URL_PATTERN, timeout=timeout or self.settings.timeout
        )

    @allure.step("Verify first item image is visible")
    async def expect_first_item_image_visible(self) -> None:
        await expect(self.page.locator(self.selectors["itemImage"]).first).to_be_visible(
            timeout=self.settings.timeout
        )

    @allure.step("Verify inventory list is visible")
    async def expect_inventory_list_visible(self) -> None:
        await expect(self.page.locator(self.selectors["inventoryList"])).to_be_visible(
            timeout=self.settings.timeout
        )

    @allure.step("Verify cart link is visible")
    async def expect_cart_link_visible(self) -> None:
        cart = self.page.locator(self.selectors["cartLink"])
        if self.debug_mode:
            await self._highlight(cart)
        await expect(cart).to_be_visible(timeout=self.settings.timeout)
