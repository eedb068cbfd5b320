"""
================================================================================
Auth Page Object (Async / Playwright)
================================================================================

Page Object for the Swag Labs login page.

Inherits from PageObject:
  - clicking, input, heading and list parsing utilities

Adds:
  - login flow
  - error state checks
  - credential hint lists shown on the login page

Selectors come from `testdata/auth_users.yaml` (authPageSelectors).

================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Page, expect

from testsuites.ui_testing.framework.config_loader import UISettings
from testsuites.ui_testing.framework.page_object import Click, PageObject
from testsuites.ui_testing.framework.scenario_data import load_scenario_data


class AuthPage(PageObject):
    """Login page object (async)."""

    def __init__(
        self,
        page: Page,
        settings: Optional[UISettings] = None,
        selectors: Optional[Dict[str, Any]] = None,
        debug_mode: Optional[bool] = None,
    ):
        super().__init__(page, settings, debug_mode)
        self.selectors = selectors or load_scenario_data("auth_users")["elements"]["authPageSelectors"]

    @allure.step("Open login page")
    async def open(self) -> "AuthPage":
        """Navigate to the login page."""
        logger.info(f"Navigating to the login page: {self.settings.base_url}")
        await self.navigate_to(self.settings.base_url)
        return self

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        """
        Open the login page and submit the credentials with the Login button.

        Args:
            username: User name; may be empty
            password: Password; may be empty
        """
        await self.open()
        inputs = self.selectors["inputSelectors"]
        await self.fill_input(inputs["usernameInput"], username, press="")
        await self.fill_input(inputs["passwordInput"], password, press="")
        await self.click_button("Login", self.selectors["buttonSelectors"]["loginButton"], Click.Yes)

    @allure.step("Verify error message contains '{expected_text}'")
    async def expect_error_message(self, expected_text: str) -> None:
        """
        Check the display of an error message.

        Args:
            expected_text: Part of the text the error element should contain
        """
        error_selector = self.selectors["errorMessageSelectors"]["errorMessage"]
        error = self.page.locator(error_selector)
        await self._wait_for_state(error, "visible", error_selector)
        logger.debug(f'Checking the error text: should contain "{expected_text}"')
        await expect(error).to_contain_text(expected_text, timeout=self.settings.timeout)

    async def get_users_list(self) -> List[str]:
        """Accepted user names listed on the login page."""
        return await self.get_list_from_container(
            self.selectors["usersContainer"], [self.selectors["usersHeading"]]
        )

    async def get_passwords_list(self) -> List[str]:
        """Passwords listed on the login page."""
        return await self.get_list_from_container(
            self.selectors["passwordsContainer"], [self.selectors["passwordsHeading"]]
        )

    async def get_titles(self) -> List[str]:
        """h4 headings of the login container (dialogs excluded)."""
        return await self.get_all_h4_titles_in_page(self.selectors["loginContainer"])

    @allure.step("Verify title logo is '{expected_title}'")
    async def check_title_logo(self, expected_title: str) -> None:
        await expect(self.page.locator(self.selectors["titleLogo"])).to_have_text(
            expected_title, timeout=self.settings.timeout
        )
