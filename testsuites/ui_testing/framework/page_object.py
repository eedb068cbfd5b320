"""
================================================================================
Page Object
================================================================================

Universal, assertion-backed actions for page objects.

Every method first waits for (or asserts) the state of its target element and
only then acts. Two deliberate exceptions to fail-fast:
    - is_button_visible() turns any failure into False
    - highlighting (debug mode only) logs and swallows its own errors

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page, expect
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .abstract_page import AbstractPage
from .config_loader import UISettings
from .errors import ElementNotFoundError
from .highlight import highlight


class Click(Enum):
    """Whether click_button() clicks or only verifies."""
    Yes = "Yes"
    No = "No"


class PageObject(AbstractPage):
    """
    Base class for application pages.

    Adds to AbstractPage:
        - buttons with label verification
        - input filling with value confirmation
        - heading extraction that ignores <dialog> content
        - list parsing from multi-line text blocks
        - visibility probing and scrolling
    """

    def __init__(
        self,
        page: Page,
        settings: Optional[UISettings] = None,
        debug_mode: Optional[bool] = None,
    ):
        """
        Args:
            page: Playwright Page object
            settings: UI settings; loaded from config/env when omitted
            debug_mode: Highlight touched elements. Defaults to
                settings.debug_highlight; fixed for the object's lifetime.
        """
        super().__init__(page, settings)
        self.debug_mode = (
            self.settings.debug_highlight if debug_mode is None else debug_mode
        )

    # =========================================================================
    # Buttons and inputs
    # =========================================================================

    async def click_button(
        self,
        text_button: str,
        selector: str,
        click: Click = Click.Yes,
    ) -> None:
        """
        Click on a button with text verification.

        The label and visibility are asserted before anything else happens;
        with Click.No nothing is clicked at all.

        Args:
            text_button: Expected text of the button
            selector: CSS selector of the button
            click: Perform the click (default Click.Yes)

        Raises:
            AssertionError: Label or visibility check failed.
        """
        with allure.step(f"Click button '{text_button}' ({click.value})"):
            button = self.page.locator(selector, has_text=text_button)
            await expect(button).to_have_text(text_button, timeout=self.settings.timeout)
            await expect(button).to_be_visible(timeout=self.settings.timeout)
            if self.debug_mode:
                await self._highlight(button)
            if click is Click.Yes:
                await button.click()
                logger.debug(f"Clicked button '{text_button}' ({selector})")
            else:
                logger.debug(f"Verified button '{text_button}' ({selector}) without clicking")

    async def fill_input(
        self,
        selector: str,
        value: str,
        press: str = "Enter",
    ) -> None:
        """
        Fill an input field, confirm its value, then optionally press a key.

        The value comparison is exact; no whitespace normalization.

        Args:
            selector: Selector of the input field
            value: Value to enter
            press: Key to press after input; empty string to skip

        Raises:
            ElementNotFoundError: Input never became visible.
            AssertionError: Field value differs from `value`.
        """
        with allure.step(f"Fill input {selector}"):
            field = self.page.locator(selector)
            await self._wait_for_state(field, "visible", selector)
            await field.fill(value)
            await expect(field).to_have_value(value, timeout=self.settings.timeout)
            if self.debug_mode:
                await self._highlight(field)
            if press:
                await field.press(press)

    # =========================================================================
    # Content extraction
    # =========================================================================

    async def get_all_h4_titles_in_page(
        self,
        container_selector: str,
        heading: str = "h4",
        dialog_selector: str = "dialog",
    ) -> List[str]:
        """
        Get the heading texts of a container, ignoring headings that also
        appear inside any dialog on the page.

        Args:
            container_selector: Selector of the container to search
            heading: Heading tag to collect
            dialog_selector: Selector of modal/dialog elements

        Returns:
            Trimmed heading texts in document order
        """
        dialog_titles = set()
        for text in await self.page.locator(dialog_selector).locator(heading).all_text_contents():
            title = text.strip()
            if title:
                dialog_titles.add(title)
        logger.debug(f"{heading} in dialogs: {sorted(dialog_titles)}")

        container_titles: List[str] = []
        for item in await self.page.locator(container_selector).locator(heading).all():
            title = (await item.text_content() or "").strip()
            if not title:
                continue
            container_titles.append(title)
            if self.debug_mode:
                await self._highlight(item)

        filtered = [t for t in container_titles if t not in dialog_titles]
        logger.debug(f"{heading} in container {container_selector}: {filtered}")
        return filtered

    async def get_list_from_container(
        self,
        container_selector: str,
        exclude: Iterable[str] = (),
    ) -> List[str]:
        """
        Return the lines of a container rendered with <br> separators
        (e.g. a list of user names).

        Args:
            container_selector: Selector of the container
            exclude: Prefixes; lines starting with any of them are dropped.
                A single string is one prefix.

        Raises:
            ElementNotFoundError: Container never became visible.
        """
        try:
            await self.page.wait_for_selector(
                container_selector, state="visible", timeout=self.settings.action_timeout
            )
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(container_selector, "visible", str(e)) from e

        container = self.page.locator(container_selector)
        if self.debug_mode:
            await self._highlight(container)
        text = await container.inner_text()

        prefixes = (exclude,) if isinstance(exclude, str) else tuple(exclude)
        lines = [line.strip() for line in text.split("\n")]
        return [line for line in lines if line and not line.startswith(prefixes)]

    # =========================================================================
    # Probing and scrolling
    # =========================================================================

    async def is_button_visible(
        self,
        button_selector: str,
        label: str,
        dialog_context: str = "",
    ) -> bool:
        """
        Check whether a button with the given label is visible.

        The label must match the whole button text, surrounding whitespace
        ignored. Never raises: any failure is logged and reported as False.

        Args:
            button_selector: Selector of the button
            label: Text of the button
            dialog_context: Optional selector limiting the search area
        """
        scoped_selector = f"{dialog_context} >> {button_selector}" if dialog_context else button_selector
        try:
            scope = self.page.locator(dialog_context) if dialog_context else self.page
            button = scope.locator(
                button_selector,
                has_text=re.compile(rf"^\s*{re.escape(label)}\s*$"),
            )
            if self.debug_mode:
                await self._highlight(button)
            await self._wait_for_state(button, "attached", scoped_selector)
            await expect(button).to_be_visible(timeout=self.settings.timeout)
        except ElementNotFoundError as e:
            logger.error(f"Button '{label}' not found: {e}")
            return False
        except (AssertionError, PlaywrightError) as e:
            logger.error(f"Button '{label}' is not visible or selector is invalid: {e}")
            return False
        logger.debug(f"Button '{label}' is visible ({scoped_selector})")
        return True

    async def scroll_to(self, selector: str) -> None:
        """
        Scroll the page to the element; no-op if it is already in view.

        Raises:
            ElementNotFoundError: Element never became scrollable into view.
        """
        element = self.page.locator(selector)
        try:
            await element.scroll_into_view_if_needed(timeout=self.settings.action_timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, "visible", str(e)) from e
        if self.debug_mode:
            await self._highlight(element)

    # =========================================================================
    # Internals
    # =========================================================================

    async def _wait_for_state(self, locator: Locator, state: str, description: str) -> None:
        """Wait for `locator` to reach `state`; timeouts become ElementNotFoundError."""
        try:
            await locator.wait_for(state=state, timeout=self.settings.action_timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(description, state, str(e)) from e

    async def _highlight(self, locator: Locator) -> bool:
        """Highlight an element (debug mode). Never raises."""
        return await highlight(locator)


__all__ = [
    "Click",
    "PageObject",
]
