"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- One browser per session, one context + page per test
- Page Object fixtures
- Screenshot capture on failure (attached to Allure)
- Scenario data fixture

================================================================================
"""

from typing import Any, AsyncGenerator, Dict

import pytest
from playwright.async_api import BrowserContext, Page
from pytest_asyncio import is_async_test

from autotest_tools.report_tools.allure_utils import attach_page_failure
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import UISettings, load_settings
from testsuites.ui_testing.framework.scenario_data import load_scenario_data
from testsuites.ui_testing.pages.auth_page import AuthPage
from testsuites.ui_testing.pages.inventory_page import InventoryPage


def pytest_collection_modifyitems(items):
    """Run every async UI test on the session event loop shared with the browser."""
    session_loop = pytest.mark.asyncio(loop_scope="session")
    for item in items:
        if is_async_test(item):
            item.add_marker(session_loop, append=False)


# ================================================================================
# Settings and Data Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings() -> UISettings:
    """UI settings loaded once per session from config.yaml + environment."""
    return load_settings()


@pytest.fixture(scope="session")
def auth_data() -> Dict[str, Any]:
    """Selectors, expected copy and users for the login page."""
    return load_scenario_data("auth_users")


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
async def browser_manager(ui_settings: UISettings) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single browser for all tests in the session (per xdist worker).
    """
    manager = BrowserManager(ui_settings)
    await manager.start()
    yield manager
    await manager.close()


@pytest.fixture(scope="function")
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """Function-scoped browser context: each test gets isolated storage."""
    context = await browser_manager.new_context()
    yield context
    await browser_manager.close_context(context)


@pytest.fixture(scope="function")
async def page(
    request: pytest.FixtureRequest,
    context: BrowserContext,
    ui_settings: UISettings,
) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    On test failure a full-page screenshot and the URL are attached to Allure
    before the page is closed.
    """
    page = await context.new_page()
    yield page
    report = getattr(request.node, "rep_call", None)
    if ui_settings.screenshot_on_failure and report is not None and report.failed:
        await attach_page_failure(page, name=request.node.name)
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def auth_page(page: Page, ui_settings: UISettings) -> AuthPage:
    """Provides AuthPage instance."""
    return AuthPage(page, ui_settings)


@pytest.fixture
def inventory_page(page: Page, ui_settings: UISettings) -> InventoryPage:
    """Provides InventoryPage instance."""
    return InventoryPage(page, ui_settings)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item (rep_setup / rep_call / rep_teardown)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
