"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- Site reachability check (skips the UI suite when offline)
- One browser per session, one isolated context per test
- Page Object fixtures
- Screenshot capture on failure

================================================================================
"""

from typing import AsyncGenerator, Dict

import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Page, expect

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import ConfigLoader, UISettings
from testsuites.ui_testing.framework.credentials import Credentials
from testsuites.ui_testing.framework.session_guards import (
    check_site_available,
    finalize_page,
    start_browser,
)
from testsuites.ui_testing.pages.login_page import LoginPage
from testsuites.ui_testing.pages.secure_page import SecurePage


# ================================================================================
# Settings
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings(pytestconfig) -> UISettings:
    """
    Resolved UI settings: CLI options > env vars > config.yaml > defaults.
    """
    settings = ConfigLoader().ui_settings().with_cli_overrides(
        browser=pytestconfig.getoption("--browser-type"),
        headed=pytestconfig.getoption("--headed"),
    )
    logger.info(
        f"UI settings: base_url={settings.base_url} browser={settings.browser} "
        f"headless={settings.headless}"
    )
    return settings


@pytest.fixture(scope="session")
def site_available(ui_settings: UISettings) -> str:
    """
    Check the target site once per session.

    The UI suite is skipped (not failed) when the site cannot be reached.
    """
    return check_site_available(ui_settings.base_url, timeout=ui_settings.site_check_timeout)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(
    ui_settings: UISettings,
    site_available: str,
) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single browser for all tests in the session, reducing browser
    launch overhead. Skips the UI suite if the browser cannot be launched.
    """
    manager = BrowserManager(
        headless=ui_settings.headless,
        browser_type=ui_settings.browser,
        base_url=site_available,
        default_timeout=ui_settings.timeout,
        viewport=ui_settings.viewport,
    )
    await start_browser(manager)

    expect.set_options(timeout=ui_settings.timeout)
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, so no session cookie leaks
    between tests.
    """
    context = await browser_manager.new_context()
    yield context
    await browser_manager.release_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(
    context: BrowserContext,
    ui_settings: UISettings,
    request,
) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    Attaches a full-page screenshot and the current URL to Allure when the
    test body failed.
    """
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    await finalize_page(
        page,
        base_url=ui_settings.base_url,
        failed=report is not None and report.failed,
        test_name=request.node.name,
    )


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page, ui_settings: UISettings) -> LoginPage:
    """Provides LoginPage instance."""
    return LoginPage(page, base_url=ui_settings.base_url)


@pytest.fixture
def secure_page(page: Page, ui_settings: UISettings) -> SecurePage:
    """Provides SecurePage instance."""
    return SecurePage(page, base_url=ui_settings.base_url)


# ================================================================================
# Test Data Fixtures
# ================================================================================

@pytest.fixture
def credentials() -> Credentials:
    """Valid credentials from TEST_USERNAME / TEST_PASSWORD."""
    try:
        return Credentials.from_env()
    except KeyError as e:
        pytest.skip(str(e))


@pytest.fixture
def test_data() -> Dict[str, Dict[str, str]]:
    """Known-bad inputs for negative scenarios."""
    return {
        "invalid_username": {"username": "test"},
        "invalid_password": {"password": "mala"},
        "empty": {"username": "", "password": ""},
    }


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item (`rep_setup`, `rep_call`, ...)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
