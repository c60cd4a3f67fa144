"""
================================================================================
Session Guards
================================================================================

Environment checks and teardown used by the UI fixtures.

Missing infrastructure (site down, browser not installed) skips the UI suite
instead of failing it. Failure capture never masks the test result.

================================================================================
"""

import httpx
import pytest
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from .browser_manager import BrowserManager
from .page_base import BasePage


def check_site_available(base_url: str, timeout: float = 10.0) -> str:
    """
    Request `base_url` once; skip when it cannot be reached or answers 5xx.

    Returns:
        The base URL, for fixtures that depend on it.
    """
    try:
        response = httpx.get(base_url, timeout=timeout, follow_redirects=True)
    except httpx.HTTPError as e:
        pytest.skip(f"Target site unreachable: {base_url} ({e})")

    if response.status_code >= 500:
        pytest.skip(f"Target site unhealthy: {base_url} (HTTP {response.status_code})")

    logger.debug(f"Target site reachable: {base_url} (HTTP {response.status_code})")
    return base_url


async def start_browser(manager: BrowserManager) -> BrowserManager:
    """Start `manager`; skip when Playwright cannot launch the browser."""
    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Browser '{manager.browser_type}' unavailable: {e.message}")
    return manager


async def finalize_page(page: Page, base_url: str, failed: bool, test_name: str) -> None:
    """
    Attach failure details when `failed`, then close the page.

    Capture errors are logged, not raised.
    """
    try:
        if failed:
            try:
                await BasePage(page, base_url=base_url).capture_failure(test_name)
            except (PlaywrightError, OSError) as e:
                logger.warning(f"Failed to capture screenshot on failure: {e}")
    finally:
        await page.close()


__all__ = [
    "check_site_available",
    "start_browser",
    "finalize_page",
]
