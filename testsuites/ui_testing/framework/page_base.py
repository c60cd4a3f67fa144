"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the configured base URL
    - The shared `#flash` status banner and its assertions
    - URL assertions
    - Screenshot and failure capture for Allure

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

import allure
from loguru import logger
from playwright.async_api import Locator, Page, expect

from .config_loader import ConfigLoader


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

FLASH_SELECTOR = "#flash"

# Close glyph rendered inside the flash banner
FLASH_CLOSE_GLYPH = "×"


class BasePage:
    """
    Base class for all page objects.

    Provides common functionality for:
        - Navigation and URL handling
        - Flash message reading and assertion
        - Screenshot capture

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"

            async def login(self, username: str, password: str):
                await self.username_input.fill(username)
                await self.password_input.fill(password)
                await self.login_button.click()
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application. Defaults to `ui.base_url`.
        """
        self.page = page
        if not base_url:
            base_url = ConfigLoader().ui_settings().base_url
        self.base_url = base_url.rstrip("/")
        self.flash: Locator = page.locator(FLASH_SELECTOR)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    @property
    def current_url(self) -> str:
        """URL the browser is currently showing."""
        return self.page.url

    def url_for(self, path: str) -> str:
        """Absolute URL for a path on the application."""
        return f"{self.base_url}{path}"

    def is_current(self) -> bool:
        """True when the browser shows this page (query and fragment ignored)."""
        parts = urlsplit(self.page.url)
        return f"{parts.scheme}://{parts.netloc}{parts.path}".rstrip("/") == self.url.rstrip("/")

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    async def navigate_to(
        self,
        path: str,
        wait_for: str = "load",
    ) -> None:
        """
        Navigate to specific path.

        Args:
            path: URL path to navigate to
            wait_for: Wait condition
        """
        with allure.step(f"Navigate to {path}"):
            await self.page.goto(self.url_for(path), wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url_for(path)}")

    async def go_back(self, wait_for: str = "load") -> None:
        """Browser back navigation."""
        with allure.step("Navigate back"):
            await self.page.go_back(wait_until=wait_for)
            logger.debug(f"Navigated back to: {self.page.url}")

    # =========================================================================
    # Flash Message
    # =========================================================================

    async def get_flash_text(self) -> str:
        """
        Read the flash banner text.

        Whitespace is collapsed and the close glyph is dropped.
        """
        raw = await self.flash.inner_text()
        return " ".join(raw.replace(FLASH_CLOSE_GLYPH, " ").split())

    async def expect_flash_contains(self, text: str) -> None:
        """Assert the flash banner contains `text`."""
        text = str(text)
        with allure.step(f"Expect flash contains: {text}"):
            await expect(self.flash).to_contain_text(text)

    # =========================================================================
    # URL Assertions
    # =========================================================================

    async def expect_url(self, path: Optional[str] = None) -> None:
        """
        Assert the browser URL equals base URL + `path`.

        Args:
            path: URL path; defaults to this page's URL_PATH
        """
        expected = self.url_for(path if path is not None else self.URL_PATH)
        with allure.step(f"Expect URL: {expected}"):
            await expect(self.page).to_have_url(expected)

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Full-page screenshot
            - Current URL
        """
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "BasePage",
    "PageBase",
    "FLASH_SELECTOR",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
