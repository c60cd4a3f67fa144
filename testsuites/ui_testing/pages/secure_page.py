"""
================================================================================
Secure Area Page Object (Async / Playwright)
================================================================================

Page object for `/secure`, the area reachable only with an active session.

================================================================================
"""

from __future__ import annotations

import allure
from playwright.async_api import Page, expect

from testsuites.ui_testing.framework.page_base import PageBase


class SecurePage(PageBase):
    """Secure area page object (async)."""

    URL_PATH = "/secure"
    PAGE_TITLE = "Secure Area"

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.secure_title = page.get_by_text(self.PAGE_TITLE, exact=True)
        self.logout_button = page.get_by_role("link", name="Logout")

    @allure.step("Open secure area")
    async def open(self) -> "SecurePage":
        """Navigate directly to the secure area."""
        await self.navigate()
        return self

    async def goto_secure_area(self) -> "SecurePage":
        return await self.open()

    @allure.step("Click Logout")
    async def click_logout(self) -> None:
        await self.logout_button.click()

    @allure.step("Verify secure area loaded")
    async def expect_loaded(self) -> None:
        """Assert the browser is on /secure and the heading is visible."""
        await self.expect_url()
        await expect(self.secure_title).to_be_visible()
