"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Page object for `/login`.

Locators use accessible roles and names, matching what a user sees:
  - "Username" / "Password" textboxes
  - "Login" button
  - `#flash` status banner (from BasePage)

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from playwright.async_api import Page

from testsuites.ui_testing.framework.page_base import PageBase


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/login"
    PAGE_TITLE = "Login Page"

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.username_input = page.get_by_role("textbox", name="Username")
        self.password_input = page.get_by_role("textbox", name="Password")
        self.login_button = page.get_by_role("button", name="Login")

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page."""
        await self.navigate()
        return self

    async def goto_login_page(self) -> "LoginPage":
        return await self.open()

    @allure.step("Enter username")
    async def enter_username(self, username: str) -> None:
        await self.username_input.fill(username)

    @allure.step("Enter password")
    async def enter_password(self, password: str) -> None:
        await self.password_input.fill(password)

    @allure.step("Click Login")
    async def click_login(self) -> None:
        await self.login_button.click()

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        """
        Fill both fields and submit the form.

        Does not navigate first; call `open()` beforehand.

        Args:
            username: Value for the Username field (may be empty)
            password: Value for the Password field (may be empty)
        """
        logger.info(f"Logging in as '{username}'")
        await self.enter_username(username)
        await self.enter_password(password)
        await self.click_login()
