"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .messages import FlashMessage
from .secure_page import SecurePage

__all__ = [
    "LoginPage",
    "SecurePage",
    "FlashMessage",
]
