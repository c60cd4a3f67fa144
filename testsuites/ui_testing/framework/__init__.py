"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - page_base: Base page object (navigation, flash banner, URL checks)
    - browser_manager: Browser lifecycle management
    - config_loader: YAML + environment configuration
    - log_setup: Loguru initialisation
    - session_guards: site check, browser start and page teardown for fixtures

Author: Automation Team
License: MIT
================================================================================
"""

from .page_base import BasePage
from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, ConfigurationError, UISettings
from .log_setup import init_logger

__all__ = [
    "BasePage",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "UISettings",
    "init_logger",
]
