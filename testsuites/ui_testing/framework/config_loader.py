"""
================================================================================
Configuration Loader
================================================================================

Settings for the UI suite, read from testsuites/config/config.yaml.

Resolution order for every key:
    1. Environment variable named after the dot path (ui.base_url -> UI_BASE_URL)
    2. YAML file
    3. Built-in default (UI_DEFAULTS)

`ConfigLoader().ui_settings()` returns the resolved UISettings the fixtures
and page objects consume.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

UI_DEFAULTS: Dict[str, Any] = {
    "base_url": "https://the-internet.herokuapp.com",
    "browser": "chromium",
    "headless": True,
    "timeout": 10000,
    "viewport": {"width": 1280, "height": 720},
    "site_check_timeout": 10.0,
}

_TRUE_STRINGS = ("true", "1", "yes", "on")


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be parsed."""
    pass


@dataclass(frozen=True)
class UISettings:
    """Resolved settings for one UI run."""

    base_url: str = UI_DEFAULTS["base_url"]
    browser: str = UI_DEFAULTS["browser"]
    headless: bool = UI_DEFAULTS["headless"]
    timeout: int = UI_DEFAULTS["timeout"]
    viewport: Dict[str, int] = field(default_factory=lambda: dict(UI_DEFAULTS["viewport"]))
    site_check_timeout: float = UI_DEFAULTS["site_check_timeout"]

    def with_cli_overrides(self, browser: Optional[str] = None, headed: bool = False) -> "UISettings":
        """Apply `--browser-type` / `--headed` on top of file and env values."""
        return replace(
            self,
            browser=browser or self.browser,
            headless=self.headless and not headed,
        )


class ConfigLoader:
    """
    Process-wide configuration access.

    Usage:
        >>> settings = ConfigLoader().ui_settings()
        >>> settings.base_url
        'https://the-internet.herokuapp.com'

        >>> ConfigLoader().get("logging.level", "INFO")
        'INFO'
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._data = cls._read(Path(config_path) if config_path else DEFAULT_CONFIG_PATH)
            cls._instance = instance
        return cls._instance

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.warning(f"Configuration file not found: {path}. Using defaults and environment only.")
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e

        logger.debug(f"Loaded configuration from: {path}")
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a dot-path key.

        Env values are strings; they are coerced to the type of `default`
        (bool / int / float, or a YAML mapping for dicts) when one is given.
        """
        env_value = os.environ.get(key.upper().replace(".", "_"))
        if env_value is not None:
            return _coerce(env_value, default)

        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def ui_settings(self) -> UISettings:
        """Resolve every `ui.*` key against UI_DEFAULTS."""
        values = {name: self.get(f"ui.{name}", default) for name, default in UI_DEFAULTS.items()}
        values["base_url"] = str(values["base_url"]).rstrip("/")
        return UISettings(**values)

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance so the next call re-reads the file."""
        cls._instance = None


def _coerce(value: str, reference: Any) -> Any:
    # bool before int: bool is an int subclass
    if isinstance(reference, bool):
        return value.lower() in _TRUE_STRINGS
    if isinstance(reference, dict):
        try:
            parsed = yaml.safe_load(value)
        except yaml.YAMLError:
            return reference
        return parsed if isinstance(parsed, dict) else reference
    for kind in (int, float):
        if isinstance(reference, kind):
            try:
                return kind(value)
            except ValueError:
                return value
    return value


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UISettings",
    "UI_DEFAULTS",
    "DEFAULT_CONFIG_PATH",
]
