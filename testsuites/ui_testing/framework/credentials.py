"""
Login credentials sourced from the environment.

`TEST_USERNAME` / `TEST_PASSWORD` are never stored in config files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


USERNAME_ENV = "TEST_USERNAME"
PASSWORD_ENV = "TEST_PASSWORD"


@dataclass(frozen=True)
class Credentials:
    """Username/password pair."""

    username: str
    password: str

    @classmethod
    def from_env(cls) -> "Credentials":
        """
        Read credentials from `TEST_USERNAME` / `TEST_PASSWORD`.

        Raises:
            KeyError: if either variable is unset
        """
        missing = [name for name in (USERNAME_ENV, PASSWORD_ENV) if name not in os.environ]
        if missing:
            raise KeyError(f"Missing credential environment variables: {', '.join(missing)}")
        return cls(username=os.environ[USERNAME_ENV], password=os.environ[PASSWORD_ENV])

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***MASKED***')"
