"""Flash banner texts shown by the application (exact strings)."""

from enum import Enum


class FlashMessage(str, Enum):
    """Messages rendered in the `#flash` banner."""

    LOGIN_SUCCESS = "You logged into a secure area!"
    LOGOUT_SUCCESS = "You logged out of the secure area!"
    INVALID_USERNAME = "Your username is invalid!"
    INVALID_PASSWORD = "Your password is invalid!"
    LOGIN_REQUIRED = "You must login to view the secure area!"

    def __str__(self) -> str:
        return self.value
