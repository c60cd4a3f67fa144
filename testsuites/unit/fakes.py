"""
In-memory stand-ins for Playwright objects used by the offline unit tests.

Only the calls the page objects and BrowserManager make are modelled.
"""

from typing import Any, Dict, List, Tuple
from unittest.mock import AsyncMock


class FakeLocator:
    def __init__(self, description: str):
        self.description = description
        self.fill = AsyncMock()
        self.click = AsyncMock()
        self.inner_text = AsyncMock(return_value="")

    def __repr__(self) -> str:
        return f"FakeLocator({self.description})"


class FakePage:
    def __init__(self, url: str = "about:blank"):
        self.url = url
        self.goto = AsyncMock()
        self.go_back = AsyncMock()
        self.screenshot = AsyncMock(return_value=b"")
        self.close = AsyncMock()
        self._locators: Dict[str, FakeLocator] = {}

    def _get(self, key: str) -> FakeLocator:
        return self._locators.setdefault(key, FakeLocator(key))

    def get_by_role(self, role: str, name: str = None, **kwargs: Any) -> FakeLocator:
        return self._get(f"role={role}[name={name}]")

    def get_by_text(self, text: str, exact: bool = False) -> FakeLocator:
        return self._get(f"text={text}[exact={exact}]")

    def locator(self, selector: str) -> FakeLocator:
        return self._get(selector)


class FakeAssertions:
    """Records web-first assertions instead of evaluating them."""

    def __init__(self, target: Any, calls: List[Tuple[str, Any, Any]]):
        self.target = target
        self.calls = calls

    async def to_contain_text(self, expected: Any) -> None:
        self.calls.append(("to_contain_text", self.target, expected))

    async def to_have_url(self, expected: Any) -> None:
        self.calls.append(("to_have_url", self.target, expected))

    async def to_be_visible(self) -> None:
        self.calls.append(("to_be_visible", self.target, None))


class FakeContext:
    def __init__(self, options: Dict[str, Any]):
        self.options = options
        self.default_timeout = None
        self.closed = False

    def set_default_timeout(self, timeout: int) -> None:
        self.default_timeout = timeout

    async def new_page(self) -> FakePage:
        return FakePage()

    async def close(self) -> None:
        self.closed = True


class FakeBrowser:
    def __init__(self):
        self.contexts: List[FakeContext] = []
        self.closed = False

    async def new_context(self, **options: Any) -> FakeContext:
        context = FakeContext(options)
        self.contexts.append(context)
        return context

    async def close(self) -> None:
        self.closed = True
