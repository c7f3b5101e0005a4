"""
In-memory stand-in for the slice of the Playwright page/locator API the page
layer uses. Elements are registered per exact selector string.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError


class FakeElement:
    """
    One DOM node.

    `hidden_polls` makes the node report invisible for that many visibility
    checks before it shows up, which simulates a late render.
    """

    def __init__(
        self,
        text: str = "",
        visible: bool = True,
        hidden_polls: int = 0,
        on_click: Optional[Callable[["FakePage"], None]] = None,
        click_error: Optional[str] = None,
    ):
        self.text = text
        self.visible = visible
        self.hidden_polls = hidden_polls
        self.on_click = on_click
        self.click_error = click_error
        self.value = ""

    def check_visible(self) -> bool:
        if self.hidden_polls > 0:
            self.hidden_polls -= 1
            return False
        return self.visible


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str, index: Optional[int] = None):
        self._page = page
        self.selector = selector
        self._index = index

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self._page, self.selector, 0)

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(self._page, self.selector, index)

    def _matches(self) -> List[FakeElement]:
        return self._page.elements.get(self.selector, [])

    def _element(self) -> Optional[FakeElement]:
        matches = self._matches()
        index = self._index or 0
        return matches[index] if index < len(matches) else None

    def _require(self, action: str) -> FakeElement:
        element = self._element()
        if element is None or not element.visible:
            raise PlaywrightError(f"{action}: element '{self.selector}' is not actionable")
        return element

    async def is_visible(self) -> bool:
        element = self._element()
        return element is not None and element.check_visible()

    async def count(self) -> int:
        return len(self._matches())

    async def click(self, **kwargs) -> None:
        element = self._require("click")
        if element.click_error:
            raise PlaywrightError(element.click_error)
        self._page.actions.append(("click", self.selector, None))
        if element.on_click:
            element.on_click(self._page)

    async def fill(self, value: str, **kwargs) -> None:
        element = self._require("fill")
        element.value = value
        self._page.actions.append(("fill", self.selector, value))

    async def press(self, key: str, **kwargs) -> None:
        self._require("press")
        self._page.actions.append(("press", self.selector, key))

    async def select_option(self, value: Optional[str] = None, **kwargs) -> None:
        self._require("select_option")
        self._page.actions.append(("select", self.selector, value))

    async def text_content(self) -> Optional[str]:
        element = self._element()
        if element is None:
            raise PlaywrightError(f"text_content: no element for '{self.selector}'")
        return element.text

    async def input_value(self, **kwargs) -> str:
        element = self._element()
        if element is None:
            raise PlaywrightError(f"input_value: no element for '{self.selector}'")
        return element.value

    async def all_text_contents(self) -> List[str]:
        return [element.text for element in self._matches()]


class FakePage:
    """Page with a mutable selector -> elements map and an action log."""

    def __init__(self, url: str = "about:blank"):
        self.url = url
        self.elements: Dict[str, List[FakeElement]] = {}
        self.actions: List[tuple] = []
        self.goto_error: Optional[str] = None

    def add(self, selector: str, *elements: FakeElement) -> "FakePage":
        self.elements.setdefault(selector, []).extend(elements or [FakeElement()])
        return self

    def remove(self, selector: str) -> None:
        self.elements.pop(selector, None)

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    async def goto(self, url: str, **kwargs) -> None:
        if self.goto_error:
            raise PlaywrightError(self.goto_error)
        self.url = url
        self.actions.append(("goto", url, None))
