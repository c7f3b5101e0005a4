"""
================================================================================
Page Interaction Errors
================================================================================

Structured failures raised by the primitive layer.

Every error carries the selector it was raised for and the underlying driver
exception (``cause``), so a failed scenario can be diagnosed from the report
alone without re-running it.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class PageInteractionError(Exception):
    """Base class for all page-layer failures."""

    def __init__(
        self,
        message: str,
        selector: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.selector = selector
        self.cause = cause


class ElementNotVisible(PageInteractionError):
    """Raised when no element matching a selector became visible in time."""

    def __init__(
        self,
        selector: str,
        timeout_ms: int,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(
            f"Element '{selector}' not visible within {timeout_ms}ms",
            selector=selector,
            cause=cause,
        )
        self.timeout_ms = timeout_ms


class ActionFailure(PageInteractionError):
    """Raised when the driver rejects an action (click, fill, select...)."""

    def __init__(
        self,
        action: str,
        selector: str,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(
            f"Failed to {action} '{selector}': {cause}",
            selector=selector,
            cause=cause,
        )
        self.action = action


class AssertionFailure(PageInteractionError, AssertionError):
    """Raised when an element does not show the expected value."""

    def __init__(
        self,
        selector: str,
        expected: Any,
        actual: Any = None,
        timeout_ms: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        if actual is None and timeout_ms is not None:
            detail = f"element not visible within {timeout_ms}ms"
        else:
            detail = f"actual {actual!r}"
        super().__init__(
            f"Element '{selector}' expected {expected!r}, {detail}",
            selector=selector,
            cause=cause,
        )
        self.expected = expected
        self.actual = actual
        self.timeout_ms = timeout_ms


class UrlAssertionFailure(PageInteractionError, AssertionError):
    """Raised when the current URL never contained the expected fragment."""

    def __init__(
        self,
        substring: str,
        actual_url: str,
        timeout_ms: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(
            f"URL does not contain '{substring}'. Current URL: {actual_url}",
            cause=cause,
        )
        self.substring = substring
        self.actual_url = actual_url
        self.timeout_ms = timeout_ms


class NavigationFailure(PageInteractionError):
    """Raised when the browser could not load a target."""

    def __init__(
        self,
        target: str,
        url: str,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(f"Navigation to '{url}' failed: {cause}", cause=cause)
        self.target = target
        self.url = url


class InvalidOption(PageInteractionError, ValueError):
    """Raised for a value outside a fixed enumerated set."""

    def __init__(self, option: Any, allowed: Sequence[str]):
        super().__init__(
            f"Unrecognized option {option!r}. Expected one of: {', '.join(allowed)}"
        )
        self.option = option
        self.allowed = list(allowed)


__all__ = [
    "PageInteractionError",
    "ElementNotVisible",
    "ActionFailure",
    "AssertionFailure",
    "UrlAssertionFailure",
    "NavigationFailure",
    "InvalidOption",
]
