"""Bounded waits that report absence as ``None`` instead of raising."""

from typing import Awaitable, Optional, TypeVar
from playwright.async_api import Page, Locator, Error as PlaywrightError

import config
from errors import UnwrapFailure

T = TypeVar("T")


async def optional(awaitable: Awaitable[T]) -> Optional[T]:
    """Await and return the value, or None if Playwright timed out or failed."""
    try:
        return await awaitable
    except PlaywrightError:
        # TimeoutError is a subclass of Error
        return None


def unwrap(value: Optional[T], what: str = "") -> T:
    if value is None:
        raise UnwrapFailure(f"Unwrap on null: {what}" if what else None)
    return value


async def _shown(locator: Locator, timeout_ms: int) -> Locator:
    await locator.wait_for(state="visible", timeout=timeout_ms)
    return locator


async def wait_visible(page: Page, selector: str, timeout_ms: int) -> Optional[Locator]:
    """First element matching selector once visible, or None after timeout_ms."""
    return await optional(_shown(page.locator(selector).first, timeout_ms))


async def require_visible(
    page: Page, selector: str, timeout_ms: int = config.REQUIRED_TIMEOUT_MS
) -> Locator:
    """Wait for an element the flow cannot continue without."""
    return unwrap(await wait_visible(page, selector, timeout_ms), selector)
