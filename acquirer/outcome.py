import asyncio
from playwright.async_api import Page

import config
from models import LoginOutcome
from waits import wait_visible


async def classify(
    page: Page,
    success_selector: str = config.DASHBOARD_SELECTOR,
    invalid_selector: str = config.INVALID_SELECTOR,
    timeout_ms: int = config.OUTCOME_TIMEOUT_MS,
) -> LoginOutcome:
    """Classify the page after a login submit.

    Both markers are awaited together so the timeouts overlap. The dashboard
    marker wins when both are present.
    """
    dashboard, invalid = await asyncio.gather(
        wait_visible(page, success_selector, timeout_ms),
        wait_visible(page, invalid_selector, timeout_ms),
    )
    if dashboard is not None:
        return LoginOutcome.AUTHENTICATED
    if invalid is not None:
        return LoginOutcome.INVALID_CREDENTIALS
    return LoginOutcome.AMBIGUOUS
