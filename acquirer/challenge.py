"""Polling for the anti-automation interstitial to clear."""

import asyncio
from typing import Awaitable, Callable
from playwright.async_api import Page

import config
from console import trace
from models import ChallengeState

Predicate = Callable[[], Awaitable[bool]]


def page_predicate(page: Page, script: str = config.CHALLENGE_ACTIVE_JS) -> Predicate:
    """Turn a JS predicate evaluated in the page into an async callable."""
    async def is_active() -> bool:
        return bool(await page.evaluate(script))
    return is_active


async def resolve(
    is_active: Predicate,
    max_attempts: int = config.CHALLENGE_MAX_ATTEMPTS,
    interval_ms: int = config.CHALLENGE_INTERVAL_MS,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> ChallengeState:
    """
    Wait for the challenge to clear.

    Returns CLEARED at once when the first check finds no challenge. Otherwise
    polls every interval_ms, at most max_attempts times, and decides on one
    last check. Worst case sleeps exactly max_attempts * interval_ms.
    """
    if not await is_active():
        return ChallengeState.CLEARED

    trace(f"Challenge active, polling up to {max_attempts}x{interval_ms}ms")
    attempts = max_attempts
    while attempts > 0 and await is_active():
        await sleep(interval_ms / 1000)
        attempts -= 1

    if await is_active():
        trace("Challenge still active, giving up")
        return ChallengeState.TIMED_OUT
    trace(f"Challenge cleared after {max_attempts - attempts} polls")
    return ChallengeState.CLEARED
