import asyncio
from playwright.async_api import Page, Error as PlaywrightError
from pydantic import ValidationError

import config
from browser import BrowserSession
from challenge import page_predicate, resolve
from console import trace
from errors import AcquisitionError, AmbiguousOutcome, ChallengeTimeout, InvalidCredentials
from form import submit, type_into
from models import (
    ChallengeState,
    Credentials,
    Failure,
    LoginOutcome,
    NavigationOptions,
    Result,
    Success,
)
from outcome import classify
from sniffer import RequestSniffer
from waits import require_visible, wait_visible


class SessionAcquirer:
    """One end-to-end login and session capture against the target app."""

    def __init__(self, credentials: Credentials, headless: bool = False):
        self.credentials = credentials
        self.headless = headless
        self.browser = BrowserSession()
        self.sleep = asyncio.sleep

        self.target_url = config.TARGET_URL
        self.navigation = NavigationOptions(referer=config.REFERER, wait_until=config.WAIT_UNTIL)
        self.challenge_script = config.CHALLENGE_ACTIVE_JS
        self.challenge_max_attempts = config.CHALLENGE_MAX_ATTEMPTS
        self.challenge_interval_ms = config.CHALLENGE_INTERVAL_MS
        self.key_delay_ms = config.KEY_DELAY_MS
        self.required_timeout_ms = config.REQUIRED_TIMEOUT_MS
        self.capture_marker = config.CAPTURE_MARKER
        self.capture_timeout_ms = config.CAPTURE_TIMEOUT_MS

    async def run(self) -> Result:
        """Run the attempt and return Success or Failure; never exits the process."""
        try:
            page = await self.browser.start(headless=self.headless)
            return await self.acquire(page)
        except (AcquisitionError, PlaywrightError, ValidationError) as e:
            trace(f"Acquisition aborted: {e!r}")
            return Failure.from_error(e)
        finally:
            await self.browser.stop()

    async def acquire(self, page: Page) -> Success:
        trace(f"Navigating to {self.target_url}")
        await self.browser.goto(self.target_url, self.navigation)

        state = await resolve(
            page_predicate(page, self.challenge_script),
            max_attempts=self.challenge_max_attempts,
            interval_ms=self.challenge_interval_ms,
            sleep=self.sleep,
        )
        if state is ChallengeState.TIMED_OUT:
            raise ChallengeTimeout(
                f"Challenge not cleared after {self.challenge_max_attempts} attempts"
            )

        # Warm-up: the form may take a moment to render, its absence is not fatal
        await wait_visible(page, config.EMAIL_SELECTOR, config.WARMUP_TIMEOUT_MS)
        await self._pause(config.POST_CHALLENGE_DELAY_MS)

        await self._login(page)

        outcome = await classify(page, timeout_ms=config.OUTCOME_TIMEOUT_MS)
        trace(f"Login outcome: {outcome.value}")
        if outcome is LoginOutcome.INVALID_CREDENTIALS:
            raise InvalidCredentials()
        if outcome is LoginOutcome.AMBIGUOUS:
            raise AmbiguousOutcome()

        await self._pause(config.DASHBOARD_DELAY_MS)
        async with RequestSniffer(page, self.capture_marker) as sniffer:
            await self._trigger_search(page)
            captured = await sniffer.capture(self.capture_timeout_ms)
        return Success.from_capture(captured)

    async def _pause(self, ms: int) -> None:
        await self.sleep(ms / 1000)

    async def _login(self, page: Page) -> None:
        email_input = await require_visible(page, config.EMAIL_SELECTOR, self.required_timeout_ms)
        await type_into(email_input, self.credentials.email, self.key_delay_ms)
        await self._pause(config.EMAIL_PAUSE_MS)

        password_input = await require_visible(page, config.PASSWORD_SELECTOR, self.required_timeout_ms)
        await type_into(password_input, self.credentials.password, self.key_delay_ms)
        await self._pause(config.PASSWORD_PAUSE_MS)
        await submit(password_input, self.key_delay_ms)
        trace("Credentials submitted")
        await self._pause(config.SETTLE_DELAY_MS)

    async def _trigger_search(self, page: Page) -> None:
        """Open the search box and submit it so the app fetches page data."""
        toggle = await require_visible(page, config.SEARCH_TOGGLE_SELECTOR, self.required_timeout_ms)
        await toggle.click()
        await self._pause(config.SEARCH_TOGGLE_DELAY_MS)

        search_input = await require_visible(page, config.SEARCH_INPUT_SELECTOR, self.required_timeout_ms)
        await search_input.click()
        await submit(search_input, self.key_delay_ms)
