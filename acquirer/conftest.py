import pytest
from unittest.mock import AsyncMock
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

import config

DATA_URL = "https://securitytrails.com/_next/data/abc123/app/account.json"
SESSION_COOKIES = [
    {"name": "session", "value": "s3cr3t", "domain": "securitytrails.com", "path": "/",
     "expires": -1, "httpOnly": True, "secure": True, "sameSite": "Lax"},
]
REQUEST_HEADERS = {
    "accept": "*/*",
    "user-agent": config.USER_AGENT,
    "x-nextjs-data": "1",
}


class FakeRequest:
    def __init__(self, url: str, headers: dict | None = None):
        self.url = url
        self._headers = dict(headers if headers is not None else REQUEST_HEADERS)

    async def all_headers(self) -> dict:
        return self._headers


class FakeContext:
    def __init__(self, cookies: list[dict]):
        self._cookies = cookies
        self.cookie_urls: list[str] = []

    async def cookies(self, url: str) -> list[dict]:
        self.cookie_urls.append(url)
        return list(self._cookies)


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str):
        self.page = page
        self.selector = selector

    @property
    def first(self) -> "FakeLocator":
        return self

    async def wait_for(self, state: str = "visible", timeout: float | None = None) -> None:
        self.page.waits.append((self.selector, timeout))
        if self.selector not in self.page.visible:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.selector}")

    async def focus(self) -> None:
        self.page.focused = self.selector

    async def press_sequentially(self, text: str, delay: float | None = None) -> None:
        assert self.page.focused == self.selector, f"typing into unfocused {self.selector}"
        self.page.typed.append((self.selector, text, delay))
        if text == "\r\n":
            self.page.press_enter(self.selector)

    async def click(self) -> None:
        self.page.focused = self.selector
        self.page.clicks.append(self.selector)
        for request in self.page.on_click.get(self.selector, []):
            self.page.emit_request(request)


class FakePage:
    """Stands in for a Playwright page; selectors in ``visible`` resolve at once."""

    def __init__(self, visible=(), challenge=(False,), after_login=(), on_search=(),
                 on_click=None, cookies=None):
        self.visible = set(visible)
        self.challenge = list(challenge)
        self.after_login = set(after_login)
        self.on_search = list(on_search)
        self.on_click = on_click or {}
        self.context = FakeContext(SESSION_COOKIES if cookies is None else cookies)
        self.listeners = []
        self.focused = None
        self.typed = []
        self.clicks = []
        self.waits = []
        self.evaluations = 0

    async def evaluate(self, script: str):
        self.evaluations += 1
        if len(self.challenge) > 1:
            return self.challenge.pop(0)
        return self.challenge[0]

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    def on(self, event: str, callback) -> None:
        assert event == "request"
        self.listeners.append(callback)

    def remove_listener(self, event: str, callback) -> None:
        self.listeners.remove(callback)

    def emit_request(self, request: FakeRequest) -> None:
        for callback in list(self.listeners):
            callback(request)

    def press_enter(self, selector: str) -> None:
        if selector == config.PASSWORD_SELECTOR:
            self.visible |= self.after_login
        elif selector == config.SEARCH_INPUT_SELECTOR:
            for request in self.on_search:
                self.emit_request(request)


class FakeBrowserSession:
    def __init__(self, page: FakePage):
        self.page = page
        self.started = False
        self.stopped = False
        self.navigations = []

    async def start(self, headless: bool = False) -> FakePage:
        self.started = True
        self.headless = headless
        return self.page

    async def goto(self, url, options) -> None:
        self.navigations.append((url, options))

    async def stop(self) -> None:
        self.stopped = True


LOGIN_FORM = {config.EMAIL_SELECTOR, config.PASSWORD_SELECTOR}
DASHBOARD = {config.DASHBOARD_SELECTOR, config.SEARCH_TOGGLE_SELECTOR, config.SEARCH_INPUT_SELECTOR}


@pytest.fixture
def sleep():
    return AsyncMock()


@pytest.fixture
def make_acquirer(sleep):
    from models import Credentials
    from session import SessionAcquirer

    def _make(page: FakePage, email="user@example.com", password="hunter2"):
        acquirer = SessionAcquirer(Credentials(email, password), headless=True)
        acquirer.browser = FakeBrowserSession(page)
        acquirer.sleep = sleep
        acquirer.capture_timeout_ms = 200
        return acquirer
    return _make
