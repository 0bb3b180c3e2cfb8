import os
from urllib.parse import urlparse
from playwright.async_api import async_playwright, Page, Browser, BrowserContext

import config
from console import trace
from models import NavigationOptions

LAUNCH_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--no-first-run",
    "--no-default-browser-check",
]

# Runs before any page script so the challenge sees a regular browser
STEALTH_JS = """
    Object.defineProperty(navigator, 'webdriver', {get: () => undefined});
    Object.defineProperty(navigator, 'languages', {get: () => ['en-US', 'en']});
    window.chrome = window.chrome || {runtime: {}};
"""


def _proxy_from_env() -> dict | None:
    proxy_url = (os.environ.get("HTTPS_PROXY") or os.environ.get("HTTP_PROXY")
                 or os.environ.get("https_proxy") or os.environ.get("http_proxy"))
    if not proxy_url:
        return None
    parsed = urlparse(proxy_url)
    server = f"{parsed.scheme}://{parsed.hostname}"
    if parsed.port:
        server += f":{parsed.port}"
    proxy = {"server": server}
    if parsed.username:
        proxy["username"] = parsed.username
        proxy["password"] = parsed.password or ""
    return proxy


class BrowserSession:
    """The one browser and page used by an acquisition attempt."""

    def __init__(self):
        self.browser: Browser | None = None
        self.context: BrowserContext | None = None
        self.page: Page | None = None
        self.playwright = None

    async def start(self, headless: bool = False) -> Page:
        """Launch chromium with anti-detection settings and open a page."""
        if self.page is not None:
            raise RuntimeError("Browser session already started")
        self.playwright = await async_playwright().start()

        launch_kwargs = {"headless": headless, "args": LAUNCH_ARGS}
        proxy = _proxy_from_env()
        if proxy:
            launch_kwargs["proxy"] = proxy

        self.browser = await self.playwright.chromium.launch(**launch_kwargs)
        self.context = await self.browser.new_context(
            viewport=config.VIEWPORT,
            user_agent=config.USER_AGENT,
            locale="en-US",
        )
        await self.context.add_init_script(STEALTH_JS)
        self.page = await self.context.new_page()
        trace(f"Browser started (headless={headless})")
        return self.page

    async def goto(self, url: str, options: NavigationOptions) -> None:
        await self.page.goto(url, referer=options.referer, wait_until=options.wait_until)

    async def stop(self) -> None:
        """Close browser and driver."""
        if self.browser:
            await self.browser.close()
        if self.playwright:
            await self.playwright.stop()
        self.browser = None
        self.context = None
        self.page = None
        self.playwright = None
