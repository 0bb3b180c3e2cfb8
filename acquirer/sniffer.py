"""Capture of the first outbound request matching a URL marker."""

import asyncio
from typing import Optional
from playwright.async_api import Page, Request

import config
from console import trace
from errors import CaptureTimeout
from models import CapturedRequest, Cookie


def correlation_token(url: str, index: int = config.TOKEN_SEGMENT_INDEX) -> Optional[str]:
    """Slash-delimited segment of the URL, e.g. the build id in /_next/data/<id>/..."""
    segments = url.split("/")
    return segments[index] if len(segments) > index else None


class RequestSniffer:
    """
    Hands the first request whose URL contains ``marker`` to ``capture()``.

    The page callback is the only producer and puts into a queue of size 1;
    later matches are dropped. Any match seen after ``start()`` counts, whether
    or not the caller's own action caused it.
    """

    def __init__(self, page: Page, marker: str = config.CAPTURE_MARKER):
        self.page = page
        self.marker = marker
        self._slot: asyncio.Queue[Request] = asyncio.Queue(maxsize=1)
        self._matched = False

    def start(self) -> None:
        self.page.on("request", self._on_request)

    def stop(self) -> None:
        self.page.remove_listener("request", self._on_request)

    async def __aenter__(self) -> "RequestSniffer":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _on_request(self, request: Request) -> None:
        if self._matched or self.marker not in request.url:
            return
        self._matched = True
        trace(f"Captured request: {request.url}")
        self._slot.put_nowait(request)

    async def capture(self, timeout_ms: int = config.CAPTURE_TIMEOUT_MS) -> CapturedRequest:
        try:
            request = await asyncio.wait_for(self._slot.get(), timeout=timeout_ms / 1000)
        except asyncio.TimeoutError:
            raise CaptureTimeout(
                f"No request containing {self.marker!r} within {timeout_ms}ms"
            ) from None

        url = request.url
        cookies = await self.page.context.cookies(url)
        return CapturedRequest(
            url=url,
            headers=await request.all_headers(),
            cookies=[Cookie.model_validate(c) for c in cookies],
            unique=correlation_token(url),
        )
