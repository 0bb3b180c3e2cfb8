from playwright.async_api import Locator

import config

# Typed like a user pressing Enter; the form is never submitted programmatically
SUBMIT_KEYS = "\r\n"


async def type_into(field: Locator, text: str, delay_ms: int = config.KEY_DELAY_MS) -> None:
    """Focus the field, then type one key at a time."""
    await field.focus()
    await field.press_sequentially(text, delay=delay_ms)


async def submit(field: Locator, delay_ms: int = config.KEY_DELAY_MS) -> None:
    await type_into(field, SUBMIT_KEYS, delay_ms)
