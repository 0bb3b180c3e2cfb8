import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root (parent of acquirer/)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)


def _getenv_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


TARGET_URL = os.getenv("SECTRAILS_URL", "https://securitytrails.com/app/account")
REFERER = os.getenv("SECTRAILS_REFERER", "https://www.google.com")
WAIT_UNTIL = "networkidle"

DEFAULT_EMAIL = os.getenv("SECTRAILS_EMAIL", "default")
DEFAULT_PASSWORD = os.getenv("SECTRAILS_PASSWORD", "default")

VERBOSE = os.getenv("ACQUIRE_VERBOSE", "").strip().lower() in ("1", "true", "yes", "on")

# Challenge page: active while the interstitial is shown and has not reported success
CHALLENGE_ACTIVE_JS = """
() => {
    const done = document.getElementById('challenge-success-text');
    if (done && (done.textContent || '').toLowerCase() === 'verification successful') {
        return false;
    }
    return document.querySelector('#challenge-running, #challenge-stage, #challenge-form') !== null;
}
"""
CHALLENGE_MAX_ATTEMPTS = _getenv_int("CHALLENGE_MAX_ATTEMPTS", 30)
CHALLENGE_INTERVAL_MS = _getenv_int("CHALLENGE_INTERVAL_MS", 1000)

EMAIL_SELECTOR = "#email"
PASSWORD_SELECTOR = "#password"
DASHBOARD_SELECTOR = 'button[name="account-menu"]'
INVALID_SELECTOR = "p.text-danger.text-center"
SEARCH_TOGGLE_SELECTOR = 'button[name="toggle-search"]'
SEARCH_INPUT_SELECTOR = "#search"

KEY_DELAY_MS = 120
WARMUP_TIMEOUT_MS = 5000
POST_CHALLENGE_DELAY_MS = 1000
EMAIL_PAUSE_MS = 200
PASSWORD_PAUSE_MS = 300
SETTLE_DELAY_MS = 3000
OUTCOME_TIMEOUT_MS = 1000
DASHBOARD_DELAY_MS = 3000
SEARCH_TOGGLE_DELAY_MS = 500
# Playwright's default action timeout; lookups the flow cannot do without
REQUIRED_TIMEOUT_MS = 30000

CAPTURE_MARKER = "/_next/data/"
CAPTURE_TIMEOUT_MS = _getenv_int("CAPTURE_TIMEOUT_MS", 30000)
TOKEN_SEGMENT_INDEX = 5

VIEWPORT = {"width": 1280, "height": 800}
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/129.0.0.0 Safari/537.36"
)
