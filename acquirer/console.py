import sys

import config
from models import Failure


def trace(message: str) -> None:
    """Progress line on stderr, only when ACQUIRE_VERBOSE is set."""
    if config.VERBOSE:
        print(message, file=sys.stderr, flush=True)


def report_failure(failure: Failure) -> None:
    print(failure.diagnostic(), file=sys.stderr, flush=True)
