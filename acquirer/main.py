import asyncio
import argparse
import sys

import config
from console import report_failure
from models import Credentials, Failure
from session import SessionAcquirer


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Acquire a SecurityTrails web session")
    parser.add_argument("email", nargs="?", default=config.DEFAULT_EMAIL)
    parser.add_argument("password", nargs="?", default=config.DEFAULT_PASSWORD)
    parser.add_argument(
        "mode",
        nargs="?",
        default="",
        help="'headless' to run without a visible browser window",
    )
    return parser.parse_args(argv)


async def acquire(credentials: Credentials, headless: bool = False):
    return await SessionAcquirer(credentials, headless=headless).run()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    credentials = Credentials(email=args.email, password=args.password)

    result = asyncio.run(acquire(credentials, headless=args.mode == "headless"))

    if isinstance(result, Failure):
        report_failure(result)
        return 1
    print(result.to_json(), flush=True)
    return 0


def run() -> None:
    # Force unbuffered output
    sys.stdout.reconfigure(line_buffering=True)
    sys.stderr.reconfigure(line_buffering=True)
    sys.exit(main())


if __name__ == "__main__":
    run()
