import sys

from porthole.core.config import Settings


def fatal(message: str) -> None:
    print(f"[FATAL] {message}", file=sys.stderr)


def debug(settings: Settings, message: str) -> None:
    if settings.VERBOSE:
        print(f"[DEBUG] {message}", file=sys.stderr)
