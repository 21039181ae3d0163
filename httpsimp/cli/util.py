"""
Argument helpers and interrupt handling for the CLI.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import signal
import sys
from typing import Any

CANCELLED_EXIT = 130  # POSIX: 128 + SIGINT (2)


def parse_pairs(items: Iterable[str] | None, sep: str) -> dict[str, list[str]]:
    """Parse repeated "key<sep>value" arguments, keeping repeated keys as lists.

    Raises ValueError on an item without the separator.
    """
    pairs: dict[str, list[str]] = {}
    for item in items or ():
        key, found, value = item.partition(sep)
        if not found or not key.strip():
            raise ValueError(f"expected KEY{sep}VALUE, got {item!r}")
        pairs.setdefault(key.strip(), []).append(value.strip() if sep == ":" else value)
    return pairs


def parse_headers(items: Iterable[str] | None) -> dict[str, str]:
    """Parse repeated "Name: value" arguments; later values for a name win."""
    return {name: values[-1] for name, values in parse_pairs(items, ":").items()}


def graceful_main(fn: Callable[[list[str]], int], argv: list[str]) -> int:
    """
    Run fn(argv), turning Ctrl-C and SIGTERM into a quiet exit.

    Returns:
        Exit code (130 for cancelled, or fn's return value)
    """

    def _term(_signum: int, _frame: Any) -> None:
        raise KeyboardInterrupt()

    old_term = signal.getsignal(signal.SIGTERM)
    signal.signal(signal.SIGTERM, _term)

    try:
        return int(fn(argv) or 0)
    except KeyboardInterrupt:
        sys.stderr.write("\n✖ Cancelled by user\n")
        sys.stderr.flush()
        return CANCELLED_EXIT
    finally:
        signal.signal(signal.SIGTERM, old_term)
