"""Millisecond clock and a sleep that is accurate to the millisecond."""

from __future__ import annotations

import time

_POLL_INTERVAL = 0.0005


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def precise_sleep(milliseconds: int) -> None:
    """Block for at least ``milliseconds``, waking every half millisecond to check."""
    start = current_time_ms()
    while current_time_ms() - start < milliseconds:
        time.sleep(_POLL_INTERVAL)