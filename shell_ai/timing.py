"""
Timing and debug helpers.

Timestamped status lines and a context manager for timing steps, both
silent unless DEBUG_TIMING is set. Output goes to stderr so stdout only
ever carries the completion.
"""

from __future__ import annotations

import datetime as dt
import sys
import time
from contextlib import contextmanager

PREFIX = "shell-ai"
DEBUG_TIMING: bool = False
START_TS: float = time.perf_counter()


def _now_str() -> str:
    return dt.datetime.now().strftime("%H:%M:%S")


def _elapsed() -> str:
    return f"{time.perf_counter() - START_TS:.1f}s"


def status(msg: str) -> None:
    """Timestamped, prefixed status line on stderr (debug only)."""
    if not DEBUG_TIMING:
        return
    print(f"{PREFIX} [{_now_str()} +{_elapsed():>6}] {msg}", file=sys.stderr, flush=True)


@contextmanager
def step(msg: str):
    """Timed step context manager (debug only)."""
    if not DEBUG_TIMING:
        yield
        return
    t0 = time.perf_counter()
    status(f"{msg} …")
    try:
        yield
    finally:
        dt_s = time.perf_counter() - t0
        status(f"{msg} ✓ ({dt_s:.1f}s)")
