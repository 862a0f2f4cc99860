"""
Console output helpers.

Every message is one line with a bracketed level prefix:
[info], [warn], [error], [ok].
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator


def info(msg: str) -> None:
    """Print an info message."""
    print(f"[info] {msg}")


def warn(msg: str) -> None:
    """Print a warning message."""
    print(f"[warn] {msg}")


def error(msg: str) -> None:
    """Print an error message."""
    print(f"[error] {msg}")


def ok(msg: str) -> None:
    """Print a success message."""
    print(f"[ok] {msg}")


@contextmanager
def timed(label: str) -> Iterator[None]:
    """
    Report how long the wrapped block took, e.g. '[info] Import: 0.42s'.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        info(f"{label}: {time.perf_counter() - start:.2f}s")
