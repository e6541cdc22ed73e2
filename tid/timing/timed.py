# tid/timing/timed.py
"""Block timing.

    with Timed("pushing some stuff"):
        v = []
        for i in range(100):
            v.append(i)
    q = v  # `v` is still reachable out here

prints ``[timed] pushing some stuff            0.0123ms`` once the block is done.
If the block raises, nothing is printed and the exception goes through as is.
"""
from __future__ import annotations

from typing import Callable, Optional, TypeVar

from tid.utils import clock as _clock
from tid.utils.report import emit_line, format_line, ns_to_ms

T = TypeVar("T")


def _check_label(label) -> None:
    if not isinstance(label, str):
        raise TypeError(f"label must be str, got {type(label).__name__}")


class Timed:
    def __init__(self, label: str, *, clock: Optional[Callable[[], int]] = None, file=None):
        _check_label(label)
        self.label = label
        self.clock = clock if clock is not None else _clock.now_ns
        self.file = file
        self.t0: Optional[int] = None
        self.elapsed_ns: Optional[int] = None  # set on successful exit

    def __enter__(self):
        self.elapsed_ns = None
        self.t0 = self.clock()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            return False
        t1 = self.clock()
        self.elapsed_ns = t1 - self.t0
        emit_line(format_line("timed", self.label, self.elapsed_ns), self.file)
        return False

    @property
    def elapsed_ms(self) -> Optional[float]:
        if self.elapsed_ns is None:
            return None
        return ns_to_ms(self.elapsed_ns)


def timed_call(label: str, fn: Callable[..., T], *args,
               clock: Optional[Callable[[], int]] = None, file=None, **kwargs) -> T:
    """Run ``fn(*args, **kwargs)`` under ``Timed(label)`` and return its result."""
    with Timed(label, clock=clock, file=file):
        result = fn(*args, **kwargs)
    return result
