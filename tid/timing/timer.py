# tid/timing/timer.py
"""Timing of several consecutive sections.

The first reading is taken when the Timer is built, every ``mark`` takes
another one, and ``present`` prints the gap between each pair next to the
label of the mark that closed it:

    t = Timer()
    f()
    t.mark("Doing f")
    g()
    t.mark("G is executed")
    t.present()

        [timer] Doing f                       0.1200ms
        [timer] G is executed                21.9812ms

``present`` is one-shot. A presented timer rejects further calls with
TimerError; build a new one to time again.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

import numpy as np

from tid.utils import clock as _clock
from tid.utils.report import emit_line, format_line

logger = logging.getLogger(__name__)


class TimerError(Exception):
    """Raised when a Timer is used after it has been presented."""


class Timer:
    def __init__(self, *, clock: Optional[Callable[[], int]] = None, file=None):
        self.clock = clock if clock is not None else _clock.now_ns
        self.file = file
        self._times: List[int] = [self.clock()]
        self._labels: List[str] = []
        self._presented = False

    # ------------------------------------------------------------------
    def _ensure_open(self, op: str) -> None:
        if self._presented:
            logger.debug("Timer.%s called after present()", op)
            raise TimerError(f"Timer has already been presented; cannot call .{op}(). Create a new Timer.")

    # ------------------------------------------------------------------
    def mark(self, label: str) -> None:
        """Mark off a section with the given label."""
        self._ensure_open("mark")
        if not isinstance(label, str):
            raise TypeError(f"label must be str, got {type(label).__name__}")
        self._times.append(self.clock())
        self._labels.append(label)

    # ------------------------------------------------------------------
    def present(self) -> None:
        """Print every section, in mark order. Terminal."""
        self._ensure_open("present")
        self._presented = True
        logger.debug("presenting %d marks", len(self._labels))
        if not self._labels:
            return
        diffs = np.diff(np.asarray(self._times, dtype=np.int64))
        for label, d in zip(self._labels, diffs):
            emit_line("\t" + format_line("timer", label, int(d)), self.file)

    # ------------------------------------------------------------------
    @property
    def presented(self) -> bool:
        return self._presented

    @property
    def timestamps(self) -> Tuple[int, ...]:
        return tuple(self._times)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(self._labels)
