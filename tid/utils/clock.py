# tid/utils/clock.py
"""Monotonic clock reading in nanoseconds.

Only the difference between two readings is meaningful; the epoch is
whatever the interpreter's performance counter uses.
"""
import time


def now_ns() -> int:
    return time.perf_counter_ns()
