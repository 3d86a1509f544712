"""Inclusive random ranges."""

from __future__ import annotations

import random

_generator = random.Random()


def range_float(start: float, end: float) -> float:
    """A random float between start and end."""
    if start == end:
        return start
    return _generator.uniform(start, end)


def range_int(start: int, end: int) -> int:
    """A random integer between start and end, both included."""
    if start == end:
        return start
    return _generator.randint(start, end)