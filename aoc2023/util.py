"""Shared helpers: reading puzzle input, timing solutions and number utilities."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Iterable
from os import PathLike

logger = logging.getLogger(__name__)


def read_input(path: str | PathLike[str] = "input") -> list[str]:
    """Return the lines of a text file, without line terminators.

    Lines are split on ``\\n``; a trailing ``\\r`` on a line is dropped.
    A final newline does not produce an extra empty line.
    """
    with open(path, encoding="utf-8", newline="\n") as handle:
        lines = []
        for raw in handle:
            line = raw[:-1] if raw.endswith("\n") else raw
            if line.endswith("\r"):
                line = line[:-1]
            lines.append(line)
    return lines


def timed(name: str, action: Callable[[], int]) -> int:
    """Run ``action``, log its result and running time, and return the result."""
    start = time.perf_counter()
    result = action()
    elapsed = time.perf_counter() - start
    logger.info("%s() result: %d, execution time: %.6fs", name, result, elapsed)
    return result


def lcm(numbers: Iterable[int]) -> int:
    """Least common multiple of all numbers; 1 for an empty iterable."""
    return math.lcm(*numbers)