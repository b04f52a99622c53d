"""Clock-derived identifiers.

New products, blog posts and variant options are keyed by the creation
time in milliseconds; notifications are keyed in nanoseconds so that
two messages shown in the same millisecond are still distinguishable.
"""

from __future__ import annotations

import time
from collections.abc import Callable


class MonotonicIdGenerator:
    """Hands out strictly increasing ids derived from a nanosecond clock.

    If the clock stalls or steps backwards the previous id is bumped by
    one instead, so ids never repeat within a process.
    """

    def __init__(self, clock_ns: Callable[[], int] = time.time_ns, divisor: int = 1) -> None:
        self._clock_ns = clock_ns
        self._divisor = divisor
        self._last = 0

    def next_id(self) -> int:
        candidate = self._clock_ns() // self._divisor
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate


def millisecond_ids(clock_ns: Callable[[], int] = time.time_ns) -> MonotonicIdGenerator:
    return MonotonicIdGenerator(clock_ns, divisor=1_000_000)


def nanosecond_ids(clock_ns: Callable[[], int] = time.time_ns) -> MonotonicIdGenerator:
    return MonotonicIdGenerator(clock_ns)
