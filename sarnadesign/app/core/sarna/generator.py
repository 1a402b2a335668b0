# File: sarnadesign/app/core/sarna/generator.py
# Version: v0.1.0
"""
Sliding-window enumeration of saRNA target candidates.

Windows are fixed-length substrings taken at every offset from 0 to
len(sequence) - target_length inclusive, in ascending offset order.
"""

from __future__ import annotations

from typing import Iterator, Tuple


def window_count(sequence: str, target_length: int) -> int:
    return max(0, len(sequence) - target_length + 1)


def iter_windows(sequence: str, target_length: int, start: int = 0, stop: int | None = None) -> Iterator[Tuple[int, str]]:
    """Yield (offset, window) for offsets in [start, stop) that hold a full window."""
    last = window_count(sequence, target_length)
    stop = last if stop is None else min(stop, last)
    for i in range(max(0, start), stop):
        yield i, sequence[i : i + target_length]
