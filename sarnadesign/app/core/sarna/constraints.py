# File: sarnadesign/app/core/sarna/constraints.py
# Version: v0.1.0
"""
Composition predicates for saRNA target windows.

Includes:
- GC percentage and the 40-60 % acceptance band
- Homopolymer run detection
- Tri-repeat (AAA/TTT/GGG/CCC) counting
- Positional base checks
"""

from __future__ import annotations

from .constants import GC_MAX, GC_MIN, TRI_REPEATS


def gc_percent(seq: str) -> float:
    if not seq:
        return 0.0
    gc = seq.count("G") + seq.count("C")
    return 100.0 * gc / len(seq)


def gc_content_ok(window: str, gc_min: float = GC_MIN, gc_max: float = GC_MAX) -> bool:
    """True if the window's GC percentage lies in [gc_min, gc_max] inclusive."""
    return gc_min <= gc_percent(window) <= gc_max


def longest_homopolymer(seq: str) -> int:
    best = 0
    run = 0
    prev = ""
    for c in seq:
        if c == prev:
            run += 1
        else:
            run = 1
            prev = c
        if run > best:
            best = run
    return best


def has_long_run(window: str, run_length: int) -> bool:
    """Return True if any base repeats `run_length` or more times consecutively."""
    return longest_homopolymer(window) >= run_length


def count_tri_repeats(window: str) -> int:
    """
    Number of non-overlapping AAA/TTT/GGG/CCC occurrences.

    Each homopolymer is scanned left to right independently, a match skips
    past itself, so "AAAAAA" counts 2 and "AAAA" counts 1.
    """
    return sum(window.count(rep) for rep in TRI_REPEATS)


def base_at(window: str, index: int) -> str:
    if not 0 <= index < len(window):
        raise IndexError(f"index {index} out of range for window of length {len(window)}")
    return window[index]


def is_base_in(window: str, index: int, bases: str) -> bool:
    """True if the base at `index` is one of `bases` (e.g. "GC")."""
    return base_at(window, index) in bases
