# File: sarnadesign/app/core/sarna/scoring.py
# Version: v0.1.0
"""
Integer rank for accepted saRNA target windows.

Higher is better. Components:
- +10 if the 1st base is G or C
- +10 if the 2nd base is G or C
- +10 if the second-to-last base is A or T
- +10 if the last base is A, +9 if it is T
- -10 per tri-repeat (non-overlapping AAA/TTT/GGG/CCC)
- +4/+3/+2/+1 for an A or T at downstream flank positions 1..4 (only the
  positions that exist in the full sequence)
"""

from __future__ import annotations

from dataclasses import dataclass

from . import constants as C
from .constraints import count_tri_repeats, is_base_in


@dataclass(frozen=True)
class ScoreBreakdown:
    first_gc: int = 0
    second_gc: int = 0
    penultimate_at: int = 0
    last_base: int = 0
    tri_repeat_penalty: int = 0
    flank_bonus: int = 0

    @property
    def rank(self) -> int:
        return (
            self.first_gc
            + self.second_gc
            + self.penultimate_at
            + self.last_base
            - self.tri_repeat_penalty
            + self.flank_bonus
        )


def flanking_bases(sequence: str, offset: int, target_length: int) -> str:
    """Up to FLANK_LENGTH bases right after the window (unpadded)."""
    start = offset + target_length
    return sequence[start : start + C.FLANK_LENGTH]


def flanking_context(sequence: str, offset: int, target_length: int) -> str:
    """Downstream flank padded with FLANK_SENTINEL to exactly FLANK_LENGTH symbols."""
    return flanking_bases(sequence, offset, target_length).ljust(C.FLANK_LENGTH, C.FLANK_SENTINEL)


def flank_bonus(flank: str) -> int:
    bonus = 0
    for k, base in enumerate(flank, start=1):
        if base in "AT":
            bonus += C.FLANK_BONUS_BASE - k
    return bonus


def score_window(window: str, flank: str = "") -> ScoreBreakdown:
    """
    Score an accepted window. `flank` is the downstream context; sentinel
    positions never match A/T and contribute nothing.
    """
    L = len(window)
    if is_base_in(window, L - 1, "A"):
        last = C.BONUS_LAST_A
    elif is_base_in(window, L - 1, "T"):
        last = C.BONUS_LAST_T
    else:
        last = 0
    return ScoreBreakdown(
        first_gc=C.BONUS_FIRST_GC if is_base_in(window, 0, "GC") else 0,
        second_gc=C.BONUS_SECOND_GC if is_base_in(window, 1, "GC") else 0,
        penultimate_at=C.BONUS_PENULTIMATE_AT if is_base_in(window, L - 2, "AT") else 0,
        last_base=last,
        tri_repeat_penalty=C.PENALTY_TRI_REPEAT * count_tri_repeats(window),
        flank_bonus=flank_bonus(flank[: C.FLANK_LENGTH]),
    )
