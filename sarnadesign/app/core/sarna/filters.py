# File: sarnadesign/app/core/sarna/filters.py
# Version: v0.1.0
"""
Viability filter pipeline for saRNA target windows.

Stages run in a fixed order and stop at the first rejection:
1. gc          GC percentage within [40, 60]
2. homopolymer no run of `homopolymerRunLength` or more identical bases
3. stability   ΔG(first 4 bases) strictly below ΔG(last 4 bases)

A stage is a callable taking the window and returning "" when the window
passes, or a human-readable rejection reason.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple

from .constants import DEFAULT_HOMOPOLYMER_RUN_LENGTH, GC_MAX, GC_MIN, STABILITY_END_LENGTH
from .constraints import gc_content_ok, gc_percent, has_long_run
from .thermodynamics import end_stabilities

Stage = Tuple[str, Callable[[str], str]]


@dataclass(frozen=True)
class FilterResult:
    accepted: bool
    stage: str = ""
    reason: str = ""


def gc_stage(window: str) -> str:
    if gc_content_ok(window, GC_MIN, GC_MAX):
        return ""
    return f"GC {gc_percent(window):.1f}% not in [{GC_MIN:.1f},{GC_MAX:.1f}]"


def make_homopolymer_stage(run_length: int) -> Callable[[str], str]:
    def homopolymer_stage(window: str) -> str:
        if has_long_run(window, run_length):
            return f"homopolymer >= {run_length}"
        return ""
    return homopolymer_stage


def stability_stage(window: str) -> str:
    left, right = end_stabilities(window, STABILITY_END_LENGTH)
    if left < right:
        return ""
    return f"5' ΔG {left:.2f} >= 3' ΔG {right:.2f}"


def build_stages(run_length: int = DEFAULT_HOMOPOLYMER_RUN_LENGTH) -> List[Stage]:
    return [
        ("gc", gc_stage),
        ("homopolymer", make_homopolymer_stage(run_length)),
        ("stability", stability_stage),
    ]


def apply_filters(window: str, stages: List[Stage]) -> FilterResult:
    for name, check in stages:
        reason = check(window)
        if reason:
            return FilterResult(False, name, reason)
    return FilterResult(True)
