# File: sarnadesign/app/core/sarna/constants.py
# Version: v0.1.0
"""
Constants and defaults for the saRNA target subsystem.

Only the target length and the homopolymer run threshold are tunable
(see parameters.py). Everything else here is a fixed part of the rule set.
"""

from __future__ import annotations

NUCLEOTIDES = frozenset("ATGC")

DEFAULT_TARGET_LENGTH = 19
DEFAULT_HOMOPOLYMER_RUN_LENGTH = 4

GC_MIN = 40.0
GC_MAX = 60.0

# ΔG is compared between the first and the last STABILITY_END_LENGTH bases
STABILITY_END_LENGTH = 4

FLANK_LENGTH = 4
FLANK_SENTINEL = "-"

TRI_REPEATS = ("AAA", "TTT", "GGG", "CCC")

# Rank weights
BONUS_FIRST_GC = 10
BONUS_SECOND_GC = 10
BONUS_PENULTIMATE_AT = 10
BONUS_LAST_A = 10
BONUS_LAST_T = 9
PENALTY_TRI_REPEAT = 10
# Flank position k (1-based, downstream of the target) earns FLANK_BONUS_BASE - k
FLANK_BONUS_BASE = 5
