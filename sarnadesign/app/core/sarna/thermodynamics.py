# File: sarnadesign/app/core/sarna/thermodynamics.py
# Version: v0.1.0
"""
Nearest-neighbor stability estimates for saRNA target ends.

Implements:
- Fixed ΔG table (kcal/mol) for single bases (terminal contributions) and
  ordered dinucleotides
- ΔG of a short subsequence: first base + every overlapping pair + last base
- Comparison of 5' vs 3' end stability of a target window

Table and method:
https://en.wikipedia.org/wiki/Nucleic_acid_thermodynamics#Nearest-neighbor_method
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .constants import STABILITY_END_LENGTH
from .errors import InvalidSymbolError

NN_DELTA_G: Mapping[str, float] = MappingProxyType({
    "AA": -4.26, "TT": -4.26,
    "AT": -3.67,
    "TA": -2.50,
    "CA": -6.12, "TG": -6.12,
    "GT": -6.09, "AC": -6.09,
    "AG": -5.40, "CT": -5.40,
    "GA": -5.51, "TC": -5.51,
    "CG": -9.07,
    "GC": -9.36,
    "GG": -7.66, "CC": -7.66,
    "A": 4.31, "T": 4.31,
    "G": 4.05, "C": 4.05,
})


def _lookup(key: str) -> float:
    try:
        return NN_DELTA_G[key]
    except KeyError:
        bad = next((c for c in key if c not in NN_DELTA_G), key)
        raise InvalidSymbolError(bad) from None


def delta_g(seq: str) -> float:
    """
    ΔG (kcal/mol) of `seq` by the nearest-neighbor sum.

    The first and last base contribute their single-base value once each,
    every adjacent pair contributes its dinucleotide value.
    """
    if not seq:
        return 0.0
    total = _lookup(seq[0])
    for i in range(len(seq) - 1):
        total += _lookup(seq[i : i + 2])
    total += _lookup(seq[-1])
    return total


def end_stabilities(window: str, end_len: int = STABILITY_END_LENGTH) -> Tuple[float, float]:
    """Return (ΔG of the first `end_len` bases, ΔG of the last `end_len` bases)."""
    return delta_g(window[:end_len]), delta_g(window[-end_len:])
