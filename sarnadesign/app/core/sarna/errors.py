# File: sarnadesign/app/core/sarna/errors.py
# Version: v0.1.0
"""
Exceptions raised by the saRNA target subsystem.

All of them are permanent input-validation failures; a rejected window is
normal control flow and never raises.
"""

from __future__ import annotations


class SaRNADesignError(ValueError):
    """Base class for saRNA target selection failures."""


class SequenceTooShortError(SaRNADesignError):
    def __init__(self, length: int, target_length: int):
        self.length = length
        self.target_length = target_length
        super().__init__(f"saRNA must contain at least {target_length} nucleotides! (got {length})")


class InvalidSymbolError(SaRNADesignError):
    def __init__(self, symbol: str, position: int | None = None):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid nucleotide {symbol!r}{where}; expected one of A, C, G, T")
