# File: sarnadesign/app/core/sarna/designer.py
# Version: v0.2.0
"""
saRNA target search & ranking.

What this file does
-------------------
- Validates the full sequence once (length >= targetLength, alphabet A/C/G/T).
- Slides a `targetLength` window over every offset, left to right.
- Runs the filter pipeline (filters.py); accepted windows are scored
  (scoring.py) and paired with their 4-base downstream flank.
- Returns candidates sorted by rank, best first. The sort is stable: equal
  ranks keep ascending offset order.
- Counts rejections per filter stage. With `collect_rows=True` it also keeps
  one diagnostics row per window (GC, end ΔG values, stage + reason).
- Surrounding whitespace is stripped; whitespace inside the sequence is an
  invalid symbol.

Coordinates
-----------
- `offset` is the 0-based start of the window in the input sequence.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .constants import NUCLEOTIDES
from .constraints import gc_percent
from .errors import InvalidSymbolError, SequenceTooShortError
from .filters import Stage, apply_filters, build_stages
from .generator import iter_windows, window_count
from .parameters import SaRNADesignParameters
from .scoring import ScoreBreakdown, flanking_context, score_window
from .thermodynamics import end_stabilities


# --- DTOs ----------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Candidate:
    sequence: str
    flank: str               # always 4 symbols, FLANK_SENTINEL where the sequence ended
    rank: int
    offset: int
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown, compare=False)


@dataclass
class CandidateRow:
    offset: int
    sequence: str
    gc: float
    dg_left: float
    dg_right: float
    rejected: bool
    stage: str
    reason: str


@dataclass
class DesignDiagnostics:
    rows: List[CandidateRow] = field(default_factory=list)
    windows_scanned: int = 0
    accepted: int = 0
    rejected_by_stage: Dict[str, int] = field(default_factory=dict)
    message: str = ""

    def merge(self, other: "DesignDiagnostics") -> None:
        self.rows.extend(other.rows)
        self.windows_scanned += other.windows_scanned
        self.accepted += other.accepted
        for k, v in other.rejected_by_stage.items():
            self.rejected_by_stage[k] = self.rejected_by_stage.get(k, 0) + v


# --- Validation ----------------------------------------------------------------------------------

def normalize_sequence(sequence: str) -> str:
    return sequence.strip().upper()


def validate_sequence(sequence: str, target_length: int) -> str:
    """Upper-case `sequence` and check it can hold a window of only A/C/G/T."""
    s = normalize_sequence(sequence)
    if len(s) < target_length:
        raise SequenceTooShortError(len(s), target_length)
    for pos, c in enumerate(s):
        if c not in NUCLEOTIDES:
            raise InvalidSymbolError(c, pos)
    return s


# --- Core ----------------------------------------------------------------------------------------

def evaluate_range(
    sequence: str,
    params: SaRNADesignParameters,
    start: int = 0,
    stop: Optional[int] = None,
    stages: Optional[List[Stage]] = None,
    logger: Optional[logging.Logger] = None,
    collect_rows: bool = False,
) -> Tuple[List[Candidate], DesignDiagnostics]:
    """
    Evaluate the windows at offsets [start, stop) of an already validated
    sequence. Candidates come back in offset order, unsorted.
    """
    log = logger or logging.getLogger(__name__)
    L = params.targetLength
    stages = stages or build_stages(params.homopolymerRunLength)
    diag = DesignDiagnostics()
    out: List[Candidate] = []

    for i, window in iter_windows(sequence, L, start, stop):
        diag.windows_scanned += 1
        result = apply_filters(window, stages)
        if collect_rows:
            dg_left, dg_right = end_stabilities(window)
            diag.rows.append(
                CandidateRow(i, window, gc_percent(window), dg_left, dg_right,
                             not result.accepted, result.stage, result.reason)
            )
        if not result.accepted:
            diag.rejected_by_stage[result.stage] = diag.rejected_by_stage.get(result.stage, 0) + 1
            log.debug("offset %d %s rejected (%s): %s", i, window, result.stage, result.reason)
            continue

        flank = flanking_context(sequence, i, L)
        breakdown = score_window(window, flank)
        out.append(Candidate(window, flank, breakdown.rank, i, breakdown))
        diag.accepted += 1

    return out, diag


def rank_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Best rank first; ties keep ascending offset order."""
    return sorted(candidates, key=lambda c: (-c.rank, c.offset))


def select_targets(
    sequence: str,
    params: Optional[SaRNADesignParameters] = None,
    logger: Optional[logging.Logger] = None,
    collect_rows: bool = False,
) -> Tuple[List[Candidate], DesignDiagnostics]:
    """
    Entry point: validate, scan every offset, filter, score, rank.

    Raises:
        SequenceTooShortError: fewer bases than `targetLength`.
        InvalidSymbolError: any symbol outside A/C/G/T.
    """
    log = logger or logging.getLogger(__name__)
    p = params or SaRNADesignParameters()
    s = validate_sequence(sequence, p.targetLength)

    candidates, diag = evaluate_range(s, p, logger=log, collect_rows=collect_rows)
    ranked = rank_candidates(candidates)
    diag.message = summarize(diag, window_count(s, p.targetLength))
    log.info(diag.message)
    return ranked, diag


def summarize(diag: DesignDiagnostics, total_windows: int) -> str:
    rejected = ", ".join(f"{k} x{v}" for k, v in sorted(diag.rejected_by_stage.items())) or "none"
    return f"Scanned {total_windows} windows: {diag.accepted} accepted; rejected: {rejected}"
