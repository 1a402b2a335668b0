# File: sarnadesign/app/core/sarna/batch.py
# Version: v0.2.0
"""
Parallel saRNA target selection on top of designer.py.

Goals:
- Split the offset range into contiguous chunks and evaluate them on threads.
- Merge chunk results and apply the same (-rank, offset) ordering as the
  sequential path, so both paths return identical lists.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .designer import (
    Candidate,
    DesignDiagnostics,
    evaluate_range,
    rank_candidates,
    summarize,
    validate_sequence,
)
from .filters import build_stages
from .generator import window_count
from .parameters import SaRNADesignParameters


@dataclass(slots=True)
class BatchOptions:
    """Controls parallelism and chunking."""
    workers: int = 0           # 0/None → auto = min(32, os.cpu_count() or 1)
    chunk_size: int = 4096     # offsets per task


def _auto_workers(workers: int | None) -> int:
    if workers and workers > 0:
        return workers
    return max(1, min(32, os.cpu_count() or 1))


def _offset_chunks(n: int, size: int) -> Iterable[Tuple[int, int]]:
    if size <= 0:
        size = max(1, n)
    for i in range(0, n, size):
        yield i, min(n, i + size)


def select_targets_parallel(
    sequence: str,
    params: Optional[SaRNADesignParameters] = None,
    *,
    options: BatchOptions | None = None,
    logger: Optional[logging.Logger] = None,
    collect_rows: bool = False,
) -> Tuple[List[Candidate], DesignDiagnostics]:
    """
    Same contract as designer.select_targets, evaluated across worker threads.
    """
    log = logger or logging.getLogger(__name__)
    opts = options or BatchOptions()
    p = params or SaRNADesignParameters()
    s = validate_sequence(sequence, p.targetLength)
    n = window_count(s, p.targetLength)
    stages = build_stages(p.homopolymerRunLength)
    workers = _auto_workers(opts.workers)

    # Single-thread fast path
    if workers == 1 or n <= opts.chunk_size:
        candidates, diag = evaluate_range(s, p, stages=stages, logger=log, collect_rows=collect_rows)
    else:
        candidates = []
        diag = DesignDiagnostics()
        with ThreadPoolExecutor(max_workers=workers) as ex:
            futs = [
                ex.submit(evaluate_range, s, p, lo, hi, stages, log, collect_rows)
                for lo, hi in _offset_chunks(n, opts.chunk_size)
            ]
            # Collect in submission order so diagnostics rows stay offset-ordered
            for f in futs:
                part, part_diag = f.result()
                candidates.extend(part)
                diag.merge(part_diag)

    ranked = rank_candidates(candidates)
    diag.message = summarize(diag, n)
    log.info("%s (workers=%d)", diag.message, workers)
    return ranked, diag
