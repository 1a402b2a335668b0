# File: sarnadesign/app/core/export/csv_exporter.py
# Version: v0.1.0
"""
CSV exporters for ranked saRNA targets and per-window diagnostics.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List, Sequence

from sarnadesign.app.core.sarna.designer import Candidate, DesignDiagnostics


def _row(position: int, c: Candidate) -> Dict[str, str]:
    b = c.breakdown
    return {
        "position": str(position),
        "rank": str(c.rank),
        "offset": str(c.offset),
        "sequence": c.sequence,
        "flank": c.flank,
        "first_gc": str(b.first_gc),
        "second_gc": str(b.second_gc),
        "penultimate_at": str(b.penultimate_at),
        "last_base": str(b.last_base),
        "tri_repeat_penalty": str(b.tri_repeat_penalty),
        "flank_bonus": str(b.flank_bonus),
    }


def export_targets_to_csv(candidates: Sequence[Candidate], csv_path: Path) -> Path:
    """Write targets.csv in the given (ranked) order, one row per target with its score breakdown."""
    rows: List[Dict[str, str]] = [_row(n, c) for n, c in enumerate(candidates, start=1)]
    headers = list(_row(0, Candidate("", "", 0, 0)).keys())
    with csv_path.open("w", newline="", encoding="utf-8") as fh:
        w = csv.DictWriter(fh, fieldnames=headers)
        w.writeheader()
        w.writerows(rows)
    return csv_path


def export_diagnostics_to_csv(diag: DesignDiagnostics, csv_path: Path) -> Path:
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["offset", "gc", "dg_left", "dg_right", "rejected", "stage", "reason", "seq"])
        for row in diag.rows:
            w.writerow([
                row.offset, f"{row.gc:.2f}", f"{row.dg_left:.2f}", f"{row.dg_right:.2f}",
                row.rejected, row.stage, row.reason, row.sequence,
            ])
    return csv_path
