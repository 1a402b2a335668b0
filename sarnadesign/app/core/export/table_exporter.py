# File: sarnadesign/app/core/export/table_exporter.py
# Version: v0.1.0
"""
Plain-text listing of ranked targets: "<target>   <flank>   <rank>" per line.
"""

from __future__ import annotations

from typing import Iterable, Iterator, TextIO

from sarnadesign.app.core.sarna.designer import Candidate

COLUMN_SEP = "   "


def format_targets(candidates: Iterable[Candidate]) -> Iterator[str]:
    for c in candidates:
        yield f"{c.sequence}{COLUMN_SEP}{c.flank}{COLUMN_SEP}{c.rank}"


def write_targets(candidates: Iterable[Candidate], out: TextIO) -> None:
    for line in format_targets(candidates):
        out.write(line + "\n")
