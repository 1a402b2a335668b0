# File: sarnadesign/app/core/export/fasta_exporter.py
# Version: v0.1.0

"""
FASTA export for ranked saRNA targets.

ID: <name>_t<position>_<offset>  description: rank=<rank> flank=<flank>
"""

from pathlib import Path
from typing import List, Sequence

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from sarnadesign.app.core.sarna.designer import Candidate


def export_targets_to_fasta(candidates: Sequence[Candidate],
                            fasta_path: Path,
                            name: str = "sarna") -> int:
    records: List[SeqRecord] = []
    for n, c in enumerate(candidates, start=1):
        rid = f"{name}_t{n}_{c.offset}"
        records.append(SeqRecord(Seq(c.sequence), id=rid, description=f"rank={c.rank} flank={c.flank}"))
    return SeqIO.write(records, fasta_path, "fasta")
