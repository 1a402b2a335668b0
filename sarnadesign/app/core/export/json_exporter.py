# File: sarnadesign/app/core/export/json_exporter.py
# Version: v0.1.0

"""
Export ranked saRNA targets to a JSON file.
"""

import json
from pathlib import Path
from typing import Any, Dict, Sequence

from sarnadesign.app.core.sarna.designer import Candidate, DesignDiagnostics


def targets_payload(candidates: Sequence[Candidate],
                    diag: DesignDiagnostics,
                    target_length: int,
                    sequence_name: str = "") -> Dict[str, Any]:
    return {
        "sequence_name": sequence_name,
        "target_length": target_length,
        "windows_scanned": diag.windows_scanned,
        "accepted": diag.accepted,
        "rejected_by_stage": dict(diag.rejected_by_stage),
        "targets": [
            {"sequence": c.sequence, "flank": c.flank, "rank": c.rank, "offset": c.offset}
            for c in candidates
        ],
    }


def export_targets_to_json(candidates: Sequence[Candidate],
                           diag: DesignDiagnostics,
                           json_path: Path,
                           target_length: int,
                           sequence_name: str = "") -> Dict[str, Any]:
    """
    Write the ranked list (plus run counters) and return the payload.
    """
    payload = targets_payload(candidates, diag, target_length, sequence_name)
    json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return payload
