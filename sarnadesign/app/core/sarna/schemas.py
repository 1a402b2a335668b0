# File: sarnadesign/app/core/sarna/schemas.py
# Version: v0.1.0
"""
DTOs for requests and responses used by saRNA endpoints.

`TargetSelectionRequest.parameters` is optional. If omitted, the backend uses
the currently stored parameters (sarnadesign/app/config/sarna_param.json,
with fallback to defaults).
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, constr

from .parameters import SaRNADesignParameters


class TargetSelectionRequest(BaseModel):
    """Request to select saRNA targets along a sequence."""
    sequence: constr(strip_whitespace=True, min_length=1) = Field(
        ..., description="Full nucleotide sequence (A/C/G/T, case-insensitive)."
    )
    parameters: Optional[SaRNADesignParameters] = None


class TargetRecord(BaseModel):
    """One ranked target."""
    sequence: str
    flank: str = Field(..., description="4 downstream bases, '-' where the sequence ended.")
    rank: int
    offset: int = Field(..., ge=0, description="0-based start of the target.")


class TargetSelectionResponse(BaseModel):
    targetLength: int
    windowsScanned: int
    accepted: int
    rejectedByStage: Dict[str, int] = Field(default_factory=dict)
    targets: List[TargetRecord] = Field(default_factory=list)
