# File: sarnadesign/app/core/sarna/parameters.py
# Version: v0.1.0
"""
Pydantic model for saRNA target selection parameters (camelCase keys).

Only the target length and the homopolymer run threshold are tunable; GC
bounds, scoring weights and the ΔG table are fixed (see constants.py).

Usage:
    from sarnadesign.app.core.sarna.parameters import SaRNADesignParameters
"""

from __future__ import annotations

from pydantic import BaseModel, Field, conint

from .constants import DEFAULT_HOMOPOLYMER_RUN_LENGTH, DEFAULT_TARGET_LENGTH, STABILITY_END_LENGTH


class SaRNADesignParameters(BaseModel):
    targetLength: conint(ge=STABILITY_END_LENGTH) = Field(
        DEFAULT_TARGET_LENGTH, description="Length of each target window (nt)"
    )
    homopolymerRunLength: conint(ge=2) = Field(
        DEFAULT_HOMOPOLYMER_RUN_LENGTH,
        description="Reject windows with a run of this many (or more) identical bases",
    )
