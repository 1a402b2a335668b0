# File: sarnadesign/app/api/v1/sarna.py
# Version: v0.1.0
"""
saRNA endpoints:
- POST /v1/sarna/targets     ← ranked targets for a sequence
- GET  /v1/sarna/parameters  ← returns current selection parameters
- PUT  /v1/sarna/parameters  ← validates & persists new parameters
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from sarnadesign.app.config.config_sarna import ensure_current_exists, load_current_params, save_current_params
from sarnadesign.app.core.config import settings
from sarnadesign.app.core.sarna.batch import BatchOptions, select_targets_parallel
from sarnadesign.app.core.sarna.errors import SaRNADesignError
from sarnadesign.app.core.sarna.parameters import SaRNADesignParameters
from sarnadesign.app.core.sarna.schemas import TargetRecord, TargetSelectionRequest, TargetSelectionResponse

log = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/sarna", tags=["sarna"])


@router.get("/parameters", response_model=SaRNADesignParameters)
def get_parameters():
    """
    Return the current editable parameters.
    If not initialized, create sarna_param.json from defaults and return it.
    """
    _, params = ensure_current_exists()
    return params


@router.put("/parameters", response_model=SaRNADesignParameters)
def update_parameters(payload: SaRNADesignParameters):
    """Validate and persist new parameters into sarna_param.json."""
    save_current_params(payload)
    return payload


@router.post("/targets", response_model=TargetSelectionResponse)
def select_targets_endpoint(payload: TargetSelectionRequest) -> TargetSelectionResponse:
    """
    Slide a targetLength window over the sequence, filter, score and return
    the survivors best-first. If `parameters` is omitted, the stored
    parameters are used.
    """
    params = payload.parameters or load_current_params()
    try:
        ranked, diag = select_targets_parallel(
            payload.sequence,
            params,
            options=BatchOptions(workers=settings.BATCH_WORKERS),
            logger=log,
        )
    except SaRNADesignError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return TargetSelectionResponse(
        targetLength=params.targetLength,
        windowsScanned=diag.windows_scanned,
        accepted=diag.accepted,
        rejectedByStage=diag.rejected_by_stage,
        targets=[TargetRecord(sequence=c.sequence, flank=c.flank, rank=c.rank, offset=c.offset) for c in ranked],
    )
