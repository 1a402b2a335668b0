# File: sarnadesign/app/config/config_sarna.py
# Version: v0.2.0
"""
Storage for saRNA selection parameters.

Two JSON files live next to this module:
- sarna_param_default.json  shipped defaults, read-only
- sarna_param.json          editable copy behind GET/PUT /api/v1/sarna/parameters

v0.2.0:
- `load_params_file` reads a user-named file strictly: a missing file raises
  FileNotFoundError instead of silently yielding defaults.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Tuple

from sarnadesign.app.core.sarna.parameters import SaRNADesignParameters

CONFIG_DIR = Path(__file__).resolve().parent
DEFAULT_FILE = CONFIG_DIR / "sarna_param_default.json"
CURRENT_FILE = CONFIG_DIR / "sarna_param.json"


def load_params_file(path: Path) -> SaRNADesignParameters:
    """Parse and validate a parameters file named by the caller; it must exist."""
    return SaRNADesignParameters.model_validate_json(Path(path).read_text(encoding="utf-8"))


def _load_optional(path: Path) -> Optional[SaRNADesignParameters]:
    if not path.is_file():
        return None
    return load_params_file(path)


def load_default_params() -> SaRNADesignParameters:
    return _load_optional(DEFAULT_FILE) or SaRNADesignParameters()


def load_current_params() -> SaRNADesignParameters:
    """Stored parameters, or the shipped defaults when nothing was saved yet."""
    return _load_optional(CURRENT_FILE) or load_default_params()


def save_current_params(params: SaRNADesignParameters) -> None:
    """Replace sarna_param.json in one step (temp file in the same dir, then os.replace)."""
    target = CURRENT_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=target.name, suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(json.dumps(params.model_dump(), indent=2) + "\n")
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def ensure_current_exists() -> Tuple[bool, SaRNADesignParameters]:
    """Seed sarna_param.json from defaults on first use. Returns (created, params)."""
    current = _load_optional(CURRENT_FILE)
    if current is not None:
        return False, current
    params = load_default_params()
    save_current_params(params)
    return True, params
