# File: sarnadesign/tests/test_config_sarna.py
# Version: v0.1.0

"""
Parameter persistence (defaults, current file, atomic save).
"""

import pytest

from sarnadesign.app.config import config_sarna
from sarnadesign.app.core.sarna.parameters import SaRNADesignParameters


def test_defaults_file_matches_model():
    assert config_sarna.load_default_params() == SaRNADesignParameters()


def test_current_falls_back_then_persists(tmp_path, monkeypatch):
    monkeypatch.setattr(config_sarna, "CURRENT_FILE", tmp_path / "sarna_param.json")
    assert config_sarna.load_current_params() == SaRNADesignParameters()

    created, params = config_sarna.ensure_current_exists()
    assert created is True
    assert params.targetLength == 19

    config_sarna.save_current_params(SaRNADesignParameters(targetLength=23))
    assert config_sarna.load_current_params().targetLength == 23
    assert list(tmp_path.glob("*.tmp")) == []
    assert config_sarna.ensure_current_exists() == (False, SaRNADesignParameters(targetLength=23))


def test_load_params_file(tmp_path):
    p = tmp_path / "p.json"
    p.write_text('{"homopolymerRunLength": 5}', encoding="utf-8")
    params = config_sarna.load_params_file(p)
    assert params.homopolymerRunLength == 5
    assert params.targetLength == 19


def test_load_params_file_requires_existing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        config_sarna.load_params_file(tmp_path / "missing.json")
