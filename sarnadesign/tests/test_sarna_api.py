# File: sarnadesign/tests/test_sarna_api.py
# Version: v0.1.0
"""
Tests for the saRNA API (targets + parameters).
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from sarnadesign.app.config import config_sarna
from sarnadesign.app.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def _isolated_params(tmp_path, monkeypatch):
    monkeypatch.setattr(config_sarna, "CURRENT_FILE", tmp_path / "sarna_param.json")


def test_targets_ok(periodic_sequence):
    r = client.post("/api/v1/sarna/targets", json={"sequence": periodic_sequence.lower()})
    assert r.status_code == 200
    data = r.json()
    assert data["targetLength"] == 19
    assert data["windowsScanned"] == 14
    assert data["accepted"] == 6
    assert [t["offset"] for t in data["targets"]] == [3, 7, 11, 2, 6, 10]
    assert data["targets"][0] == {"sequence": periodic_sequence[3:22], "flank": "ATGC", "rank": 17, "offset": 3}


def test_targets_too_short_is_400():
    r = client.post("/api/v1/sarna/targets", json={"sequence": "GCATGCAT"})
    assert r.status_code == 400
    assert "at least 19" in r.json()["detail"]


def test_targets_invalid_symbol_is_400(viable_target):
    r = client.post("/api/v1/sarna/targets", json={"sequence": viable_target + "XY"})
    assert r.status_code == 400


def test_targets_bad_parameters_is_422(viable_target):
    r = client.post(
        "/api/v1/sarna/targets",
        json={"sequence": viable_target, "parameters": {"targetLength": 2}},
    )
    assert r.status_code == 422


def test_parameters_roundtrip(viable_target):
    r = client.get("/api/v1/sarna/parameters")
    assert r.status_code == 200
    assert r.json() == {"targetLength": 19, "homopolymerRunLength": 4}
    assert config_sarna.CURRENT_FILE.exists()

    r = client.put("/api/v1/sarna/parameters", json={"targetLength": 25, "homopolymerRunLength": 3})
    assert r.status_code == 200
    assert client.get("/api/v1/sarna/parameters").json()["targetLength"] == 25

    # stored parameters now apply when the request omits them
    r = client.post("/api/v1/sarna/targets", json={"sequence": viable_target})
    assert r.status_code == 400
