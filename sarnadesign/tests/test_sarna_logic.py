# File: sarnadesign/tests/test_sarna_logic.py
# Version: v0.1.0
"""
Unit tests for the saRNA subsystem:
- thermodynamics (ΔG table, nearest-neighbor sum)
- constraints (GC band, homopolymer runs, tri-repeats, positional checks)
- filter pipeline order and reasons
- scoring (positional bonuses, tri-repeat penalty, flank bonus)
"""

from __future__ import annotations

import math

import pytest

from sarnadesign.app.core.sarna.constraints import (
    base_at,
    count_tri_repeats,
    gc_content_ok,
    gc_percent,
    has_long_run,
    is_base_in,
)
from sarnadesign.app.core.sarna.errors import InvalidSymbolError
from sarnadesign.app.core.sarna.filters import apply_filters, build_stages, stability_stage
from sarnadesign.app.core.sarna.scoring import flank_bonus, flanking_context, score_window
from sarnadesign.app.core.sarna.thermodynamics import NN_DELTA_G, delta_g, end_stabilities


def test_delta_g_table_values():
    assert NN_DELTA_G["AA"] == NN_DELTA_G["TT"] == -4.26
    assert NN_DELTA_G["GC"] == -9.36
    assert NN_DELTA_G["CG"] == -9.07
    assert NN_DELTA_G["A"] == NN_DELTA_G["T"] == 4.31
    assert NN_DELTA_G["G"] == NN_DELTA_G["C"] == 4.05
    with pytest.raises(TypeError):
        NN_DELTA_G["AA"] = 0.0  # type: ignore[index]


def test_delta_g_nearest_neighbor_sum():
    assert math.isclose(delta_g("GCGC"), 4.05 - 9.36 - 9.07 - 9.36 + 4.05)
    assert math.isclose(delta_g("TATA"), -0.05, abs_tol=1e-9)
    assert math.isclose(delta_g("A"), 8.62)


def test_delta_g_rejects_unknown_symbol():
    with pytest.raises(InvalidSymbolError):
        delta_g("ACNT")


def test_end_stabilities(viable_target):
    left, right = end_stabilities(viable_target)
    assert math.isclose(left, delta_g("GCGC"))
    assert math.isclose(right, delta_g("TATA"))
    assert left < right


def test_gc_band_uses_window_length():
    assert math.isclose(gc_percent("ATGC"), 50.0)
    assert not gc_content_ok("G" * 7 + "A" * 12)   # 36.8 %
    assert gc_content_ok("G" * 8 + "A" * 11)       # 42.1 %
    assert gc_content_ok("G" * 11 + "A" * 8)       # 57.9 %
    assert not gc_content_ok("G" * 12 + "A" * 7)   # 63.2 %
    assert gc_content_ok("GCAT")                   # 50 % of a 4-mer
    assert gc_content_ok("G" * 8 + "A" * 12)       # exactly 40 %
    assert gc_content_ok("G" * 6 + "A" * 4)        # exactly 60 %


def test_long_runs():
    assert has_long_run("ATTTTG", 4)
    assert has_long_run("CCCCC", 4)
    assert not has_long_run("ATTTG", 4)
    assert has_long_run("ATTTG", 3)


def test_tri_repeats_non_overlapping():
    assert count_tri_repeats("GCATGC") == 0
    assert count_tri_repeats("AAAA") == 1
    assert count_tri_repeats("AAAAAA") == 2
    assert count_tri_repeats("AAATTTGGGCCC") == 4
    assert count_tri_repeats("GAAAGAAAG") == 2


def test_positional_checks():
    assert base_at("GCAT", 0) == "G"
    assert is_base_in("GCAT", 3, "AT")
    assert not is_base_in("GCAT", 1, "AT")
    with pytest.raises(IndexError):
        base_at("GCAT", 4)


def test_filter_order_and_reasons(viable_target):
    stages = build_stages(4)
    assert [name for name, _ in stages] == ["gc", "homopolymer", "stability"]
    assert apply_filters(viable_target, stages).accepted

    low_gc = apply_filters("AT" * 9 + "A", stages)
    assert (low_gc.accepted, low_gc.stage) == (False, "gc")

    run = apply_filters("GCGCAAAATGCGCTGTATA", stages)
    assert (run.accepted, run.stage) == (False, "homopolymer")

    flipped = apply_filters(viable_target[::-1], stages)
    assert (flipped.accepted, flipped.stage) == (False, "stability")


def test_stability_rejects_equal_ends():
    # identical 4-base ends give equal ΔG, which is not strictly lower
    assert stability_stage("GCATCGATCGATCAGGCAT")


def test_score_positional_bonuses(viable_target):
    b = score_window(viable_target)
    assert (b.first_gc, b.second_gc, b.penultimate_at, b.last_base) == (10, 10, 10, 10)
    assert b.tri_repeat_penalty == 0
    assert b.flank_bonus == 0
    assert b.rank == 40


def test_score_last_base_t():
    b = score_window("GCGCATGCATGCATGTAAT")
    assert b.last_base == 9
    assert b.penultimate_at == 10


def test_tri_repeat_costs_exactly_ten(viable_target):
    with_repeat = "GCGCAAAGCATGCTGTATA"
    assert count_tri_repeats(with_repeat) == 1
    assert score_window(viable_target).rank - score_window(with_repeat).rank == 10


def test_flank_bonus_and_context():
    assert flank_bonus("AAAA") == 4 + 3 + 2 + 1
    assert flank_bonus("GTCA") == 3 + 1
    assert flank_bonus("") == 0
    assert flank_bonus("A---") == 4
    assert flanking_context("GCGCAT", 0, 4) == "AT--"
    assert flanking_context("GCGC", 0, 4) == "----"
    assert flanking_context("GCGCATGCA", 0, 4) == "ATGC"
