"""Tests for the HMPI / HPI pollution indices and per-metal scores."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.standards import METAL_SYMBOLS, get_standard, total_weight
from scoring.indices import (
    calculate_hmpi,
    calculate_hpi,
    calculate_metal_contributions,
    calculate_metal_index_score,
    calculate_metal_index_scores,
)


class TestHMPI:
    def test_half_limits(self, half_limit_sample):
        """Every ratio is 0.5, so the weighted mean is 0.5."""
        assert calculate_hmpi(half_limit_sample) == pytest.approx(0.5)

    def test_at_limits(self, limit_sample):
        assert calculate_hmpi(limit_sample) == pytest.approx(1.0)

    def test_zero_concentrations(self, sample_factory):
        s = sample_factory(pb=0.0, as_=0.0, cd=0.0, cr=0.0, ni=0.0)
        assert calculate_hmpi(s) == 0.0

    def test_weighted_formula(self, delhi_sample):
        ratios = {
            sym: delhi_sample.concentration(sym) / get_standard(sym).limit
            for sym in METAL_SYMBOLS
        }
        expected = sum(get_standard(s).weight * r for s, r in ratios.items()) / 15
        assert calculate_hmpi(delhi_sample) == round(expected, 2)

    def test_single_metal_not_capped(self, sample_factory):
        """Lead alone at 100x the limit dominates the index."""
        s = sample_factory(pb=1.0, as_=0.0, cd=0.0, cr=0.0, ni=0.0)
        assert calculate_hmpi(s) == pytest.approx(100.0 * 4 / 15, abs=0.01)

    def test_normalised_by_total_weight(self, sample_factory):
        """Nickel alone at its limit contributes weight 2 of the total."""
        s = sample_factory(pb=0.0, as_=0.0, cd=0.0, cr=0.0, ni=0.07)
        assert calculate_hmpi(s) == round(2 / total_weight(), 2)

    def test_rounded_to_two_decimals(self, delhi_sample):
        value = calculate_hmpi(delhi_sample)
        assert value == round(value, 2)


class TestHPI:
    def test_half_limits_is_fifty(self, half_limit_sample):
        assert calculate_hpi(half_limit_sample) == 50.0

    def test_at_limits_is_exactly_hundred(self, limit_sample):
        assert calculate_hpi(limit_sample) == 100.0

    def test_proportional_to_hmpi(self, delhi_sample):
        """HPI is the same weighted mean expressed as a percentage."""
        assert calculate_hpi(delhi_sample) == pytest.approx(
            100 * calculate_hmpi(delhi_sample), abs=1.0
        )

    def test_zero_concentrations(self, sample_factory):
        s = sample_factory(pb=0.0, as_=0.0, cd=0.0, cr=0.0, ni=0.0)
        assert calculate_hpi(s) == 0.0

    def test_weighted_formula(self, sample_factory):
        s = sample_factory(pb=0.02, as_=0.0, cd=0.0, cr=0.0, ni=0.0)
        # Q_pb = 200, weight 4 of 15
        assert calculate_hpi(s) == pytest.approx(200 * 4 / 15, abs=0.005)


class TestMetalContributions:
    def test_percent_of_limit(self, delhi_sample):
        contrib = calculate_metal_contributions(delhi_sample)
        assert contrib["pb"] == pytest.approx(150.0)
        assert contrib["as"] == pytest.approx(80.0)
        assert contrib["cd"] == pytest.approx(66.67)
        assert contrib["cr"] == pytest.approx(90.0)
        assert contrib["ni"] == pytest.approx(92.86)

    def test_keys_in_symbol_order(self, clean_sample):
        assert list(calculate_metal_contributions(clean_sample)) == list(METAL_SYMBOLS)


class TestMetalIndexScores:
    def test_value_matches_formula(self, delhi_sample):
        scores = calculate_metal_index_scores(delhi_sample)
        for symbol in METAL_SYMBOLS:
            conc = delhi_sample.concentration(symbol)
            expected = round(100 * conc / get_standard(symbol).limit, 1)
            assert scores[symbol].value == expected

    def test_status_unsafe_iff_above_hundred(self, delhi_sample):
        scores = calculate_metal_index_scores(delhi_sample)
        for score in scores.values():
            assert (score.status == "Unsafe") == (score.value > 100)
        assert scores["pb"].status == "Unsafe"
        assert scores["ni"].status == "Safe"

    def test_exactly_at_limit_is_safe(self):
        score = calculate_metal_index_score("pb", 0.01)
        assert score.value == 100.0
        assert score.status == "Safe"

    def test_just_above_limit_is_unsafe(self):
        score = calculate_metal_index_score("pb", 0.0101)
        assert score.value == 101.0
        assert score.status == "Unsafe"

    def test_concentration_echoed(self):
        score = calculate_metal_index_score("cd", 0.0015)
        assert score.concentration == 0.0015

    def test_cadmium_one_decimal(self, delhi_sample):
        assert calculate_metal_index_scores(delhi_sample)["cd"].value == 66.7

    def test_half_limits_all_fifty(self, half_limit_sample):
        scores = calculate_metal_index_scores(half_limit_sample)
        assert [s.value for s in scores.values()] == [50.0] * 5
