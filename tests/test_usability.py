"""Tests for the drinking / agriculture / industrial usability verdicts."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.results import MetalIndexScore
from scoring.usability import (
    AGRICULTURE_REASONS,
    DRINKING_REASONS,
    INDUSTRIAL_REASONS,
    determine_water_usability,
)


def _scores(**values):
    base = {"pb": 10.0, "as": 10.0, "cd": 10.0, "cr": 10.0, "ni": 10.0}
    base.update(values)
    return {
        sym: MetalIndexScore(value=v, status="Safe" if v <= 100 else "Unsafe", concentration=0.0)
        for sym, v in base.items()
    }


def _assess(hmpi=10.0, hpi=10.0, **values):
    return determine_water_usability(hmpi, hpi, _scores(**values))


class TestDrinking:
    def test_critical_metal_overrides_low_indices(self):
        """pb index 150 with hmpi 50 / hpi 40 is still unfit to drink."""
        verdict = _assess(hmpi=50.0, hpi=40.0, pb=150.0).drinking
        assert verdict.status == "Unsafe"
        assert verdict.reason == DRINKING_REASONS["critical_metals"]

    @pytest.mark.parametrize("symbol", ["pb", "as", "cd"])
    def test_each_critical_metal(self, symbol):
        verdict = _assess(**{symbol: 101.0}).drinking
        assert verdict.reason == DRINKING_REASONS["critical_metals"]

    @pytest.mark.parametrize("symbol", ["cr", "ni"])
    def test_non_critical_metal_unsafe(self, symbol):
        verdict = _assess(**{symbol: 101.0}).drinking
        assert verdict.status == "Unsafe"
        assert verdict.reason == DRINKING_REASONS["contaminated"]

    def test_high_hmpi_unsafe(self):
        verdict = _assess(hmpi=100.5).drinking
        assert verdict.status == "Unsafe"
        assert verdict.reason == DRINKING_REASONS["contaminated"]

    @pytest.mark.parametrize("hmpi,hpi", [(75.1, 10.0), (10.0, 75.1), (100.0, 100.0)])
    def test_caution(self, hmpi, hpi):
        verdict = _assess(hmpi=hmpi, hpi=hpi).drinking
        assert verdict.status == "Caution"
        assert verdict.reason == DRINKING_REASONS["approaching"]

    def test_boundary_seventy_five_is_safe(self):
        verdict = _assess(hmpi=75.0, hpi=75.0).drinking
        assert verdict.status == "Safe"
        assert verdict.reason == DRINKING_REASONS["safe"]


class TestAgriculture:
    @pytest.mark.parametrize("values", [{"pb": 200.1}, {"as": 150.1}, {"cd": 200.1}])
    def test_toxic_metal_levels_unsafe(self, values):
        verdict = _assess(**values).agriculture
        assert verdict.status == "Unsafe"
        assert verdict.reason == AGRICULTURE_REASONS["toxic_metals"]

    def test_lead_between_limits_is_caution(self):
        """pb 180 is critical-unsafe but below the crop damage level."""
        verdict = _assess(pb=180.0).agriculture
        assert verdict.status == "Caution"
        assert verdict.reason == AGRICULTURE_REASONS["monitor"]

    def test_high_hmpi_unsafe_without_metal_condition(self):
        """hmpi 350 hits the second rule even though no metal is toxic."""
        verdict = _assess(hmpi=350.0).agriculture
        assert verdict.status == "Unsafe"
        assert verdict.reason == AGRICULTURE_REASONS["contaminated"]

    def test_high_hpi_unsafe(self):
        assert _assess(hpi=200.5).agriculture.reason == AGRICULTURE_REASONS["contaminated"]

    @pytest.mark.parametrize("kwargs", [
        {"cr": 120.0},
        {"hmpi": 150.5},
        {"hpi": 100.5},
    ])
    def test_caution(self, kwargs):
        verdict = _assess(**kwargs).agriculture
        assert verdict.status == "Caution"

    def test_boundaries_are_safe(self):
        verdict = _assess(hmpi=150.0, hpi=100.0).agriculture
        assert verdict.status == "Safe"
        assert verdict.reason == AGRICULTURE_REASONS["safe"]

    def test_chromium_alone_never_toxic_rule(self):
        verdict = _assess(cr=900.0).agriculture
        assert verdict.reason == AGRICULTURE_REASONS["monitor"]


class TestIndustrial:
    @pytest.mark.parametrize("hmpi,hpi", [(500.1, 0.0), (0.0, 400.1)])
    def test_unsafe(self, hmpi, hpi):
        verdict = _assess(hmpi=hmpi, hpi=hpi).industrial
        assert verdict.status == "Unsafe"
        assert verdict.reason == INDUSTRIAL_REASONS["corrosive"]

    @pytest.mark.parametrize("kwargs", [
        {"hmpi": 300.1},
        {"hpi": 200.1},
        {"ni": 100.1},
    ])
    def test_caution(self, kwargs):
        verdict = _assess(**kwargs).industrial
        assert verdict.status == "Caution"
        assert verdict.reason == INDUSTRIAL_REASONS["treatment"]

    def test_safe_at_boundaries(self):
        verdict = _assess(hmpi=300.0, hpi=200.0).industrial
        assert verdict.status == "Safe"
        assert verdict.reason == INDUSTRIAL_REASONS["safe"]


class TestIndependence:
    def test_verdicts_differ_by_use(self):
        """Nickel over the limit: undrinkable, but only Caution for crops and industry."""
        usability = _assess(hmpi=60.0, hpi=60.0, ni=110.0)
        assert usability.drinking.status == "Unsafe"
        assert usability.agriculture.status == "Caution"
        assert usability.industrial.status == "Caution"

    def test_clean_water_safe_everywhere(self):
        usability = _assess()
        assert usability.drinking.status == "Safe"
        assert usability.agriculture.status == "Safe"
        assert usability.industrial.status == "Safe"
