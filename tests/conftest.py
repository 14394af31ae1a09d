"""Shared fixtures for the water quality scoring test suite."""

import sys
import os
from datetime import datetime

import pytest

# Ensure project root is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.sample import WaterSample


def make_sample(**overrides) -> WaterSample:
    """A clean sample well below every WHO limit, with overrides applied."""
    fields = {
        "id": "S1",
        "latitude": 28.6139,
        "longitude": 77.2090,
        "pb": 0.002,
        "as_": 0.002,
        "cd": 0.0005,
        "cr": 0.01,
        "ni": 0.01,
        "ph": 7.2,
        "conductivity": 450.0,
        "sample_date": datetime(2024, 1, 15),
        "location": "Test Site",
    }
    fields.update(overrides)
    return WaterSample(**fields)


@pytest.fixture
def sample_factory():
    """Factory for WaterSample instances with keyword overrides."""
    return make_sample


@pytest.fixture
def clean_sample():
    return make_sample()


@pytest.fixture
def delhi_sample():
    """DEL001 from the demo set: lead at 150% of the WHO limit."""
    return make_sample(
        id="DEL001", pb=0.015, as_=0.008, cd=0.002, cr=0.045, ni=0.065,
        ph=7.2, conductivity=850.0, location="Central Delhi - Connaught Place",
    )


@pytest.fixture
def half_limit_sample():
    """Every metal at exactly half its WHO limit."""
    return make_sample(id="HALF", pb=0.005, as_=0.005, cd=0.0015, cr=0.025, ni=0.035)


@pytest.fixture
def limit_sample():
    """Every metal exactly at its WHO limit."""
    return make_sample(id="LIMIT", pb=0.01, as_=0.01, cd=0.003, cr=0.05, ni=0.07)


@pytest.fixture
def valid_csv():
    return (
        "id,latitude,longitude,pb,as,cd,cr,ni,pH,conductivity,location,sampleDate,collectedBy,notes\n"
        "A1,28.6139,77.2090,0.005,0.002,0.001,0.02,0.03,7.2,450,Delhi Area 1,2024-01-15,Researcher 1,Regular\n"
        "A2,19.0760,72.8777,0.015,0.003,0.002,0.03,0.04,7.8,520,Mumbai Area 2,2024-01-16,Researcher 2,Industrial\n"
        "A3,22.5726,88.3639,0.001,0.001,0.0005,0.01,0.01,6.9,300,Kolkata Area 3,2024-01-17,Researcher 3,\n"
    )
