"""
Safety classification and risk tiering.

Classification is driven by the per-metal index scores: a single metal
above its WHO limit makes the sample Unsafe, whatever the blended HMPI
says.  The HMPI thresholds are only consulted when no per-metal scores are
available, so the primary path never yields Moderate.

Risk level is an independent step function of HPI.
"""

from typing import Mapping, Optional

from config import (
    HMPI_MODERATE_MAX,
    HMPI_SAFE_MAX,
    HPI_HIGH_MAX,
    HPI_LOW_MAX,
    HPI_MEDIUM_MAX,
    METAL_INDEX_LIMIT,
)
from models.results import (
    CRITICAL,
    HIGH,
    LOW,
    MEDIUM,
    MODERATE,
    SAFE,
    UNSAFE,
    MetalIndexScore,
)


def classify_water_safety(
    hmpi: float,
    metal_index_scores: Optional[Mapping[str, MetalIndexScore]] = None,
) -> str:
    """
    Classify a sample as Safe, Moderate or Unsafe.

    With metal index scores (primary path):
        Unsafe if any metal index value > 100, else Safe.
    Without them (fallback path):
        Safe if hmpi <= 100, Moderate if hmpi <= 200, else Unsafe.

    Args:
        hmpi: Heavy Metal Pollution Index of the sample.
        metal_index_scores: Per-metal scores keyed by symbol, or None.

    Returns:
        One of ``"Safe"``, ``"Moderate"``, ``"Unsafe"``.
    """
    if metal_index_scores is not None:
        if any(score.value > METAL_INDEX_LIMIT for score in metal_index_scores.values()):
            return UNSAFE
        return SAFE

    if hmpi <= HMPI_SAFE_MAX:
        return SAFE
    if hmpi <= HMPI_MODERATE_MAX:
        return MODERATE
    return UNSAFE


def determine_risk_level(hpi: float) -> str:
    """Map HPI to Low (<=25), Medium (<=50), High (<=100) or Critical."""
    if hpi <= HPI_LOW_MAX:
        return LOW
    if hpi <= HPI_MEDIUM_MAX:
        return MEDIUM
    if hpi <= HPI_HIGH_MAX:
        return HIGH
    return CRITICAL
