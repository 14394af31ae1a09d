"""
Water Usability Assessment.

Judges a scored sample for three use-cases with decreasing strictness:
drinking, agriculture (irrigation) and industrial process water.  Each
verdict is an ordered if/elif chain where the first matching rule wins;
the ranges deliberately overlap between rules, so reordering changes
results.
"""

from typing import Mapping

from config import (
    AGRICULTURE_CAUTION_HMPI,
    AGRICULTURE_CAUTION_HPI,
    AGRICULTURE_METAL_LIMITS,
    AGRICULTURE_UNSAFE_HMPI,
    AGRICULTURE_UNSAFE_HPI,
    CRITICAL_METALS,
    DRINKING_CAUTION_INDEX,
    DRINKING_UNSAFE_HMPI,
    INDUSTRIAL_CAUTION_HMPI,
    INDUSTRIAL_CAUTION_HPI,
    INDUSTRIAL_UNSAFE_HMPI,
    INDUSTRIAL_UNSAFE_HPI,
    METAL_INDEX_LIMIT,
)
from models.results import (
    CAUTION,
    SAFE,
    UNSAFE,
    MetalIndexScore,
    UsabilityAssessment,
    UsabilityVerdict,
)

DRINKING_REASONS = {
    "critical_metals": "Critical metals (Pb/As/Cd) exceed WHO drinking water standards",
    "contaminated": "Metal contamination exceeds WHO drinking water standards",
    "approaching": "Approaching WHO limits - regular monitoring recommended",
    "safe": "Meets WHO drinking water standards",
}

AGRICULTURE_REASONS = {
    "toxic_metals": "High toxic metal levels harmful to crops and soil",
    "contaminated": "Contamination levels may damage crops and accumulate in soil",
    "monitor": "Monitor crop uptake - may affect sensitive plants",
    "safe": "Suitable for irrigation and crop production",
}

INDUSTRIAL_REASONS = {
    "corrosive": "May cause corrosion and equipment damage",
    "treatment": "May require treatment for sensitive processes",
    "safe": "Suitable for most industrial applications",
}


def _exceeds(scores: Mapping[str, MetalIndexScore], symbol: str, limit: float) -> bool:
    return scores[symbol].value > limit


def assess_drinking(
    hmpi: float, hpi: float, critical_unsafe: bool, any_unsafe: bool
) -> UsabilityVerdict:
    if critical_unsafe:
        return UsabilityVerdict(UNSAFE, DRINKING_REASONS["critical_metals"])
    if any_unsafe or hmpi > DRINKING_UNSAFE_HMPI:
        return UsabilityVerdict(UNSAFE, DRINKING_REASONS["contaminated"])
    if hmpi > DRINKING_CAUTION_INDEX or hpi > DRINKING_CAUTION_INDEX:
        return UsabilityVerdict(CAUTION, DRINKING_REASONS["approaching"])
    return UsabilityVerdict(SAFE, DRINKING_REASONS["safe"])


def assess_agriculture(
    hmpi: float,
    hpi: float,
    scores: Mapping[str, MetalIndexScore],
    critical_unsafe: bool,
    any_unsafe: bool,
) -> UsabilityVerdict:
    toxic = any(
        _exceeds(scores, symbol, limit) for symbol, limit in AGRICULTURE_METAL_LIMITS.items()
    )
    if critical_unsafe and toxic:
        return UsabilityVerdict(UNSAFE, AGRICULTURE_REASONS["toxic_metals"])
    if hmpi > AGRICULTURE_UNSAFE_HMPI or hpi > AGRICULTURE_UNSAFE_HPI:
        return UsabilityVerdict(UNSAFE, AGRICULTURE_REASONS["contaminated"])
    if any_unsafe or hmpi > AGRICULTURE_CAUTION_HMPI or hpi > AGRICULTURE_CAUTION_HPI:
        return UsabilityVerdict(CAUTION, AGRICULTURE_REASONS["monitor"])
    return UsabilityVerdict(SAFE, AGRICULTURE_REASONS["safe"])


def assess_industrial(hmpi: float, hpi: float, any_unsafe: bool) -> UsabilityVerdict:
    if hmpi > INDUSTRIAL_UNSAFE_HMPI or hpi > INDUSTRIAL_UNSAFE_HPI:
        return UsabilityVerdict(UNSAFE, INDUSTRIAL_REASONS["corrosive"])
    if hmpi > INDUSTRIAL_CAUTION_HMPI or hpi > INDUSTRIAL_CAUTION_HPI or any_unsafe:
        return UsabilityVerdict(CAUTION, INDUSTRIAL_REASONS["treatment"])
    return UsabilityVerdict(SAFE, INDUSTRIAL_REASONS["safe"])


def determine_water_usability(
    hmpi: float,
    hpi: float,
    metal_index_scores: Mapping[str, MetalIndexScore],
) -> UsabilityAssessment:
    """
    Assess drinking, agricultural and industrial suitability.

    Args:
        hmpi: Heavy Metal Pollution Index.
        hpi: Heavy-metal Pollution Index.
        metal_index_scores: Scores for all five metals keyed by symbol.

    Returns:
        UsabilityAssessment with one verdict and reason per use-case.
    """
    critical_unsafe = any(
        _exceeds(metal_index_scores, symbol, METAL_INDEX_LIMIT) for symbol in CRITICAL_METALS
    )
    any_unsafe = any(
        score.value > METAL_INDEX_LIMIT for score in metal_index_scores.values()
    )

    return UsabilityAssessment(
        drinking=assess_drinking(hmpi, hpi, critical_unsafe, any_unsafe),
        agriculture=assess_agriculture(
            hmpi, hpi, metal_index_scores, critical_unsafe, any_unsafe
        ),
        industrial=assess_industrial(hmpi, hpi, any_unsafe),
    )
