"""
Heavy-Metal Pollution Indices.

Computes the two aggregate pollution indices and the per-metal scores for
a single water sample against the WHO standards table.

    HMPI = sum(W_i * C_i / S_i) / sum(W_i)
    HPI  = sum(W_i * Q_i) / sum(W_i),   Q_i = 100 * (C_i - I) / (S_i - I)

where W_i is the toxicity weight, C_i the measured concentration, S_i the
WHO limit and I the ideal concentration (zero for heavy metals).

All functions are total over a structurally valid WaterSample: limits are
non-zero constants, so nothing here validates or raises.
"""

from typing import Dict

import numpy as np

from config import (
    CONCENTRATION_DECIMALS,
    INDEX_DECIMALS,
    METAL_INDEX_DECIMALS,
    METAL_INDEX_LIMIT,
)
from models.results import SAFE, UNSAFE, MetalIndexScore
from models.sample import WaterSample
from models.standards import (
    METAL_SYMBOLS,
    get_standard,
    limits_vector,
    total_weight,
    weights_vector,
)


def _concentration_vector(sample: WaterSample) -> np.ndarray:
    """Concentrations as a float array in ``METAL_SYMBOLS`` order."""
    return np.array([sample.concentration(s) for s in METAL_SYMBOLS], dtype=float)


def calculate_hmpi(sample: WaterSample) -> float:
    """
    Heavy Metal Pollution Index: toxicity-weighted mean of C_i / S_i.

    No per-metal cap is applied, so a single grossly contaminated metal
    can dominate the index.

    Args:
        sample: Water sample to score.

    Returns:
        HMPI rounded to 2 decimals.
    """
    weights = weights_vector()
    ratios = _concentration_vector(sample) / limits_vector()
    hmpi = float(np.dot(weights, ratios)) / total_weight()
    return round(hmpi, INDEX_DECIMALS)


def calculate_hpi(sample: WaterSample) -> float:
    """
    Heavy-metal Pollution Index: toxicity-weighted mean of sub-indices Q_i.

    Q_i is pinned to exactly 100 when the concentration equals the limit,
    which also sidesteps float noise at the boundary.

    Args:
        sample: Water sample to score.

    Returns:
        HPI rounded to 2 decimals.
    """
    weights = weights_vector()
    limits = limits_vector()
    conc = _concentration_vector(sample)
    sub_indices = np.where(conc == limits, 100.0, 100.0 * conc / limits)
    hpi = float(np.dot(weights, sub_indices)) / total_weight()
    return round(hpi, INDEX_DECIMALS)


def calculate_metal_contributions(sample: WaterSample) -> Dict[str, float]:
    """Percentage of the WHO limit reached by each metal (2 decimals).

    Used for reporting relative burden, not for classification.
    """
    return {
        symbol: round(100.0 * conc / get_standard(symbol).limit, INDEX_DECIMALS)
        for symbol, conc in sample.concentrations.items()
    }


def calculate_metal_index_score(symbol: str, concentration: float) -> MetalIndexScore:
    """Score one metal: value > 100 means the WHO limit is exceeded."""
    value = round(100.0 * concentration / get_standard(symbol).limit, METAL_INDEX_DECIMALS)
    return MetalIndexScore(
        value=value,
        status=SAFE if value <= METAL_INDEX_LIMIT else UNSAFE,
        concentration=round(concentration, CONCENTRATION_DECIMALS),
    )


def calculate_metal_index_scores(sample: WaterSample) -> Dict[str, MetalIndexScore]:
    """Metal index score for each of the five metals, keyed by symbol."""
    return {
        symbol: calculate_metal_index_score(symbol, conc)
        for symbol, conc in sample.concentrations.items()
    }
