"""
WHO heavy-metal standards table.

One entry per regulated metal: the guideline limit for drinking water and
an integer toxicity weight used by the weighted pollution indices.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from config import METAL_NAMES, WEIGHT_FACTORS, WHO_STANDARDS


@dataclass(frozen=True)
class StandardsEntry:
    """Regulatory limit and toxicity weight for one metal."""

    symbol: str
    name: str
    limit: float   # mg/L
    weight: int


METAL_SYMBOLS: Tuple[str, ...] = ("pb", "as", "cd", "cr", "ni")

STANDARDS: Dict[str, StandardsEntry] = {
    symbol: StandardsEntry(
        symbol=symbol,
        name=METAL_NAMES[symbol],
        limit=WHO_STANDARDS[symbol],
        weight=WEIGHT_FACTORS[symbol],
    )
    for symbol in METAL_SYMBOLS
}


def get_standard(symbol: str) -> StandardsEntry:
    """Look up the standards entry for a metal symbol.

    Raises:
        KeyError: If the symbol is not one of the five regulated metals.
    """
    try:
        return STANDARDS[symbol]
    except KeyError:
        raise KeyError(f"Unknown metal symbol: {symbol!r}") from None


def total_weight() -> int:
    """Sum of all toxicity weights."""
    return sum(entry.weight for entry in STANDARDS.values())


def limits_vector() -> np.ndarray:
    """WHO limits as a float array in ``METAL_SYMBOLS`` order."""
    return np.array([STANDARDS[s].limit for s in METAL_SYMBOLS], dtype=float)


def weights_vector() -> np.ndarray:
    """Toxicity weights as a float array in ``METAL_SYMBOLS`` order."""
    return np.array([STANDARDS[s].weight for s in METAL_SYMBOLS], dtype=float)
