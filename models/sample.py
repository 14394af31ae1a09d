"""
Water sample data model.

Represents a single laboratory measurement of heavy-metal concentrations
at a geographic location, together with the basic physico-chemical
parameters recorded alongside it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from models.standards import METAL_SYMBOLS


@dataclass(frozen=True)
class WaterSample:
    """A single water sample.

    Args:
        id: Sample identifier (unique within a batch, not enforced).
        latitude: Sampling latitude (decimal degrees).
        longitude: Sampling longitude (decimal degrees).
        pb: Lead concentration (mg/L).
        as_: Arsenic concentration (mg/L).  Exposed as ``"as"`` through
            :attr:`concentrations`.
        cd: Cadmium concentration (mg/L).
        cr: Chromium concentration (mg/L).
        ni: Nickel concentration (mg/L).
        ph: Acidity, expected in [0, 14] (not enforced here).
        conductivity: Electrical conductivity (uS/cm).
        sample_date: When the sample was taken, if known.
        location: Free-text location name.
        collected_by: Free-text collector name.
        notes: Free-text notes.
    """

    id: str
    latitude: float
    longitude: float
    pb: float
    as_: float
    cd: float
    cr: float
    ni: float
    ph: float
    conductivity: float
    sample_date: Optional[datetime] = None
    location: str = ""
    collected_by: str = ""
    notes: str = ""

    def __post_init__(self):
        for symbol, value in self.concentrations.items():
            if value < 0:
                raise ValueError(f"{symbol} concentration must be >= 0, got {value}")
        if self.conductivity < 0:
            raise ValueError(f"conductivity must be >= 0, got {self.conductivity}")

    @property
    def concentrations(self) -> Dict[str, float]:
        """Pollutant concentrations keyed by metal symbol, in table order."""
        values = {
            "pb": self.pb,
            "as": self.as_,
            "cd": self.cd,
            "cr": self.cr,
            "ni": self.ni,
        }
        return {symbol: values[symbol] for symbol in METAL_SYMBOLS}

    def concentration(self, symbol: str) -> float:
        """Concentration of one metal by symbol (``pb``, ``as``, ...)."""
        return self.concentrations[symbol]
