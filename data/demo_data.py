"""
Demo Data for the Heavy-Metal Water Quality Scoring Engine.

Generates synthetic water samples scattered around five Indian metro
regions.  Concentration ranges straddle the WHO limits so a demo batch
contains a mix of safe and unsafe samples.
"""

from datetime import datetime, timedelta
from typing import List, Optional

import numpy as np

from config import (
    DEMO_CONCENTRATION_MAX,
    DEMO_CONDUCTIVITY_RANGE,
    DEMO_COORD_JITTER_DEG,
    DEMO_DATE_SPAN_DAYS,
    DEMO_PH_RANGE,
    DEMO_REGIONS,
)
from models.sample import WaterSample
from models.standards import METAL_SYMBOLS

DEMO_REFERENCE_DATE = datetime(2024, 12, 31)


def generate_sample_data(
    count: int = 50,
    seed: Optional[int] = None,
    reference_date: datetime = DEMO_REFERENCE_DATE,
) -> List[WaterSample]:
    """
    Generate synthetic water samples.

    Args:
        count: Number of samples to generate.
        seed: Seed for ``np.random.default_rng``; the same seed always
              yields the same samples.
        reference_date: Latest possible sample date; dates are drawn
                        uniformly from the preceding year.

    Returns:
        List of WaterSample with ids ``sample_1`` .. ``sample_<count>``.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    rng = np.random.default_rng(seed)
    regions = list(DEMO_REGIONS.items())
    samples = []

    for i in range(count):
        name, (lat, lon) = regions[int(rng.integers(len(regions)))]
        jitter = rng.uniform(-DEMO_COORD_JITTER_DEG, DEMO_COORD_JITTER_DEG, size=2)
        conc = {
            symbol: float(rng.uniform(0.0, DEMO_CONCENTRATION_MAX[symbol]))
            for symbol in METAL_SYMBOLS
        }
        days_ago = float(rng.uniform(0.0, DEMO_DATE_SPAN_DAYS))

        samples.append(WaterSample(
            id=f"sample_{i + 1}",
            latitude=lat + float(jitter[0]),
            longitude=lon + float(jitter[1]),
            pb=conc["pb"],
            as_=conc["as"],
            cd=conc["cd"],
            cr=conc["cr"],
            ni=conc["ni"],
            ph=float(rng.uniform(*DEMO_PH_RANGE)),
            conductivity=float(rng.uniform(*DEMO_CONDUCTIVITY_RANGE)),
            sample_date=reference_date - timedelta(days=days_ago),
            location=f"{name} Area {int(rng.integers(1, 11))}",
            collected_by=f"Researcher {int(rng.integers(1, 6))}",
            notes="Regular monitoring sample" if rng.random() > 0.5 else "",
        ))

    return samples
