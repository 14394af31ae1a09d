"""
Derived result types produced by the scoring pipeline.

Every type here is a frozen dataclass: results are created once by the
record processor and never mutated afterwards.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from models.sample import WaterSample

SAFE = "Safe"
MODERATE = "Moderate"
UNSAFE = "Unsafe"
CAUTION = "Caution"

LOW = "Low"
MEDIUM = "Medium"
HIGH = "High"
CRITICAL = "Critical"


@dataclass(frozen=True)
class MetalIndexScore:
    """Compliance ratio of one metal against its WHO limit.

    Args:
        value: 100 * concentration / limit, one decimal place.
        status: ``"Safe"`` if value <= 100, else ``"Unsafe"``.
        concentration: Measured concentration (mg/L).
    """

    value: float
    status: str
    concentration: float


@dataclass(frozen=True)
class UsabilityVerdict:
    status: str     # Safe | Caution | Unsafe
    reason: str


@dataclass(frozen=True)
class UsabilityAssessment:
    """Suitability of a sample for three independent use-cases."""

    drinking: UsabilityVerdict
    agriculture: UsabilityVerdict
    industrial: UsabilityVerdict


@dataclass(frozen=True)
class HMPIResult:
    """Scoring outcome for one water sample.

    Holds no reference to the sample itself; use
    :meth:`ProcessedData.sample_for` to pair it back up by identifier.
    """

    sample_id: str
    hmpi: float
    hpi: float
    classification: str
    risk_level: str
    metal_contributions: Mapping[str, float]
    metal_index_scores: Mapping[str, MetalIndexScore]
    usability: UsabilityAssessment

    def __post_init__(self):
        # Read-only views over private copies
        object.__setattr__(
            self, "metal_contributions", MappingProxyType(dict(self.metal_contributions))
        )
        object.__setattr__(
            self, "metal_index_scores", MappingProxyType(dict(self.metal_index_scores))
        )


@dataclass(frozen=True)
class BatchSummary:
    total_samples: int
    safe_count: int
    moderate_count: int
    unsafe_count: int
    average_hmpi: float
    average_hpi: float


@dataclass(frozen=True)
class ProcessedData:
    """A processed batch: input samples, parallel results and a summary."""

    samples: Tuple[WaterSample, ...]
    results: Tuple[HMPIResult, ...]
    summary: BatchSummary

    def sample_for(self, result: HMPIResult) -> Optional[WaterSample]:
        """Return the first sample whose id matches the result, if any."""
        for sample in self.samples:
            if sample.id == result.sample_id:
                return sample
        return None

    def result_for(self, sample_id: str) -> Optional[HMPIResult]:
        """Return the first result for a sample id, if any."""
        for result in self.results:
            if result.sample_id == sample_id:
                return result
        return None
