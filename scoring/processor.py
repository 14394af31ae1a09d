"""
Record Processor.

Runs the full scoring pipeline over one sample and aggregates batch
summaries.  Samples are processed independently and in input order;
there is no shared state between them.
"""

import logging
from typing import Iterable

import numpy as np

from config import INDEX_DECIMALS
from models.results import (
    MODERATE,
    SAFE,
    UNSAFE,
    BatchSummary,
    HMPIResult,
    ProcessedData,
)
from models.sample import WaterSample
from scoring.classifier import classify_water_safety, determine_risk_level
from scoring.indices import (
    calculate_hmpi,
    calculate_hpi,
    calculate_metal_contributions,
    calculate_metal_index_scores,
)
from scoring.usability import determine_water_usability

logger = logging.getLogger("hmpi.processor")


def process_sample(sample: WaterSample) -> HMPIResult:
    """
    Score, classify and assess a single water sample.

    Classification uses the metal-index path; risk level comes from HPI.

    Args:
        sample: A structurally valid WaterSample.

    Returns:
        HMPIResult keyed by the sample's id.
    """
    hmpi = calculate_hmpi(sample)
    hpi = calculate_hpi(sample)
    metal_contributions = calculate_metal_contributions(sample)
    metal_index_scores = calculate_metal_index_scores(sample)

    return HMPIResult(
        sample_id=sample.id,
        hmpi=hmpi,
        hpi=hpi,
        classification=classify_water_safety(hmpi, metal_index_scores),
        risk_level=determine_risk_level(hpi),
        metal_contributions=metal_contributions,
        metal_index_scores=metal_index_scores,
        usability=determine_water_usability(hmpi, hpi, metal_index_scores),
    )


def summarize_results(results) -> BatchSummary:
    """Classification counts and mean indices over a non-empty result list."""
    if not results:
        raise ValueError("Cannot summarize an empty list of results")

    classifications = [r.classification for r in results]
    return BatchSummary(
        total_samples=len(results),
        safe_count=classifications.count(SAFE),
        moderate_count=classifications.count(MODERATE),
        unsafe_count=classifications.count(UNSAFE),
        average_hmpi=round(float(np.mean([r.hmpi for r in results])), INDEX_DECIMALS),
        average_hpi=round(float(np.mean([r.hpi for r in results])), INDEX_DECIMALS),
    )


def process_batch(samples: Iterable[WaterSample]) -> ProcessedData:
    """
    Process every sample and aggregate a batch summary.

    Args:
        samples: Water samples, processed in order.

    Returns:
        ProcessedData with samples, parallel results and summary.

    Raises:
        ValueError: If ``samples`` is empty (the averages are undefined).
    """
    samples = tuple(samples)
    if not samples:
        raise ValueError("Cannot process an empty batch of samples")

    results = tuple(process_sample(s) for s in samples)
    summary = summarize_results(results)

    logger.info(
        "Processed %d samples: %d safe, %d moderate, %d unsafe (avg HMPI %.2f, avg HPI %.2f)",
        summary.total_samples,
        summary.safe_count,
        summary.moderate_count,
        summary.unsafe_count,
        summary.average_hmpi,
        summary.average_hpi,
    )
    return ProcessedData(samples=samples, results=results, summary=summary)
