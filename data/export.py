"""
Data export and sample templates.

Serializes samples and processed batches into the same layouts the
ingestion layer reads back (CSV template columns, JSON ``samples`` array,
single-sheet workbook), so an exported batch can be re-imported without
loss.  Also provides the two-row example template and a plain-text batch
summary.
"""

import csv
import io
import json
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from config import OPTIONAL_COLUMNS, REQUIRED_COLUMNS
from models.results import HMPIResult, ProcessedData
from models.sample import WaterSample

TEMPLATE_COLUMNS = REQUIRED_COLUMNS + OPTIONAL_COLUMNS
EXPORT_VERSION = "1.0"

TEMPLATE_SAMPLES = [
    WaterSample(
        id="sample_1", latitude=28.6139, longitude=77.2090,
        pb=0.005, as_=0.002, cd=0.001, cr=0.02, ni=0.03,
        ph=7.2, conductivity=450.0, sample_date=datetime(2024, 1, 15),
        location="Delhi Area 1", collected_by="Researcher 1", notes="Regular monitoring",
    ),
    WaterSample(
        id="sample_2", latitude=19.0760, longitude=72.8777,
        pb=0.008, as_=0.003, cd=0.002, cr=0.03, ni=0.04,
        ph=7.8, conductivity=520.0, sample_date=datetime(2024, 1, 16),
        location="Mumbai Area 2", collected_by="Researcher 2", notes="Industrial area",
    ),
]


def sample_to_dict(sample: WaterSample) -> Dict[str, Any]:
    """Flatten a sample into template-column keys."""
    return {
        "id": sample.id,
        "latitude": sample.latitude,
        "longitude": sample.longitude,
        **sample.concentrations,
        "pH": sample.ph,
        "conductivity": sample.conductivity,
        "location": sample.location,
        "sampleDate": sample.sample_date.isoformat() if sample.sample_date else "",
        "collectedBy": sample.collected_by,
        "notes": sample.notes,
    }


def result_to_dict(result: HMPIResult) -> Dict[str, Any]:
    usability = result.usability
    return {
        "sampleId": result.sample_id,
        "hmpi": result.hmpi,
        "hpi": result.hpi,
        "classification": result.classification,
        "riskLevel": result.risk_level,
        "metalContributions": dict(result.metal_contributions),
        "metalIndexScores": {
            symbol: {
                "value": score.value,
                "status": score.status,
                "concentration": score.concentration,
            }
            for symbol, score in result.metal_index_scores.items()
        },
        "usability": {
            use: {"status": verdict.status, "reason": verdict.reason}
            for use, verdict in (
                ("drinking", usability.drinking),
                ("agriculture", usability.agriculture),
                ("industrial", usability.industrial),
            )
        },
    }


def summary_to_dict(data: ProcessedData) -> Dict[str, Any]:
    s = data.summary
    return {
        "totalSamples": s.total_samples,
        "safeCount": s.safe_count,
        "moderateCount": s.moderate_count,
        "unsafeCount": s.unsafe_count,
        "averageHMPI": s.average_hmpi,
        "averageHPI": s.average_hpi,
    }


def export_json(data: ProcessedData, exported_at: Optional[datetime] = None) -> str:
    """
    Serialize a processed batch to JSON.

    Args:
        data: Processed batch.
        exported_at: Timestamp recorded in the metadata block (default: now).

    Returns:
        Indented JSON text with ``metadata``, ``summary``, ``samples`` and
        ``results`` keys.  The ``samples`` array re-imports via ``parse_json``.
    """
    exported_at = exported_at or datetime.now()
    document = {
        "metadata": {
            "exportDate": exported_at.isoformat(),
            "version": EXPORT_VERSION,
            "description": "Heavy-metal water quality analysis data",
            "totalSamples": data.summary.total_samples,
        },
        "summary": summary_to_dict(data),
        "samples": [sample_to_dict(s) for s in data.samples],
        "results": [result_to_dict(r) for r in data.results],
    }
    return json.dumps(document, indent=2)


def export_csv(samples: Iterable[WaterSample]) -> str:
    """Write samples as CSV using the template column layout."""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=list(TEMPLATE_COLUMNS), lineterminator="\n")
    writer.writeheader()
    for sample in samples:
        writer.writerow({k: _csv_cell(v) for k, v in sample_to_dict(sample).items()})
    return buf.getvalue()


def _csv_cell(value: Any) -> Any:
    # repr keeps full float precision for lossless round trips
    return repr(value) if isinstance(value, float) else value


def export_excel(samples: Iterable[WaterSample]) -> bytes:
    """Write samples to a single-sheet ``.xlsx`` workbook."""
    rows: List[Dict[str, Any]] = [sample_to_dict(s) for s in samples]
    frame = pd.DataFrame(rows, columns=list(TEMPLATE_COLUMNS))
    buf = io.BytesIO()
    frame.to_excel(buf, index=False, sheet_name="Samples")
    return buf.getvalue()


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

def template_csv() -> str:
    """Two-row example dataset in the CSV ingestion schema."""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=list(TEMPLATE_COLUMNS), lineterminator="\n")
    writer.writeheader()
    for sample in TEMPLATE_SAMPLES:
        row = sample_to_dict(sample)
        row["sampleDate"] = sample.sample_date.date().isoformat()
        writer.writerow(row)
    return buf.getvalue()


def template_json() -> str:
    """Two-row example dataset in the JSON ingestion schema."""
    document = {
        "metadata": {
            "description": "Water sample template",
            "version": EXPORT_VERSION,
            "instructions": "Fill in the samples array with your water quality data",
        },
        "samples": [sample_to_dict(s) for s in TEMPLATE_SAMPLES],
    }
    return json.dumps(document, indent=2)


# ---------------------------------------------------------------------------
# Text summary
# ---------------------------------------------------------------------------

def summary_text(data: ProcessedData) -> str:
    """Human-readable distribution of classifications and mean indices."""
    s = data.summary

    def pct(count: int) -> str:
        return f"{count / s.total_samples * 100:.1f}"

    recommendations = []
    if s.unsafe_count > 0:
        recommendations.append(f"- Immediate attention required for {s.unsafe_count} unsafe samples")
    if s.moderate_count > 0:
        recommendations.append(f"- Monitoring recommended for {s.moderate_count} moderate risk samples")
    if s.safe_count == s.total_samples:
        recommendations.append("- All samples meet safety standards")

    lines = [
        "Water Quality Analysis Summary:",
        "",
        f"Total Samples Analyzed: {s.total_samples}",
        "",
        "Quality Distribution:",
        f"- Safe Water: {s.safe_count} samples ({pct(s.safe_count)}%)",
        f"- Moderate Risk: {s.moderate_count} samples ({pct(s.moderate_count)}%)",
        f"- Unsafe Water: {s.unsafe_count} samples ({pct(s.unsafe_count)}%)",
        "",
        "Average Pollution Indices:",
        f"- Heavy Metal Pollution Index (HMPI): {s.average_hmpi}",
        f"- Heavy-metal Pollution Index (HPI): {s.average_hpi}",
        "",
        "Recommendations:",
        *recommendations,
    ]
    return "\n".join(lines)
