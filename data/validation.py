"""
Record validation for water sample ingestion.

Turns one raw row (a dict of header -> cell value, as produced by the CSV,
spreadsheet or JSON readers) into a typed ``SampleCandidate``, and checks
the candidate field by field.  A candidate with no errors converts into an
immutable WaterSample.

Header matching goes through the ordered alias table in ``config``; cell
coercion is permissive (blank numeric cells become 0.0) unless strict mode
is requested.
"""

import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from config import (
    COLUMN_ALIASES,
    DATE_FORMATS,
    METAL_NAMES,
    MISSING_NUMERIC_DEFAULT,
    NUMERIC_FIELDS,
    PH_MAX,
    PH_MIN,
    REQUIRED_COLUMNS,
)
from models.sample import WaterSample
from models.standards import METAL_SYMBOLS

# Canonical column name -> SampleCandidate attribute
FIELD_ATTRIBUTES = {
    "id": "id",
    "latitude": "latitude",
    "longitude": "longitude",
    "pb": "pb",
    "as": "as_",
    "cd": "cd",
    "cr": "cr",
    "ni": "ni",
    "pH": "ph",
    "conductivity": "conductivity",
    "location": "location",
    "sampleDate": "sample_date",
    "collectedBy": "collected_by",
    "notes": "notes",
}

FIELD_ERRORS = {
    "latitude": "Valid latitude is required",
    "longitude": "Valid longitude is required",
    "pH": "Valid pH value (0-14) is required",
    "conductivity": "Valid conductivity is required",
}
FIELD_ERRORS.update({
    symbol: f"Valid {METAL_NAMES[symbol].lower()} ({symbol.capitalize()}) concentration is required"
    for symbol in METAL_SYMBOLS
})
DATE_ERROR = "Valid sample date is required"


# ---------------------------------------------------------------------------
# Column aliasing
# ---------------------------------------------------------------------------

def normalize_header(header: Any) -> str:
    """Reduce a column header to its alias-table key.

    Drops bracketed unit suffixes, lower-cases, and removes everything
    that is not a letter or digit: ``"Lead (mg/L)"`` -> ``"lead"``,
    ``"Sample Date"`` -> ``"sampledate"``.
    """
    text = "" if header is None else str(header)
    text = re.sub(r"[\(\[].*?[\)\]]", "", text)
    return re.sub(r"[^a-z0-9]", "", text.lower())


def resolve_columns(headers: Iterable[Any]) -> Dict[str, Any]:
    """Map canonical field names to the source headers that carry them.

    For each canonical field the aliases are tried in order and the first
    one present wins.  Headers that match no alias are ignored.

    Returns:
        Dict of canonical field -> original header (as found in the input).
    """
    by_key: Dict[str, Any] = {}
    for header in headers:
        key = normalize_header(header)
        if key and key not in by_key:
            by_key[key] = header

    columns: Dict[str, Any] = {}
    for canonical, aliases in COLUMN_ALIASES:
        for alias in aliases:
            if alias in by_key:
                columns[canonical] = by_key[alias]
                break
    return columns


def missing_required_columns(columns: Mapping[str, Any]) -> List[str]:
    """Required canonical fields absent from a resolved column map."""
    return [name for name in REQUIRED_COLUMNS if name not in columns]


# ---------------------------------------------------------------------------
# Cell coercion
# ---------------------------------------------------------------------------

def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True  # empty spreadsheet cell
    if isinstance(value, datetime) and value != value:
        return True  # NaT
    return isinstance(value, str) and not value.strip()


def coerce_number(value: Any) -> Optional[float]:
    """Coerce a cell to float.

    Returns None for a blank cell and NaN for a value that does not parse
    as a number.  Integers too large for a float become infinity.
    """
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        return float("nan")
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return float("inf") if value > 0 else float("-inf")
    try:
        return float(str(value).strip())
    except ValueError:
        return float("nan")


def coerce_text(value: Any) -> str:
    if _is_blank(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))  # spreadsheet ids read back as 1.0
    return str(value).strip()


def parse_date(value: Any) -> Tuple[Optional[datetime], bool]:
    """Parse a sample date cell.

    Returns:
        ``(datetime_or_None, ok)``.  Blank cells give ``(None, True)``;
        unparseable text gives ``(None, False)``.
    """
    if _is_blank(value):
        return None, True
    if isinstance(value, datetime):
        if hasattr(value, "to_pydatetime"):
            value = value.to_pydatetime()  # pandas Timestamp
        return value, True
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day), True

    text = str(value).strip()
    iso = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(iso), True
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt), True
        except ValueError:
            continue
    return None, False


# ---------------------------------------------------------------------------
# Candidate records
# ---------------------------------------------------------------------------

@dataclass
class SampleCandidate:
    """A coerced but not yet validated sample row.

    Numeric fields hold a float, NaN for unparseable input, or the missing
    default.  ``missing`` lists the numeric fields that were absent or
    blank in the source row.
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
    date_valid: bool = True
    missing: List[str] = field(default_factory=list)

    def value(self, canonical: str) -> Any:
        return getattr(self, FIELD_ATTRIBUTES[canonical])

    def to_sample(self) -> WaterSample:
        """Build the immutable WaterSample.  Call only on a valid candidate."""
        return WaterSample(
            id=self.id,
            latitude=self.latitude,
            longitude=self.longitude,
            pb=self.pb,
            as_=self.as_,
            cd=self.cd,
            cr=self.cr,
            ni=self.ni,
            ph=self.ph,
            conductivity=self.conductivity,
            sample_date=self.sample_date,
            location=self.location,
            collected_by=self.collected_by,
            notes=self.notes,
        )


def candidate_from_row(
    row: Mapping[Any, Any],
    columns: Mapping[str, Any],
    position: int,
) -> SampleCandidate:
    """Build a candidate from a raw row using a resolved column map.

    Args:
        row: Source row, keyed by original header.
        columns: Canonical field -> source header, from ``resolve_columns``.
        position: 1-based position of the row, used for the default id.
    """
    def cell(canonical: str) -> Any:
        header = columns.get(canonical)
        return None if header is None else row.get(header)

    numbers: Dict[str, float] = {}
    missing: List[str] = []
    for name in NUMERIC_FIELDS:
        number = coerce_number(cell(name))
        if number is None:
            missing.append(name)
            number = MISSING_NUMERIC_DEFAULT
        numbers[FIELD_ATTRIBUTES[name]] = number

    sample_date, date_valid = parse_date(cell("sampleDate"))

    return SampleCandidate(
        id=coerce_text(cell("id")) or f"sample_{position}",
        sample_date=sample_date,
        location=coerce_text(cell("location")),
        collected_by=coerce_text(cell("collectedBy")),
        notes=coerce_text(cell("notes")),
        date_valid=date_valid,
        missing=missing,
        **numbers,
    )


def _finite(value: float) -> bool:
    return not (math.isnan(value) or math.isinf(value))


def validate_candidate(candidate: SampleCandidate, strict: bool = False) -> List[str]:
    """Check a candidate and return human-readable error messages.

    Rules:
        latitude, longitude: finite numbers.
        pb, as, cd, cr, ni: finite numbers >= 0.
        pH: finite number in [0, 14].
        conductivity: finite number >= 0.
        sampleDate: blank or a parseable date.

    Args:
        candidate: Coerced row.
        strict: Report absent/blank numeric fields instead of accepting
            the zero default.

    Returns:
        List of error messages; empty if the candidate is valid.
    """
    errors: List[str] = []
    for name in NUMERIC_FIELDS:
        if strict and name in candidate.missing:
            errors.append(f"Missing value for {name}")
            continue

        value = candidate.value(name)
        if not _finite(value):
            errors.append(FIELD_ERRORS[name])
        elif name == "pH" and not (PH_MIN <= value <= PH_MAX):
            errors.append(FIELD_ERRORS[name])
        elif name not in ("latitude", "longitude", "pH") and value < 0:
            errors.append(FIELD_ERRORS[name])

    if not candidate.date_valid:
        errors.append(DATE_ERROR)
    return errors
