"""
Water sample ingestion from delimited text, spreadsheets and JSON.

Each parser returns an ``IngestionResult``: the accepted samples plus a
list of ``"Row N: ..."`` messages for rows that failed validation.  A bad
row never aborts the import.  Structural problems (undecodable or
malformed container, missing required headers, unsupported format) raise
``ValueError`` and return nothing.
"""

import codecs
import csv
import io
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

import pandas as pd

from config import CSV_DELIMITERS, TEXT_ENCODINGS
from data.validation import (
    candidate_from_row,
    missing_required_columns,
    resolve_columns,
    validate_candidate,
)
from models.sample import WaterSample

logger = logging.getLogger("hmpi.ingestion")

COLUMN_COUNT_MISMATCH = "Column count mismatch"
INVALID_ENTRY = "Invalid data format"


@dataclass
class IngestionResult:
    """Accepted samples (input order) and row-level error messages."""

    samples: List[WaterSample] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        return len(self.samples)

    @property
    def rejected_count(self) -> int:
        return len(self.errors)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def decode_text(raw: bytes) -> str:
    """Decode uploaded bytes, honouring a UTF-16 byte-order mark.

    Falls through ``config.TEXT_ENCODINGS`` in order; the final latin-1
    entry accepts any byte sequence.
    """
    if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return raw.decode("utf-16")
    for encoding in TEXT_ENCODINGS:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode text with any of {TEXT_ENCODINGS}")


def _collect(
    rows: Iterable[Tuple[int, Union[Mapping[Any, Any], str]]],
    strict: bool,
    columns: Optional[Mapping[str, Any]] = None,
) -> IngestionResult:
    """Validate numbered rows into an IngestionResult.

    A row given as a string is a pre-validation error message for that row.
    Without a shared ``columns`` map, each row resolves its own headers.
    """
    result = IngestionResult()
    for row_number, row in rows:
        if isinstance(row, str):
            result.errors.append(f"Row {row_number}: {row}")
            continue

        row_columns = columns if columns is not None else resolve_columns(row.keys())
        candidate = candidate_from_row(row, row_columns, row_number)
        messages = validate_candidate(candidate, strict=strict)
        if messages:
            result.errors.append(f"Row {row_number}: {', '.join(messages)}")
        else:
            result.samples.append(candidate.to_sample())

    logger.info(
        "Accepted %d samples, rejected %d rows", result.accepted_count, result.rejected_count
    )
    for message in result.errors:
        logger.debug(message)
    return result


def _require_columns(headers: Iterable[Any], kind: str) -> Mapping[str, Any]:
    columns = resolve_columns(headers)
    missing = missing_required_columns(columns)
    if missing:
        raise ValueError(f"Missing required {kind} headers: {', '.join(missing)}")
    return columns


# ---------------------------------------------------------------------------
# Delimited text
# ---------------------------------------------------------------------------

def detect_delimiter(header_line: str) -> str:
    """Pick the candidate delimiter that occurs most often in the header."""
    counts = {d: header_line.count(d) for d in CSV_DELIMITERS}
    best = max(counts, key=counts.get)
    return best if counts[best] > 0 else ","


def parse_csv(text: str, delimiter: Optional[str] = None, strict: bool = False) -> IngestionResult:
    """
    Parse delimited text into water samples.

    Rows are numbered as non-blank lines of the file, header = row 1.

    Args:
        text: Decoded file contents.
        delimiter: Field separator; detected from the header if None.
        strict: Report blank numeric cells instead of defaulting them to 0.

    Returns:
        IngestionResult with accepted samples and row errors.

    Raises:
        ValueError: Fewer than two non-blank lines, malformed quoting, or
            missing required headers.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("CSV file must contain at least a header row and one data row")

    delimiter = delimiter or detect_delimiter(lines[0])
    try:
        records = [
            values
            for values in csv.reader(io.StringIO(text), delimiter=delimiter, strict=True)
            if any(v.strip() for v in values)
        ]
    except csv.Error as exc:
        raise ValueError(f"Failed to parse CSV file: {exc}") from exc
    if not records:
        raise ValueError("CSV file must contain at least a header row and one data row")

    header = [h.strip() for h in records[0]]
    columns = _require_columns(header, "CSV")
    if len(records) < 2:
        raise ValueError("CSV file must contain at least a header row and one data row")

    def rows():
        for row_number, values in enumerate(records[1:], start=2):
            if len(values) != len(header):
                yield row_number, COLUMN_COUNT_MISMATCH
            else:
                yield row_number, dict(zip(header, (v.strip() for v in values)))

    return _collect(rows(), strict, columns)


# ---------------------------------------------------------------------------
# Spreadsheet
# ---------------------------------------------------------------------------

def parse_excel(
    buffer: bytes, sheet_name: Union[int, str] = 0, strict: bool = False
) -> IngestionResult:
    """
    Parse one worksheet of an Excel workbook into water samples.

    Rows are numbered as worksheet rows, header = row 1.

    Args:
        buffer: Raw workbook bytes.
        sheet_name: Sheet index or name (default: first sheet).
        strict: Report blank numeric cells instead of defaulting them to 0.

    Raises:
        ValueError: Unreadable workbook, empty sheet, or missing required
            headers.
    """
    try:
        frame = pd.read_excel(io.BytesIO(buffer), sheet_name=sheet_name, dtype=object)
    except Exception as exc:
        raise ValueError(f"Failed to read Excel file: {exc}") from exc

    if len(frame.columns) == 0:
        raise ValueError("Spreadsheet must contain at least a header row and one data row")
    columns = _require_columns(frame.columns, "spreadsheet")

    frame = frame.dropna(how="all")
    if frame.empty:
        raise ValueError("Spreadsheet must contain at least a header row and one data row")
    rows = (
        (int(index) + 2, record)
        for index, record in zip(frame.index, frame.to_dict(orient="records"))
    )
    return _collect(rows, strict, columns)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def parse_json(text: str, strict: bool = False) -> IngestionResult:
    """
    Parse a JSON document into water samples.

    Accepts either ``{"samples": [...]}`` (the export/template layout) or
    a bare array.  Entries are numbered from 1, and each entry resolves
    its own keys through the alias table.

    Raises:
        ValueError: Malformed JSON or no samples array.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to parse JSON file: {exc}") from exc

    entries = data.get("samples") if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise ValueError("Invalid JSON format: missing or invalid samples array")

    rows = (
        (row_number, entry if isinstance(entry, dict) else INVALID_ENTRY)
        for row_number, entry in enumerate(entries, start=1)
    )
    return _collect(rows, strict)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

SPREADSHEET_SUFFIXES = (".xlsx", ".xls")
TEXT_SUFFIXES = (".csv", ".tsv", ".txt")


def load_samples(path: Union[str, Path], strict: bool = False) -> IngestionResult:
    """
    Read a sample file from disk, dispatching on its extension.

    Raises:
        ValueError: Unsupported extension or any structural parse failure.
        OSError: The file cannot be read.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    logger.info("Loading samples from %s", path)

    if suffix in SPREADSHEET_SUFFIXES:
        return parse_excel(path.read_bytes(), strict=strict)
    if suffix == ".json":
        return parse_json(decode_text(path.read_bytes()), strict=strict)
    if suffix in TEXT_SUFFIXES:
        delimiter = "\t" if suffix == ".tsv" else None
        return parse_csv(decode_text(path.read_bytes()), delimiter=delimiter, strict=strict)

    raise ValueError(
        f"Unsupported file format: {path.name}. Please use CSV, JSON, or Excel files."
    )
