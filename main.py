#!/usr/bin/env python3
"""
Heavy-Metal Water Quality Scoring: command-line entry point.

Ingests a sample file (CSV, JSON or Excel), scores every accepted sample
and prints a batch summary plus any rejected rows.

Usage:
    python main.py samples.csv
    python main.py samples.xlsx --strict --export-json results.json
    python main.py --demo 50 --seed 42 --export-csv demo.csv
    python main.py --template csv > template.csv
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from data.demo_data import generate_sample_data
from data.export import export_csv, export_json, summary_text, template_csv, template_json
from data.ingestion import load_samples
from scoring.processor import process_batch

logger = logging.getLogger("hmpi")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Heavy-metal water quality scoring")
    parser.add_argument("path", nargs="?", help="Sample file (.csv, .tsv, .txt, .json, .xlsx, .xls)")
    parser.add_argument("--strict", action="store_true",
                        help="Reject rows with blank numeric cells instead of reading them as 0")
    parser.add_argument("--demo", type=int, metavar="N", help="Score N generated demo samples")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --demo")
    parser.add_argument("--template", choices=("csv", "json"), help="Print an input template and exit")
    parser.add_argument("--export-json", metavar="FILE", help="Write the processed batch as JSON")
    parser.add_argument("--export-csv", metavar="FILE", help="Write the accepted samples as CSV")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log rejected rows")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.template:
        print(template_csv() if args.template == "csv" else template_json())
        return 0

    if args.demo is None and not args.path:
        parser.error("a sample file path or --demo N is required")

    errors: List[str] = []
    try:
        if args.demo is not None:
            samples = generate_sample_data(args.demo, seed=args.seed)
        else:
            ingested = load_samples(args.path, strict=args.strict)
            samples, errors = ingested.samples, ingested.errors
        processed = process_batch(samples)
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    print(summary_text(processed))
    if errors:
        print(f"\n{len(errors)} rows had errors and were skipped:")
        for message in errors:
            print(f"  {message}")

    if args.export_json:
        Path(args.export_json).write_text(export_json(processed), encoding="utf-8")
        logger.info("Wrote %s", args.export_json)
    if args.export_csv:
        Path(args.export_csv).write_text(export_csv(processed.samples), encoding="utf-8")
        logger.info("Wrote %s", args.export_csv)

    return 0


if __name__ == "__main__":
    sys.exit(main())
