#!/usr/bin/env python3
"""Main entry point for product code extraction."""

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

from config import (
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_REPORT_FILE,
    EXTRACTION_POLICY,
    EXTRACTION_WORKERS,
    REPORT_SAMPLE_SIZE,
)
from analytics.report import build_report, compute_stats, format_rate
from extraction import ExtractionPolicy, enhance_records
from records_io import RecordsFormatError, read_records, write_records

logger = logging.getLogger(__name__)


def run(
    input_path: Path,
    output_path: Path,
    report_path: Path,
    policy: ExtractionPolicy = ExtractionPolicy.STRICT,
    workers: int = 1,
    sample_size: int = REPORT_SAMPLE_SIZE,
) -> int:
    """Read, extract, write. Returns the number of records processed."""
    logger.info(f"Reading input file: {input_path}")
    records = read_records(input_path)
    logger.info(f"Found {len(records)} records")

    logger.info(f"Extracting product codes ({policy.value} policy)...")
    enhanced = enhance_records(records, policy=policy, workers=workers)

    stats = compute_stats(enhanced)
    logger.info(
        f"=== {stats.extracted}/{stats.total} codes extracted, "
        f"{stats.not_found} not found ({format_rate(stats)}%) ==="
    )

    logger.info(f"Writing enhanced CSV to: {output_path}")
    write_records(output_path, enhanced)

    logger.info(f"Writing extraction report to: {report_path}")
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(build_report(enhanced, sample_size=sample_size), encoding="utf-8")

    return len(enhanced)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Extract product codes from listings and append them to translated names"
    )
    parser.add_argument(
        "input", nargs="?", default=DEFAULT_INPUT_FILE, help="Input CSV file"
    )
    parser.add_argument(
        "--output", default=DEFAULT_OUTPUT_FILE, help="Enhanced CSV to write"
    )
    parser.add_argument(
        "--report", default=DEFAULT_REPORT_FILE, help="Plain-text report to write"
    )
    parser.add_argument(
        "--policy",
        choices=[p.value for p in ExtractionPolicy],
        default=EXTRACTION_POLICY,
        help="strict: canonical 12-char codes (default); loose: 8-15 char heuristic",
    )
    parser.add_argument(
        "--workers", type=int, default=EXTRACTION_WORKERS, help="Threads used for extraction"
    )
    parser.add_argument(
        "--sample-size", type=int, default=REPORT_SAMPLE_SIZE, help="Samples listed per report section"
    )
    args = parser.parse_args(argv)
    if args.policy not in {p.value for p in ExtractionPolicy}:
        parser.error(f"unknown policy: {args.policy}")

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        run(
            Path(args.input),
            Path(args.output),
            Path(args.report),
            policy=ExtractionPolicy(args.policy),
            workers=args.workers,
            sample_size=args.sample_size,
        )
    except (RecordsFormatError, UnicodeDecodeError, OSError) as e:
        logger.error(f"Extraction failed: {e}")
        return 1

    logger.info("Processing complete.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
