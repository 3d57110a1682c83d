"""CSV input/output for product records."""

import csv
import logging
from pathlib import Path

import pandas as pd

from config import DESCRIPTION_COLUMN, PASSTHROUGH_COLUMNS, REQUIRED_COLUMNS
from models import EnhancedRecord, ProductRecord

logger = logging.getLogger(__name__)

OUTPUT_COLUMNS = [
    "item_id",
    "translated_name",
    "original_name",
    *PASSTHROUGH_COLUMNS,
    "extracted_code",
]


class RecordsFormatError(ValueError):
    """Raised when an input file cannot be turned into product records."""
    pass


def read_records(path: Path | str) -> list[ProductRecord]:
    """Read product records from a CSV file with a header row.

    Every cell is read as a string; rows with fewer cells than the header get
    empty values for the missing columns, and a trailing delimiter on each row
    is ignored.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    try:
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            skip_blank_lines=True,
            index_col=False,  # rows ending in a delimiter keep their columns
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError as e:
        raise RecordsFormatError(f"Input file is empty: {path}") from e
    except pd.errors.ParserError as e:
        raise RecordsFormatError(f"Cannot parse CSV {path}: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise RecordsFormatError(f"Missing required columns in {path}: {', '.join(missing)}")

    records = [ProductRecord.from_row(row) for row in df.to_dict(orient="records")]
    logger.debug(f"Read {len(records)} records from {path}")
    return records


def write_records(path: Path | str, records: list[EnhancedRecord]) -> None:
    """Write enhanced records; translated_name holds the enhanced name."""
    path = Path(path)
    with_description = any(r.description is not None for r in records)
    columns = list(OUTPUT_COLUMNS)
    if with_description:
        columns.insert(3, DESCRIPTION_COLUMN)

    rows = []
    for r in records:
        row = {
            "item_id": r.item_id,
            "translated_name": r.enhanced_name,
            "original_name": r.original_name,
            "collection_name": r.collection_name,
            "shopee_id": r.shopee_id,
            "extracted_code": r.extracted_code or "",
        }
        if with_description:
            row[DESCRIPTION_COLUMN] = r.description or ""
        rows.append(row)

    df = pd.DataFrame(rows, columns=columns)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, quoting=csv.QUOTE_ALL, encoding="utf-8")
    logger.debug(f"Wrote {len(df)} records to {path}")
