"""Extraction statistics and the plain-text extraction report."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

import pandas as pd

from config import REPORT_PREVIEW_CHARS, REPORT_SAMPLE_SIZE
from models import EnhancedRecord

_PATTERN_LABELS = {
    1: "after color",
    2: "after dash",
    3: "after size",
    4: "description 【型番】",
    5: "loose",
}


@dataclass
class ExtractionStats:
    total: int
    extracted: int
    not_found: int
    rate: float  # percentage 0..100
    length_distribution: dict[int, int] = field(default_factory=dict)
    pattern_counts: dict[int, int] = field(default_factory=dict)
    source_counts: dict[str, int] = field(default_factory=dict)


def _to_frame(records: list[EnhancedRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "extracted_code": r.extracted_code,
                "code_source": r.code_source,
                "pattern": r.pattern,
            }
            for r in records
        ],
        columns=["extracted_code", "code_source", "pattern"],
    )


def compute_stats(records: list[EnhancedRecord]) -> ExtractionStats:
    """Summarise a batch of enhanced records."""
    df = _to_frame(records)
    found = df[df["extracted_code"].notna()]

    total = len(df)
    extracted = len(found)
    rate = (extracted / total * 100) if total else 0.0

    lengths = found["extracted_code"].str.len().value_counts().sort_index()
    patterns = found.groupby("pattern").size().sort_index()
    sources = found.groupby("code_source").size().sort_index()

    return ExtractionStats(
        total=total,
        extracted=extracted,
        not_found=total - extracted,
        rate=rate,
        length_distribution={int(k): int(v) for k, v in lengths.items()},
        pattern_counts={int(k): int(v) for k, v in patterns.items()},
        source_counts={str(k): int(v) for k, v in sources.items()},
    )


def format_rate(stats: ExtractionStats) -> str:
    return f"{stats.rate:.2f}"


def _preview(text: str) -> str:
    return f"{text[:REPORT_PREVIEW_CHARS]}..."


def build_report(
    records: list[EnhancedRecord],
    generated_at: Optional[datetime] = None,
    sample_size: int = REPORT_SAMPLE_SIZE,
) -> str:
    """Render the extraction report.

    Sections: summary, successful samples, failed samples, code length
    distribution and a breakdown by rule and source field.
    """
    stats = compute_stats(records)
    generated_at = generated_at or datetime.now(timezone.utc)
    lines: list[str] = []

    lines.append("Product Code Extraction Report")
    lines.append("==============================\n")
    lines.append(f"Generated: {generated_at.isoformat()}\n")

    lines.append("Summary Statistics:")
    lines.append(f"  Total records processed: {stats.total}")
    lines.append(f"  Codes successfully extracted: {stats.extracted}")
    lines.append(f"  Codes not found: {stats.not_found}")
    lines.append(f"  Extraction success rate: {format_rate(stats)}%\n")

    lines.append(f"\nSample Successful Extractions (first {sample_size}):")
    lines.append("==========================================\n")
    successful = [r for r in records if r.has_code][:sample_size]
    for i, r in enumerate(successful, 1):
        lines.append(f"{i}. Item ID: {r.item_id}")
        lines.append(f"   Original: {_preview(r.original_name)}")
        lines.append(f"   Code: {r.extracted_code}")
        lines.append(f"   Enhanced: {r.enhanced_name}")
        lines.append("")

    lines.append(f"\nSample Failed Extractions (first {sample_size}):")
    lines.append("======================================\n")
    failed = [r for r in records if not r.has_code][:sample_size]
    for i, r in enumerate(failed, 1):
        lines.append(f"{i}. Item ID: {r.item_id}")
        lines.append(f"   Original: {_preview(r.original_name)}")
        lines.append(f"   Translated: {r.translated_name}")
        lines.append("")

    lines.append("\nExtracted Code Pattern Analysis:")
    lines.append("================================\n")
    lines.append("Code length distribution:")
    for length, count in stats.length_distribution.items():
        lines.append(f"  {length} characters: {count} codes")

    lines.append("\nCodes by rule:")
    for pattern, count in stats.pattern_counts.items():
        label = _PATTERN_LABELS.get(pattern, str(pattern))
        lines.append(f"  Pattern {pattern} ({label}): {count} codes")

    lines.append("\nCodes by source field:")
    for source, count in stats.source_counts.items():
        lines.append(f"  {source}: {count} codes")

    return "\n".join(lines)
