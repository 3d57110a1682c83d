"""Record-level orchestration: pick a code for a record and append it to the name."""

import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Iterable

from config import CODE_SEPARATOR
from extraction.loose import extract_loose
from extraction.models import NOT_FOUND, ExtractionResult
from extraction.rules import extract_from_description, extract_from_original_name
from models import EnhancedRecord, ProductRecord

logger = logging.getLogger(__name__)


class ExtractionPolicy(str, Enum):
    STRICT = "strict"  # canonical 12-char rules + 【型番】 in description
    LOOSE = "loose"  # 8-15 char heuristic on original_name only


def extract_product_code(
    record: ProductRecord, policy: ExtractionPolicy = ExtractionPolicy.STRICT
) -> ExtractionResult:
    """Resolve the product code for a record.

    original_name always wins over description, whichever rule fired.
    """
    if ExtractionPolicy(policy) is ExtractionPolicy.LOOSE:
        return extract_loose(record.original_name)

    result = extract_from_original_name(record.original_name)
    if result.found:
        return result

    if record.description:
        return extract_from_description(record.description)

    return NOT_FOUND


def enhance_name(translated_name: str, result: ExtractionResult) -> str:
    """Append the code to the translated name unless it is already there."""
    if not result.found:
        return translated_name
    # Covers both a bare code and an already appended " - CODE"
    if result.code in translated_name:
        return translated_name
    return f"{translated_name}{CODE_SEPARATOR}{result.code}"


def enhance_record(
    record: ProductRecord, policy: ExtractionPolicy = ExtractionPolicy.STRICT
) -> EnhancedRecord:
    """Extract a code for the record and build its enhanced copy."""
    result = extract_product_code(record, policy)
    if result.found:
        logger.debug(
            f"[{record.item_id}] {result.code} from {result.source.value} "
            f"(pattern {int(result.pattern)})"
        )

    return EnhancedRecord(
        **record.input_fields(),
        enhanced_name=enhance_name(record.translated_name, result),
        extracted_code=result.code,
        code_source=result.source.value,
        pattern=int(result.pattern),
    )


def enhance_records(
    records: Iterable[ProductRecord],
    policy: ExtractionPolicy = ExtractionPolicy.STRICT,
    workers: int = 1,
) -> list[EnhancedRecord]:
    """Enhance a batch of records, keeping input order.

    Records are independent, so workers > 1 just spreads them over a thread pool.
    """
    if workers <= 1:
        return [enhance_record(r, policy) for r in records]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda r: enhance_record(r, policy), records))
