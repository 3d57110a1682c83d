"""Product code extraction from Japanese product listings."""

from extraction.extractor import (
    ExtractionPolicy,
    enhance_name,
    enhance_record,
    enhance_records,
    extract_product_code,
)
from extraction.models import CodeSource, ExtractionResult, Found, NotFound, PatternId
from extraction.rules import extract_from_description, extract_from_original_name

__all__ = [
    "CodeSource",
    "ExtractionPolicy",
    "ExtractionResult",
    "Found",
    "NotFound",
    "PatternId",
    "enhance_name",
    "enhance_record",
    "enhance_records",
    "extract_from_description",
    "extract_from_original_name",
    "extract_product_code",
]
