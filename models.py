"""Data models for product records."""

import math
from dataclasses import dataclass, fields, replace
from typing import Optional


def _clean(value) -> str:
    """Turn a raw CSV cell (possibly None/NaN) into a stripped string."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class ProductRecord:
    item_id: str
    translated_name: str
    original_name: str
    description: Optional[str] = None
    collection_name: str = ""
    shopee_id: str = ""

    @classmethod
    def from_row(cls, row: dict) -> "ProductRecord":
        """Build a record from a CSV row dict, tolerating missing cells."""
        description = _clean(row.get("description"))
        return cls(
            item_id=_clean(row.get("item_id")),
            translated_name=_clean(row.get("translated_name")),
            original_name=_clean(row.get("original_name")),
            description=description or None,
            collection_name=_clean(row.get("collection_name")),
            shopee_id=_clean(row.get("shopee_id")),
        )

    def input_fields(self) -> dict:
        """Only the input columns, also when called on an EnhancedRecord."""
        return {f.name: getattr(self, f.name) for f in fields(ProductRecord)}


@dataclass(frozen=True, kw_only=True)
class EnhancedRecord(ProductRecord):
    enhanced_name: str
    extracted_code: Optional[str] = None
    code_source: str = ""  # '' | 'original_name' | 'description'
    pattern: int = 0  # 0 when no code was found

    def __post_init__(self):
        if self.extracted_code is None:
            if self.enhanced_name != self.translated_name:
                raise ValueError("enhanced_name must equal translated_name when no code was found")
        elif not self.extracted_code or self.extracted_code not in self.enhanced_name:
            raise ValueError(f"enhanced_name must contain the code {self.extracted_code!r}")

    @property
    def has_code(self) -> bool:
        return self.extracted_code is not None

    def as_product_record(self) -> ProductRecord:
        """The record as it is written out: enhanced_name becomes translated_name."""
        return ProductRecord(**replace(self, translated_name=self.enhanced_name).input_fields())
