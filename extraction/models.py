"""Pydantic models for product code extraction results."""

from enum import Enum, IntEnum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CodeSource(str, Enum):
    """Record field a code was taken from."""

    NONE = ""
    ORIGINAL_NAME = "original_name"
    DESCRIPTION = "description"


class PatternId(IntEnum):
    """Rule that produced a match (kept for diagnostics and reports)."""

    NONE = 0
    AFTER_COLOR = 1  # ゴールド 2020324D0039・
    AFTER_DASH = 2  # - 2020324A0037・
    AFTER_SIZE = 3  # EU37(23.5cm位) 4104125G0002・
    DESCRIPTION_LABEL = 4  # 【型番】4M00160
    LOOSE = 5  # loose compatibility policy


class Found(BaseModel):
    """A code accepted by one of the rules."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    source: CodeSource
    pattern: PatternId

    @field_validator("source", "pattern")
    @classmethod
    def must_be_tagged(cls, value):
        if value in (CodeSource.NONE, PatternId.NONE):
            raise ValueError("a found code needs a source and a pattern")
        return value

    @property
    def found(self) -> bool:
        return True


class NotFound(BaseModel):
    """No rule accepted anything. Mirrors Found's fields as empty values."""

    model_config = ConfigDict(frozen=True)

    @property
    def found(self) -> bool:
        return False

    @property
    def code(self) -> Optional[str]:
        return None

    @property
    def source(self) -> CodeSource:
        return CodeSource.NONE

    @property
    def pattern(self) -> PatternId:
        return PatternId.NONE


ExtractionResult = Union[Found, NotFound]

NOT_FOUND = NotFound()
