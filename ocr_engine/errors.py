"""Classified decode errors.

Every error carries the block ordinal and cell index where they are known so
a presentation layer can point at the offending glyph. None of them imply a
halt/continue policy.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from ocr_engine.digits import DigitSet
from ocr_engine.models import Role


class ErrorKind(str, Enum):
    MALFORMED_FRAGMENT = "MALFORMED_FRAGMENT"
    INVALID_GLYPH = "INVALID_GLYPH"
    AMBIGUOUS_GLYPH = "AMBIGUOUS_GLYPH"
    TRUNCATED_BLOCK = "TRUNCATED_BLOCK"


class DecodeError(ValueError):
    kind: ErrorKind

    def __init__(self, detail: str, block: Optional[int] = None, cell: Optional[int] = None) -> None:
        self.detail = detail
        self.block = block
        self.cell = cell
        super().__init__(self._message())

    def _message(self) -> str:
        where = []
        if self.block is not None:
            where.append(f"block {self.block}")
        if self.cell is not None:
            where.append(f"cell {self.cell}")
        if not where:
            return self.detail
        return f"{self.detail} ({', '.join(where)})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "block": self.block,
            "cell": self.cell,
            "message": str(self),
        }


class MalformedFragmentError(DecodeError):
    kind = ErrorKind.MALFORMED_FRAGMENT

    def __init__(self, role: Role, fragment: str, block: Optional[int] = None, cell: Optional[int] = None) -> None:
        self.role = role
        self.fragment = fragment
        super().__init__(f"Invalid {role.value.lower()} row pattern [{fragment}]", block, cell)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({"role": self.role.value, "fragment": self.fragment})
        return data


class _GlyphError(DecodeError):
    label = ""

    def __init__(self, candidates: DigitSet, block: Optional[int] = None, cell: Optional[int] = None) -> None:
        self.candidates = candidates
        super().__init__(f"{self.label}: candidates {candidates.digits()}", block, cell)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["candidates"] = self.candidates.digits()
        return data


class InvalidGlyphError(_GlyphError):
    kind = ErrorKind.INVALID_GLYPH
    label = "No digit matches all three rows"


class AmbiguousGlyphError(_GlyphError):
    kind = ErrorKind.AMBIGUOUS_GLYPH
    label = "Glyph is ambiguous"


class TruncatedBlockError(DecodeError):
    kind = ErrorKind.TRUNCATED_BLOCK

    def __init__(self, rows_read: int, block: Optional[int] = None) -> None:
        self.rows_read = rows_read
        super().__init__(f"Input ended after {rows_read} of 3 rows", block, None)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["rows_read"] = self.rows_read
        return data
