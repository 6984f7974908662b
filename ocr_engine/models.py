from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from ocr_engine.digits import DIGITS, DigitSet

if TYPE_CHECKING:
    from ocr_engine.errors import DecodeError

ACCOUNT_LENGTH = 9


class Role(str, Enum):
    TOP = "TOP"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"


class CellStatus(str, Enum):
    RESOLVED = "RESOLVED"
    INVALID = "INVALID"
    AMBIGUOUS = "AMBIGUOUS"


@dataclass(frozen=True)
class CellResult:
    status: CellStatus
    candidates: DigitSet
    digit: Optional[int] = None

    @property
    def is_resolved(self) -> bool:
        return self.status == CellStatus.RESOLVED


@dataclass(frozen=True)
class Account:
    digits: Tuple[int, ...]

    def __post_init__(self) -> None:
        digits = tuple(self.digits)
        if len(digits) != ACCOUNT_LENGTH:
            raise ValueError(f"Expected {ACCOUNT_LENGTH} digits, got {len(digits)}")
        if any(type(d) != int or d not in DIGITS for d in digits):
            raise ValueError(f"Each digit must be an int from 0 to 9, got {digits}")
        object.__setattr__(self, "digits", digits)

    @staticmethod
    def from_number(number: str) -> "Account":
        number = (number or "").strip()
        if not number.isdigit() or not number.isascii():
            raise ValueError(f"Account number must contain only digits, got {number!r}")
        return Account(tuple(int(ch) for ch in number))

    @property
    def number(self) -> str:
        return "".join(str(d) for d in self.digits)

    def __str__(self) -> str:
        return self.number


@dataclass(frozen=True)
class BlockResult:
    block: int
    account: Optional[Account] = None
    error: Optional["DecodeError"] = None
    rows: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None and self.account is not None
