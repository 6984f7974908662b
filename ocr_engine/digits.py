from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List

DIGITS = range(10)

FULL_MASK = (1 << 10) - 1  # 0b1111111111


def bit(d: int) -> int:
    if d not in DIGITS:
        raise ValueError(f"Digit must be 0..9, got {d!r}")
    return 1 << d


def popcount(mask: int) -> int:
    return mask.bit_count()


def mask_to_digits(mask: int) -> List[int]:
    return [d for d in DIGITS if mask & (1 << d)]


@dataclass(frozen=True)
class DigitSet:
    """
    Set of candidate digits for one glyph cell.
    - mask bit d set = digit d still possible
    - | is union (one row shape shared by several digits)
    - & is intersection (evidence from another row of the same cell)
    """

    mask: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.mask, int) or self.mask & ~FULL_MASK or self.mask < 0:
            raise ValueError(f"Mask must fit in 10 bits, got {self.mask!r}")

    @staticmethod
    def of(*digits: int) -> "DigitSet":
        mask = 0
        for d in digits:
            mask |= bit(d)
        return DigitSet(mask)

    @staticmethod
    def empty() -> "DigitSet":
        return DigitSet(0)

    @staticmethod
    def universal() -> "DigitSet":
        # Identity for intersection: no row applied yet.
        return DigitSet(FULL_MASK)

    def __or__(self, other: "DigitSet") -> "DigitSet":
        if not isinstance(other, DigitSet):
            return NotImplemented
        return DigitSet(self.mask | other.mask)

    def __and__(self, other: "DigitSet") -> "DigitSet":
        if not isinstance(other, DigitSet):
            return NotImplemented
        return DigitSet(self.mask & other.mask)

    def __len__(self) -> int:
        return popcount(self.mask)

    def __iter__(self) -> Iterator[int]:
        return iter(mask_to_digits(self.mask))

    def __contains__(self, d: object) -> bool:
        return isinstance(d, int) and d in DIGITS and bool(self.mask & (1 << d))

    def digits(self) -> List[int]:
        return mask_to_digits(self.mask)

    def is_empty(self) -> bool:
        return self.mask == 0

    def single(self) -> int:
        """Return the only digit in the set."""
        if popcount(self.mask) != 1:
            raise ValueError(f"Expected exactly one candidate, got {self.digits()}")
        return self.mask.bit_length() - 1

    def __repr__(self) -> str:
        return f"DigitSet({self.digits()})"
