from __future__ import annotations
from typing import Dict, Iterable, List, Tuple

from ocr_engine.models import Account

Glyph = Tuple[str, str, str]  # (top, middle, bottom)

GLYPHS: Dict[int, Glyph] = {
    0: (" _ ", "| |", "|_|"),
    1: ("   ", "  |", "  |"),
    2: (" _ ", " _|", "|_ "),
    3: (" _ ", " _|", " _|"),
    4: ("   ", "|_|", "  |"),
    5: (" _ ", "|_ ", " _|"),
    6: (" _ ", "|_ ", "|_|"),
    7: (" _ ", "  |", "  |"),
    8: (" _ ", "|_|", "|_|"),
    9: (" _ ", "|_|", " _|"),
}


def render_digit(d: int) -> Glyph:
    if d not in GLYPHS:
        raise ValueError(f"Digit must be 0..9, got {d!r}")
    return GLYPHS[d]


def render_account(number: str) -> List[str]:
    """Three glyph rows for one 9-digit account number."""
    account = Account.from_number(number)
    rows = ["", "", ""]
    for d in account.digits:
        for i, fragment in enumerate(render_digit(d)):
            rows[i] += fragment
    return rows


def render_accounts(numbers: Iterable[str]) -> List[str]:
    lines: List[str] = []
    for i, number in enumerate(numbers):
        if i > 0:
            lines.append("")
        lines.extend(render_account(number))
    return lines
