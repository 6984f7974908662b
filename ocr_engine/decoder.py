from __future__ import annotations

from typing import Dict, Iterable

from ocr_engine.digits import DigitSet
from ocr_engine.errors import MalformedFragmentError
from ocr_engine.models import CellResult, CellStatus, Role

D = DigitSet.of

# ------------------ row shape tables ------------------
# Each row of the font is shared by several digits; only all three rows
# together pick out one digit.
TOP_ROW: Dict[str, DigitSet] = {
    " _ ": D(0) | D(2) | D(3) | D(5) | D(6) | D(7) | D(8) | D(9),
    "   ": D(1) | D(4),
}

MIDDLE_ROW: Dict[str, DigitSet] = {
    "| |": D(0),
    "  |": D(1) | D(7),
    " _|": D(2) | D(3),
    "|_|": D(4) | D(8) | D(9),
    "|_ ": D(5) | D(6),
}

BOTTOM_ROW: Dict[str, DigitSet] = {
    "|_|": D(0) | D(6) | D(8),
    "  |": D(1) | D(4) | D(7),
    "|_ ": D(2),
    " _|": D(3) | D(5) | D(9),
}

ROW_TABLES: Dict[Role, Dict[str, DigitSet]] = {
    Role.TOP: TOP_ROW,
    Role.MIDDLE: MIDDLE_ROW,
    Role.BOTTOM: BOTTOM_ROW,
}


# ------------------ public API ------------------
def row_candidates(role: Role, fragment: str) -> DigitSet:
    """Digits consistent with one row fragment on its own."""
    candidates = ROW_TABLES[Role(role)].get(fragment)
    if candidates is None:
        raise MalformedFragmentError(Role(role), fragment)
    return candidates


def narrow(candidate_sets: Iterable[DigitSet]) -> DigitSet:
    acc = DigitSet.universal()
    for candidates in candidate_sets:
        acc = acc & candidates
    return acc


def classify(candidates: DigitSet) -> CellResult:
    n = len(candidates)
    if n == 1:
        return CellResult(CellStatus.RESOLVED, candidates, candidates.single())
    if n == 0:
        return CellResult(CellStatus.INVALID, candidates)
    return CellResult(CellStatus.AMBIGUOUS, candidates)


def decode_cell(top: str, middle: str, bottom: str) -> CellResult:
    """
    Resolve one glyph cell from its three row fragments.
    Raises MalformedFragmentError for a fragment outside its row's table;
    invalid and ambiguous cells are reported through CellResult.status.
    """
    rows = ((Role.TOP, top), (Role.MIDDLE, middle), (Role.BOTTOM, bottom))
    return classify(narrow(row_candidates(role, fragment) for role, fragment in rows))
