from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional

from ocr_engine.accounts import cell_fragments
from ocr_engine.decoder import ROW_TABLES, narrow
from ocr_engine.errors import (
    AmbiguousGlyphError,
    DecodeError,
    InvalidGlyphError,
    MalformedFragmentError,
    TruncatedBlockError,
)
from ocr_engine.models import BlockResult, Role

Writer = Callable[[str], str]

HAVE_FILENAME_REPORT = "Attempting to read file: {0}"
EMPTY_FILENAME_REPORT = "ERROR: No file name given."
HAVE_LINES_REPORT = "File opened."
EMPTY_LINES_REPORT = "ERROR: Could not open file."


# ------------------ writers ------------------
def write_to_console(text: str) -> str:
    print(text)
    return text


def write_to_null(text: str) -> str:
    return text


@dataclass(frozen=True)
class RunReport:
    accounts: int
    failures: int
    halted: bool

    @property
    def ok(self) -> bool:
        return self.failures == 0

    @property
    def summary(self) -> str:
        text = f"Decoded {self.accounts} account(s), {self.failures} failed."
        if self.halted:
            text += " Stopped at first failure."
        return text


def report_on_filename(filename: Optional[str], success: Writer, failure: Writer) -> Optional[str]:
    if filename is None:
        failure(EMPTY_FILENAME_REPORT)
    else:
        success(HAVE_FILENAME_REPORT.format(filename))
    return filename


def report_on_file(opened: bool, success: Writer, failure: Writer) -> bool:
    if opened:
        success(HAVE_LINES_REPORT)
    else:
        failure(EMPTY_LINES_REPORT)
    return opened


def explain_cell(top: str, middle: str, bottom: str) -> str:
    """
    Row-by-row narration of how the candidate set for one cell was narrowed.
    Unknown fragments are listed as allowing nothing.
    """
    lines: List[str] = []
    sets = []
    for role, fragment in ((Role.TOP, top), (Role.MIDDLE, middle), (Role.BOTTOM, bottom)):
        candidates = ROW_TABLES[role].get(fragment)
        if candidates is None:
            lines.append(f"- {role.value.lower():<6} [{fragment}] is not a known pattern")
            continue
        sets.append(candidates)
        lines.append(f"- {role.value.lower():<6} [{fragment}] allows {candidates.digits()}")
    remaining = narrow(sets) if len(sets) == 3 else None
    if remaining is None:
        lines.append("Therefore the cell cannot be decoded.")
    elif remaining.is_empty():
        lines.append("Therefore no digit matches all three rows.")
    else:
        lines.append(f"Therefore the cell could be {remaining.digits()}.")
    return "\n".join(lines)


def describe_error(error: DecodeError) -> str:
    if isinstance(error, TruncatedBlockError):
        return f"ERROR: Block {error.block} is incomplete: only {error.rows_read} of 3 rows were read."
    if isinstance(error, MalformedFragmentError):
        return (
            f"ERROR: Block {error.block}, cell {error.cell}: "
            f"{error.role.value.lower()} row [{error.fragment}] is not a known pattern."
        )
    if isinstance(error, InvalidGlyphError):
        return f"ERROR: Block {error.block}, cell {error.cell}: no digit matches all three rows."
    if isinstance(error, AmbiguousGlyphError):
        return (
            f"ERROR: Block {error.block}, cell {error.cell}: "
            f"glyph is ambiguous between {error.candidates.digits()}."
        )
    return f"ERROR: {error}"


def describe_result(result: BlockResult, explain: bool = False) -> str:
    """
    One output line per block: the account number, or the error description.
    With explain, cell failures get an explain_cell narration.
    """
    if result.ok:
        return result.account.number
    text = describe_error(result.error)
    if explain and result.error.cell is not None and len(result.rows) == 3:
        text += "\n" + explain_cell(*cell_fragments(*result.rows, result.error.cell))
    return text
