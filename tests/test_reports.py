from ocr_engine.digits import DigitSet
from ocr_engine.errors import AmbiguousGlyphError, MalformedFragmentError
from ocr_engine.models import Role
from ocr_engine.reports import (
    EMPTY_FILENAME_REPORT,
    RunReport,
    describe_error,
    explain_cell,
    report_on_filename,
    write_to_null,
)


def test_explain_cell_resolved():
    text = explain_cell(" _ ", "|_|", " _|")
    assert "- top    [ _ ] allows [0, 2, 3, 5, 6, 7, 8, 9]" in text
    assert "- middle [|_|] allows [4, 8, 9]" in text
    assert text.endswith("Therefore the cell could be [9].")


def test_explain_cell_unknown_fragment():
    text = explain_cell("X X", "|_|", " _|")
    assert "[X X] is not a known pattern" in text
    assert text.endswith("Therefore the cell cannot be decoded.")


def test_describe_ambiguous_and_malformed():
    ambiguous = AmbiguousGlyphError(DigitSet.of(8, 9), block=2, cell=7)
    assert describe_error(ambiguous) == "ERROR: Block 2, cell 7: glyph is ambiguous between [8, 9]."

    malformed = MalformedFragmentError(Role.BOTTOM, "|||", block=0, cell=1)
    assert describe_error(malformed) == "ERROR: Block 0, cell 1: bottom row [|||] is not a known pattern."
    assert malformed.to_dict()["role"] == "BOTTOM"


def test_report_on_filename_uses_failure_writer():
    seen = []
    assert report_on_filename(None, write_to_null, seen.append) is None
    assert seen == [EMPTY_FILENAME_REPORT]


def test_run_report_summary():
    report = RunReport(accounts=2, failures=1, halted=True)
    assert not report.ok
    assert report.summary == "Decoded 2 account(s), 1 failed. Stopped at first failure."
