import pytest

from ocr_engine.accounts import decode_block, parse_accounts
from ocr_engine.decoder import decode_cell
from ocr_engine.glyphs import GLYPHS, render_account, render_accounts, render_digit


def test_render_digit_round_trip():
    for digit in range(10):
        assert decode_cell(*render_digit(digit)).digit == digit


def test_render_account_rows_are_27_wide():
    rows = render_account("123456789")
    assert [len(r) for r in rows] == [27, 27, 27]
    assert rows[0] == "    _  _     _  _  _  _  _ "
    assert decode_block(*rows).number == "123456789"


def test_render_accounts_separates_blocks():
    lines = render_accounts(["345882865", "664371495"])
    assert lines[3] == ""
    assert len(lines) == 7
    assert [a.number for a in parse_accounts(lines)] == ["345882865", "664371495"]


@pytest.mark.parametrize("number", ["12345678", "1234567890", "12345678a", ""])
def test_render_rejects_bad_numbers(number):
    with pytest.raises(ValueError):
        render_account(number)


def test_glyph_table_covers_all_digits():
    assert sorted(GLYPHS) == list(range(10))
