from __future__ import annotations

from typing import Iterable, Iterator, List, TextIO, Tuple

from ocr_engine.decoder import decode_cell
from ocr_engine.errors import (
    AmbiguousGlyphError,
    DecodeError,
    InvalidGlyphError,
    MalformedFragmentError,
    TruncatedBlockError,
)
from ocr_engine.logging import get_logger
from ocr_engine.models import ACCOUNT_LENGTH, Account, BlockResult, CellStatus

CELLS_PER_ACCOUNT = ACCOUNT_LENGTH
CELL_WIDTH = 3

logger = get_logger(__name__)


# ------------------ line source ------------------
def lines_from_reader(reader: TextIO) -> Iterator[str]:
    # Only the terminator is removed; trailing spaces are glyph data.
    for line in reader:
        yield line.rstrip("\r\n")


# ------------------ block helpers ------------------
def cell_fragments(top: str, middle: str, bottom: str, index: int) -> Tuple[str, str, str]:
    offset = index * CELL_WIDTH
    return (
        top[offset:offset + CELL_WIDTH],
        middle[offset:offset + CELL_WIDTH],
        bottom[offset:offset + CELL_WIDTH],
    )


def decode_block(top: str, middle: str, bottom: str, block: int = 0) -> Account:
    """
    Decode one three-row block into an Account.
    The first cell that is malformed, invalid or ambiguous aborts the block
    with a DecodeError tagged with this block ordinal and the cell index.
    """
    digits: List[int] = []
    for i in range(CELLS_PER_ACCOUNT):
        try:
            result = decode_cell(*cell_fragments(top, middle, bottom, i))
        except MalformedFragmentError as exc:
            raise MalformedFragmentError(exc.role, exc.fragment, block=block, cell=i) from exc

        if result.status == CellStatus.INVALID:
            raise InvalidGlyphError(result.candidates, block=block, cell=i)
        if result.status == CellStatus.AMBIGUOUS:
            raise AmbiguousGlyphError(result.candidates, block=block, cell=i)
        digits.append(result.digit)

    return Account(tuple(digits))


# ------------------ public API ------------------
def decode_blocks(lines: Iterable[str]) -> Iterator[BlockResult]:
    """
    Lazily decode a line stream, one BlockResult per three-row block.

    A bad block is yielded as an error and the next block is still decoded;
    a stream that ends inside a block yields a TruncatedBlockError and stops.
    Exactly one separator line is discarded between blocks without checking
    its content.
    """
    source = iter(lines)
    block = 0

    while True:
        top = next(source, None)
        if top is None:
            return

        middle = next(source, None)
        bottom = next(source, None) if middle is not None else None
        if middle is None or bottom is None:
            rows_read = 1 if middle is None else 2
            error = TruncatedBlockError(rows_read, block=block)
            logger.warning("block_rejected", block=block, kind=error.kind.value, error=str(error))
            yield BlockResult(block, error=error, rows=(top,) if middle is None else (top, middle))
            return

        rows = (top, middle, bottom)
        try:
            account = decode_block(*rows, block=block)
        except DecodeError as exc:
            logger.warning("block_rejected", block=block, kind=exc.kind.value, error=str(exc))
            yield BlockResult(block, error=exc, rows=rows)
        else:
            logger.debug("block_decoded", block=block, account=account.number)
            yield BlockResult(block, account=account, rows=rows)

        separator = next(source, None)
        if separator is None:
            return
        if separator.strip():
            logger.debug("separator_not_blank", block=block, line=separator)
        block += 1


def parse_accounts(lines: Iterable[str]) -> Iterator[Account]:
    """Strict variant of decode_blocks: yields accounts, raises the first error."""
    for result in decode_blocks(lines):
        if result.error is not None:
            raise result.error
        yield result.account
