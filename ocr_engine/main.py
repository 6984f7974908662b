import argparse
import os
from typing import List, Optional, TextIO

from ocr_engine.accounts import decode_blocks, lines_from_reader
from ocr_engine.config import ErrorPolicy, load_config
from ocr_engine.logging import configure_logging, get_logger
from ocr_engine.reports import (
    RunReport,
    describe_result,
    report_on_file,
    report_on_filename,
    write_to_console,
    write_to_null,
)

STATUS_SUCCESS = 0
STATUS_ERROR = 1

logger = get_logger(__name__)


def to_filename(raw: Optional[str]) -> Optional[str]:
    if raw is None or raw.strip() == "":
        return None
    return os.path.abspath(raw)


def open_file(filename: str) -> Optional[TextIO]:
    try:
        # Undecodable bytes become U+FFFD and surface as malformed fragments.
        return open(filename, "r", encoding="utf-8", errors="replace", newline="")
    except OSError:
        return None


def print_results(reader: TextIO, policy: ErrorPolicy, explain: bool) -> RunReport:
    accounts = 0
    failures = 0
    for result in decode_blocks(lines_from_reader(reader)):
        write_to_console(describe_result(result, explain=explain))
        if result.ok:
            accounts += 1
            continue
        failures += 1
        if policy == ErrorPolicy.HALT:
            return RunReport(accounts, failures, halted=True)
    return RunReport(accounts, failures, halted=False)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bank-ocr", description="Decode OCR glyph account numbers.")
    p.add_argument("filename", nargs="?", help="Text file with three-row glyph blocks")
    policy = p.add_mutually_exclusive_group()
    policy.add_argument("--keep-going", dest="policy", action="store_const", const=ErrorPolicy.SKIP,
                        help="Report a bad account and continue with the next one")
    policy.add_argument("--halt", dest="policy", action="store_const", const=ErrorPolicy.HALT,
                        help="Stop at the first bad account")
    p.add_argument("--verbose", action="store_true", help="Narrate file handling steps")
    p.add_argument("--explain", action="store_true", help="Explain which rows ruled out each candidate")
    p.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    configure_logging(args.log_level or config.log_level)
    policy = args.policy or config.error_policy

    success_writer = write_to_console if args.verbose else write_to_null
    failure_writer = write_to_console

    # 1) FILENAME
    filename = report_on_filename(to_filename(args.filename), success_writer, failure_writer)
    if filename is None:
        return STATUS_ERROR

    # 2) FILE
    reader = open_file(filename)
    if not report_on_file(reader is not None, success_writer, failure_writer):
        return STATUS_ERROR

    # 3) ACCOUNTS
    with reader:
        report = print_results(reader, policy, args.explain)

    success_writer(report.summary)
    logger.info("decode_finished", filename=filename, accounts=report.accounts,
                failures=report.failures, halted=report.halted)
    return STATUS_SUCCESS if report.ok else STATUS_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
