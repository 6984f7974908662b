from ocr_engine.logging import configure_logging

# Route structlog through stdlib logging before any module logger is first used,
# so log lines never land on the captured stdout of the CLI tests.
configure_logging("WARNING")
