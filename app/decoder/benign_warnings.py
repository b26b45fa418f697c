"""Scoped suppression of known-harmless PDF parser warnings.

Parsers complain loudly about damaged font tables ("TT: undefined function",
missing FontBBox, ...) even though text extraction succeeds. Only those
messages are dropped; everything else still reaches the log.
"""

import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager

BENIGN_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"undefined function", re.IGNORECASE),
    re.compile(r"FontBBox", re.IGNORECASE),
    re.compile(r"font descriptor", re.IGNORECASE),
    re.compile(r"unknown glyph|glyph .* not found", re.IGNORECASE),
    re.compile(r"Cannot set (gray|color)", re.IGNORECASE),
)

PDF_LOGGER_NAMES: tuple[str, ...] = (
    "pdfminer",
    "pdfminer.pdffont",
    "pdfminer.pdfinterp",
    "pdfminer.pdfpage",
    "pdfminer.pdfdocument",
    "pdfminer.psparser",
    "pdfminer.cmapdb",
    "pdfplumber",
)


def is_benign(message: str) -> bool:
    return any(pattern.search(message) for pattern in BENIGN_PATTERNS)


class BenignWarningFilter(logging.Filter):
    """Drops log records whose message matches a benign pattern."""

    def __init__(self) -> None:
        super().__init__()
        self.suppressed = 0

    def filter(self, record: logging.LogRecord) -> bool:
        if is_benign(record.getMessage()):
            self.suppressed += 1
            return False
        return True


@contextmanager
def suppress_benign_warnings(
    logger_names: tuple[str, ...] = PDF_LOGGER_NAMES,
) -> Iterator[BenignWarningFilter]:
    """Attach a BenignWarningFilter to the parser loggers for the block's duration."""
    benign_filter = BenignWarningFilter()
    loggers = [logging.getLogger(name) for name in logger_names]
    for logger in loggers:
        logger.addFilter(benign_filter)
    try:
        yield benign_filter
    finally:
        for logger in loggers:
            logger.removeFilter(benign_filter)
