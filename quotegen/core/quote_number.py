"""Sequential quotation numbers.

Quote numbers have the shape ``AC<YY><MM><SSS>``: the literal prefix ``AC``,
a two digit year, a two digit month and a serial that restarts at 1 every
month. ``AC2407006`` is the sixth quotation of July 2024.
"""

import re
from datetime import datetime
from typing import Optional, Tuple

QUOTE_PREFIX = "AC"

_DIGITS = re.compile(r"[0-9]+")


class QuoteNumberError(ValueError):
    """Raised when the last logged quote number cannot be parsed."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"failed to detect {field} from quote {value!r}")


def format_quote_number(year: int, month: int, serial: int) -> str:
    """Format a quote number. Serials above 999 widen the field."""
    return f"{QUOTE_PREFIX}{year % 100:02d}{month:02d}{serial:03d}"


def _parse_field(raw: str, field: str, quote: str) -> int:
    if not _DIGITS.fullmatch(raw):
        raise QuoteNumberError(field, quote)
    return int(raw)


def parse_quote_number(quote: str) -> Tuple[int, int, int]:
    """
    Split an ``AC`` quote number into its fields.

    Args:
        quote: Quote number starting with ``AC``

    Returns:
        (two digit year, month, serial)

    Raises:
        QuoteNumberError: if a field is not a decimal number
    """
    year = _parse_field(quote[2:4], "year", quote)
    month = _parse_field(quote[4:6], "month", quote)
    serial = _parse_field(quote[6:], "serial", quote)
    return year, month, serial


def next_quote_number(last_quote: Optional[str], now: datetime) -> str:
    """
    Compute the quote number that follows ``last_quote``.

    Args:
        last_quote: Last quote number found in the ledger. Anything not
            starting with ``AC`` (header cell, empty sheet) starts a new series.
        now: Current time, UTC

    Returns:
        Next quote number for the month of ``now``
    """
    if not last_quote or not last_quote.startswith(QUOTE_PREFIX):
        return format_quote_number(now.year, now.month, 1)

    year, month, serial = parse_quote_number(last_quote)
    if year == now.year % 100 and month == now.month:
        return format_quote_number(now.year, now.month, serial + 1)
    return format_quote_number(now.year, now.month, 1)
