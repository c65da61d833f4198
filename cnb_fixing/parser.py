"""Parser for the CNB daily fixing text feed.

The feed looks like::

    18 Oct 2026 #201
    Country|Currency|Amount|Code|Rate
    Australia|dollar|1|AUD|14.894
    ...

The first line carries the publication date and sequence number, the second
one is the table header. Every following non-empty line is one currency.
"""

from __future__ import annotations

import csv
import io
import math

from .errors import ParseError
from .models import CurrencyRecord

DELIMITER = "|"
COUNTRY_COLUMN = 0
CODE_COLUMN = 3
RATE_COLUMN = 4
_MIN_FIELDS = RATE_COLUMN + 1


def parse_feed(raw: bytes) -> list[CurrencyRecord]:
    """Parse raw feed bytes into records, preserving feed order.

    Any invalid row aborts the whole parse with :class:`ParseError`; a
    partially valid snapshot is never returned.
    """

    newline = raw.find(b"\n")
    if newline < 0:
        raise ParseError("Feed has no content after the metadata line")
    try:
        text = raw[newline + 1 :].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Feed is not valid UTF-8: {exc}") from exc

    # Line numbers are reported relative to the whole feed, metadata included.
    reader = csv.reader(io.StringIO(text), delimiter=DELIMITER)
    rows = [
        (reader.line_num + 1, row)
        for row in reader
        if any(field.strip() for field in row)
    ]
    if not rows:
        raise ParseError("Feed is missing the table header")

    records: list[CurrencyRecord] = []
    seen: set[str] = set()
    for line_no, row in rows[1:]:
        record = _parse_row(row, line_no)
        if record.code in seen:
            raise ParseError(f"Line {line_no}: duplicate currency code {record.code!r}")
        seen.add(record.code)
        records.append(record)
    return records


def _parse_row(row: list[str], line_no: int) -> CurrencyRecord:
    if len(row) < _MIN_FIELDS:
        raise ParseError(
            f"Line {line_no}: expected at least {_MIN_FIELDS} fields, got {len(row)}"
        )
    country = row[COUNTRY_COLUMN].strip()
    code = row[CODE_COLUMN].strip()
    raw_rate = row[RATE_COLUMN].strip()
    if not country:
        raise ParseError(f"Line {line_no}: country is empty")
    if not code:
        raise ParseError(f"Line {line_no}: currency code is empty")
    try:
        rate = float(raw_rate)
    except ValueError:
        raise ParseError(f"Line {line_no}: rate {raw_rate!r} is not a number") from None
    if not math.isfinite(rate) or rate <= 0:
        raise ParseError(f"Line {line_no}: rate {raw_rate!r} must be a positive number")
    return CurrencyRecord(country=country, code=code, rate=rate)


__all__ = ["parse_feed", "DELIMITER"]
