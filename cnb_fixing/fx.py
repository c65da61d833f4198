"""Conversion helpers over a parsed rate snapshot."""
from __future__ import annotations

from typing import Iterable, Optional

from .models import CurrencyRecord


def find_record(records: Iterable[CurrencyRecord], code: str) -> Optional[CurrencyRecord]:
    """Return the record for ``code`` (case-insensitive), or ``None``."""

    wanted = code.strip().upper()
    for record in records:
        if record.code.upper() == wanted:
            return record
    return None


def convert_amount(amount: float, record: CurrencyRecord) -> float:
    """Convert ``amount`` at ``record``'s rate, i.e. ``amount / rate``."""

    return amount / record.rate


__all__ = ["convert_amount", "find_record"]
