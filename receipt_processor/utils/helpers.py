"""Parsing helpers for the string-typed receipt fields."""

from __future__ import annotations

import datetime as dt
import re
from decimal import Decimal
from typing import Optional, Tuple

CURRENCY_PATTERN = re.compile(r"^\d+\.\d{2}$", re.ASCII)
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})$", re.ASCII)


def split_currency(value: str | None) -> Optional[Tuple[str, str]]:
    """Split a currency string such as ``"35.35"`` into ``("35", "35")``.

    Only the exact ``digits.two-digits`` form is accepted; anything else
    (thousands separators, currency symbols, signs, a single fractional
    digit) returns ``None``. Amounts have no upper bound, so the digits
    are returned as strings and never pass through ``int()``.
    """
    if not value or not CURRENCY_PATTERN.fullmatch(value):
        return None
    dollars, cents = value.split(".")
    return dollars, cents


def parse_currency(value: str | None) -> Optional[Decimal]:
    """Parse a currency string into an exact :class:`Decimal`."""
    if split_currency(value) is None:
        return None
    return Decimal(value)


def parse_purchase_date(value: str | None) -> Optional[dt.date]:
    """Parse a ``YYYY-MM-DD`` string into a :class:`date`.

    ``datetime.strptime`` alone tolerates single-digit months and days,
    so the layout is checked first. Returns ``None`` for impossible
    dates such as ``2022-02-30`` and for year ``0000``, which
    :class:`datetime.date` cannot represent.
    """
    if not value or not DATE_PATTERN.fullmatch(value):
        return None
    try:
        return dt.datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_purchase_time(value: str | None) -> Optional[Tuple[int, int]]:
    """Parse a 24-hour ``HH:MM`` string into ``(hour, minute)``."""
    if not value:
        return None
    match = TIME_PATTERN.fullmatch(value)
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour, minute
