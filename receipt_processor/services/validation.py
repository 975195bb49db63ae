"""Receipt validation.

``validate_receipt`` checks a decoded :class:`Receipt` before it is
scored. Checks run in a fixed order and the first failure is raised;
errors are never accumulated:

1. ``retailer``, ``purchaseDate``, ``purchaseTime`` and ``total`` are
   non-empty.
2. ``items`` holds at least one item.
3. ``purchaseDate`` is ``YYYY-MM-DD`` and a real calendar date.
4. ``purchaseTime`` is a 24-hour ``HH:MM`` time.
5. ``total`` is a currency string (``\\d+\\.\\d{2}``).
6. Each item has a description and a price in currency format.

No range checks are made on amounts.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from receipt_processor.core.exceptions import InvalidFormatError, MissingFieldError
from receipt_processor.models.schemas import Item, Receipt
from receipt_processor.utils.helpers import (
    parse_purchase_date,
    parse_purchase_time,
    split_currency,
)

REQUIRED_FIELDS: Tuple[str, ...] = ("retailer", "purchaseDate", "purchaseTime", "total")


def is_valid_date_format(value: str) -> bool:
    return parse_purchase_date(value) is not None


def is_valid_time_format(value: str) -> bool:
    return parse_purchase_time(value) is not None


def is_valid_currency_format(value: str) -> bool:
    return split_currency(value) is not None


def _validate_items(items: Iterable[Item]) -> None:
    for index, item in enumerate(items):
        prefix = f"items[{index}]"
        if not item.shortDescription:
            raise MissingFieldError(f"{prefix}.shortDescription")
        if not item.price:
            raise MissingFieldError(f"{prefix}.price")
        if not is_valid_currency_format(item.price):
            raise InvalidFormatError(f"{prefix}.price", item.price)


def validate_receipt(receipt: Receipt) -> None:
    """Raise the first validation problem found on ``receipt``.

    :raises MissingFieldError: a required field is empty.
    :raises InvalidFormatError: a field does not match its format.
    """
    for field in REQUIRED_FIELDS:
        if not getattr(receipt, field):
            raise MissingFieldError(field)
    if not receipt.items:
        raise MissingFieldError("items")

    if not is_valid_date_format(receipt.purchaseDate):
        raise InvalidFormatError("purchaseDate", receipt.purchaseDate)
    if not is_valid_time_format(receipt.purchaseTime):
        raise InvalidFormatError("purchaseTime", receipt.purchaseTime)
    if not is_valid_currency_format(receipt.total):
        raise InvalidFormatError("total", receipt.total)

    _validate_items(receipt.items)


__all__ = [
    "validate_receipt",
    "is_valid_date_format",
    "is_valid_time_format",
    "is_valid_currency_format",
]
