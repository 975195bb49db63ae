"""Reward points engine.

The engine maps a validated :class:`Receipt` to a non-negative integer
score. The score is the sum of seven independent rules, each computed
from the original receipt fields:

* ``retailer_name`` – one point per alphanumeric character (Unicode
  letter or decimal digit) in the retailer name.
* ``round_dollar_total`` – 50 points if the total has no cents.
* ``quarter_multiple_total`` – 25 points if the total is a multiple of
  ``0.25``.
* ``item_pairs`` – 5 points for every two items.
* ``item_descriptions`` – for every item whose trimmed description
  length is a non-zero multiple of 3, the price multiplied by ``0.2``
  and rounded up to the nearest integer.
* ``odd_purchase_day`` – 6 points if the day of the purchase date is
  odd.
* ``afternoon_purchase`` – 10 points if the purchase time is strictly
  after 14:00 and strictly before 16:00.

Amounts are never converted to floating point: the total rules look
only at the cents digits and item prices are scaled as exact
:class:`~decimal.Decimal` values, so amounts of any length score
exactly.

The engine expects input that has passed
:func:`receipt_processor.services.validation.validate_receipt`. A value
that cannot be parsed here is a programming error and raises
:class:`PointsInvariantError` rather than being scored as zero.
"""

from __future__ import annotations

from decimal import ROUND_CEILING, Decimal, localcontext
from typing import Callable, Dict, List, Tuple

from receipt_processor.core.exceptions import PointsInvariantError
from receipt_processor.models.enums import PointsRule
from receipt_processor.models.schemas import Item, PointsBreakdown, Receipt
from receipt_processor.utils.helpers import (
    parse_currency,
    parse_purchase_date,
    parse_purchase_time,
    split_currency,
)

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

# 14:00 and 16:00 as minutes after midnight; both bounds exclusive
AFTERNOON_START = 14 * 60
AFTERNOON_END = 16 * 60

DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")


def _split(value: str, field: str) -> Tuple[str, str]:
    parts = split_currency(value)
    if parts is None:
        raise PointsInvariantError(f"unparsable currency in {field}: {value!r}")
    return parts


def _retailer_name(receipt: Receipt) -> int:
    return sum(1 for ch in receipt.retailer if ch.isalpha() or ch.isdecimal())


def _round_dollar_total(receipt: Receipt) -> int:
    _, fraction = _split(receipt.total, "total")
    return ROUND_DOLLAR_POINTS if fraction == "00" else 0


def _quarter_multiple_total(receipt: Receipt) -> int:
    # whole dollars are always a multiple of 0.25, so only the cents matter
    _, fraction = _split(receipt.total, "total")
    return QUARTER_MULTIPLE_POINTS if int(fraction) % 25 == 0 else 0


def _item_pairs(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def _item_description_points(item: Item, index: int) -> int:
    length = len(item.shortDescription.strip())
    if length == 0 or length % 3 != 0:
        return 0
    price = parse_currency(item.price)
    if price is None:
        raise PointsInvariantError(f"unparsable currency in items[{index}].price: {item.price!r}")
    # enough precision to keep the product exact for any number of digits
    with localcontext() as ctx:
        ctx.prec = len(item.price) + 2
        scaled = price * DESCRIPTION_PRICE_MULTIPLIER
        return int(scaled.to_integral_value(rounding=ROUND_CEILING))


def _item_descriptions(receipt: Receipt) -> int:
    return sum(_item_description_points(item, i) for i, item in enumerate(receipt.items))


def _odd_purchase_day(receipt: Receipt) -> int:
    purchased = parse_purchase_date(receipt.purchaseDate)
    if purchased is None:
        raise PointsInvariantError(f"unparsable purchaseDate: {receipt.purchaseDate!r}")
    return ODD_DAY_POINTS if purchased.day % 2 == 1 else 0


def _afternoon_purchase(receipt: Receipt) -> int:
    parsed = parse_purchase_time(receipt.purchaseTime)
    if parsed is None:
        raise PointsInvariantError(f"unparsable purchaseTime: {receipt.purchaseTime!r}")
    hour, minute = parsed
    minutes = hour * 60 + minute
    return AFTERNOON_POINTS if AFTERNOON_START < minutes < AFTERNOON_END else 0


RULES: List[Tuple[PointsRule, Callable[[Receipt], int]]] = [
    (PointsRule.RETAILER_NAME, _retailer_name),
    (PointsRule.ROUND_DOLLAR_TOTAL, _round_dollar_total),
    (PointsRule.QUARTER_MULTIPLE_TOTAL, _quarter_multiple_total),
    (PointsRule.ITEM_PAIRS, _item_pairs),
    (PointsRule.ITEM_DESCRIPTIONS, _item_descriptions),
    (PointsRule.ODD_PURCHASE_DAY, _odd_purchase_day),
    (PointsRule.AFTERNOON_PURCHASE, _afternoon_purchase),
]


def score_receipt(receipt: Receipt) -> PointsBreakdown:
    """Apply every rule to ``receipt`` and return the per-rule points.

    :param receipt: A receipt that has already passed validation.
    :returns: A :class:`PointsBreakdown` whose ``rules`` maps each rule
        name to the points it awarded (zero included) and whose
        ``total`` is their sum.
    :raises PointsInvariantError: if a field validation guarantees is
        unparsable.
    """
    rules: Dict[str, int] = {}
    for rule, handler in RULES:
        rules[rule.value] = handler(receipt)
    return PointsBreakdown(rules=rules, total=sum(rules.values()))


def calculate_points(receipt: Receipt) -> int:
    """Return the reward points for a validated receipt."""
    return score_receipt(receipt).total


__all__ = ["RULES", "score_receipt", "calculate_points"]
