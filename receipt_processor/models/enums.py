"""Enumeration types used throughout the receipt processor.

Error codes are part of the response body returned for rejected
receipts, so changing a value is a breaking API change.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine readable codes carried by validation errors."""

    MISSING_FIELD = "MISSING_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"


class PointsRule(str, Enum):
    """Names of the scoring rules, in the order they are applied."""

    RETAILER_NAME = "retailer_name"
    ROUND_DOLLAR_TOTAL = "round_dollar_total"
    QUARTER_MULTIPLE_TOTAL = "quarter_multiple_total"
    ITEM_PAIRS = "item_pairs"
    ITEM_DESCRIPTIONS = "item_descriptions"
    ODD_PURCHASE_DAY = "odd_purchase_day"
    AFTERNOON_PURCHASE = "afternoon_purchase"
