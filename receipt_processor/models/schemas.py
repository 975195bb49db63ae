"""Pydantic schemas for receipts and API responses.

The request schemas only check the *shape* of the payload (every field
is a string, ``items`` is a list of objects). Missing or ``null`` fields
decode to empty values so that :func:`receipt_processor.services.validation.validate_receipt`
can report them in a fixed order with a precise error, instead of
pydantic reporting all of them at once.

All models are frozen: a receipt is never changed once it has been
decoded, scored and stored.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Item(BaseModel):
    """Single purchased item on a receipt."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    shortDescription: str = ""
    price: str = ""

    @field_validator("shortDescription", "price", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value


class Receipt(BaseModel):
    """Receipt as submitted for processing."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    retailer: str = ""
    purchaseDate: str = ""
    purchaseTime: str = ""
    items: List[Item] = Field(default_factory=list)
    total: str = ""

    @field_validator("retailer", "purchaseDate", "purchaseTime", "total", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("items", mode="before")
    @classmethod
    def _null_items_as_empty(cls, value):
        return [] if value is None else value


class StoredReceipt(Receipt):
    """A scored receipt held by the store under its generated id."""

    id: str
    points: int


class PointsBreakdown(BaseModel):
    """Points awarded by each rule, plus their sum."""

    model_config = ConfigDict(frozen=True)

    rules: Dict[str, int]
    total: int


# ---------------------------------------------------------------------------
# API response schemas


class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


class HealthResponse(BaseModel):
    status: str
    environment: str
    version: str
