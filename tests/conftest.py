from __future__ import annotations

import copy
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add repository root to sys.path so `import receipt_processor...` works when running from tests/
REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))

from receipt_processor.api.main import create_app  # noqa: E402
from receipt_processor.core.config import Settings  # noqa: E402
from receipt_processor.models.schemas import Receipt  # noqa: E402
from receipt_processor.services.receipt_store import ReceiptStore  # noqa: E402


TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


@pytest.fixture
def target_payload() -> dict:
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def corner_market_payload() -> dict:
    return copy.deepcopy(CORNER_MARKET_RECEIPT)


@pytest.fixture
def make_receipt():
    """Build a valid single-item receipt, overriding any top-level field."""

    def _make(**overrides) -> Receipt:
        data = {
            "retailer": "Walgreens",
            "purchaseDate": "2022-01-02",
            "purchaseTime": "08:13",
            "items": [{"shortDescription": "Pepsi - 12-oz", "price": "1.25"}],
            "total": "1.25",
        }
        data.update(overrides)
        return Receipt.model_validate(data)

    return _make


@pytest.fixture
def store() -> ReceiptStore:
    return ReceiptStore()


@pytest.fixture
def client(store):
    app = create_app(settings=Settings(ENVIRONMENT="test"), store=store)
    return TestClient(app)
