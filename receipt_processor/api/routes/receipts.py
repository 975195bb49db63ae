"""API routes for processing receipts and looking up their points."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from receipt_processor.api.dependencies import get_receipt_store
from receipt_processor.core.exceptions import ReceiptNotFoundError
from receipt_processor.core.observability import sentry_breadcrumb
from receipt_processor.models.schemas import PointsResponse, ProcessResponse, Receipt
from receipt_processor.services.points_engine import score_receipt
from receipt_processor.services.receipt_store import ReceiptStore
from receipt_processor.services.validation import validate_receipt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.post(
    "/process",
    response_model=ProcessResponse,
    responses={400: {"description": "The receipt is invalid."}},
)
def process_receipt(
    receipt: Receipt,
    store: ReceiptStore = Depends(get_receipt_store),
) -> ProcessResponse:
    """Validate and score a receipt, store it and return its new id."""
    logger.debug("Receipt data received data=%s", receipt.model_dump_json())

    validate_receipt(receipt)

    breakdown = score_receipt(receipt)
    logger.debug("Points breakdown rules=%s", breakdown.rules)
    logger.info("Points calculated points=%s", breakdown.total)

    receipt_id = store.put(receipt, breakdown.total)
    sentry_breadcrumb("receipts", "receipt processed", data={"id": receipt_id})
    logger.info("Receipt processed id=%s points=%s", receipt_id, breakdown.total)
    return ProcessResponse(id=receipt_id)


@router.get(
    "/{receipt_id}/points",
    response_model=PointsResponse,
    responses={404: {"description": "No receipt found for that ID."}},
)
def get_points(
    receipt_id: str,
    store: ReceiptStore = Depends(get_receipt_store),
) -> PointsResponse:
    """Return the points awarded to a previously processed receipt."""
    logger.info("Getting points for receipt id=%s", receipt_id)
    stored = store.get(receipt_id)
    if stored is None:
        raise ReceiptNotFoundError(receipt_id)
    logger.info("Returning points id=%s points=%s", receipt_id, stored.points)
    return PointsResponse(points=stored.points)
