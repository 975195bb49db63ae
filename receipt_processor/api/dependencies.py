"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from receipt_processor.services.receipt_store import ReceiptStore


def get_receipt_store(request: Request) -> ReceiptStore:
    """Return the store owned by the running application."""
    return request.app.state.receipt_store
