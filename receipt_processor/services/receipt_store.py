"""In-memory receipt store.

Scored receipts are kept in a dictionary keyed by a random UUID4 string.
The store lives as long as the process; nothing is persisted. Route
handlers run concurrently in FastAPI's threadpool, so every access to
the dictionary goes through a single lock.

One store instance is created per application in
:func:`receipt_processor.api.main.create_app` and handed to routes via
the ``get_receipt_store`` dependency.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, Optional

from receipt_processor.models.schemas import Receipt, StoredReceipt

logger = logging.getLogger(__name__)


class ReceiptStore:
    """Thread-safe map of receipt id to :class:`StoredReceipt`.

    Receipts can be added and read back; there is no update or delete.
    """

    def __init__(self) -> None:
        self._receipts: Dict[str, StoredReceipt] = {}
        self._lock = threading.Lock()

    def put(self, receipt: Receipt, points: int) -> str:
        """Store a scored receipt under a new id and return the id."""
        with self._lock:
            receipt_id = str(uuid.uuid4())
            # ids are never reused
            while receipt_id in self._receipts:
                receipt_id = str(uuid.uuid4())
            self._receipts[receipt_id] = StoredReceipt(
                **receipt.model_dump(), id=receipt_id, points=points
            )
        logger.debug("Stored receipt id=%s points=%s", receipt_id, points)
        return receipt_id

    def get(self, receipt_id: str) -> Optional[StoredReceipt]:
        """Return the stored receipt for ``receipt_id`` or ``None``."""
        with self._lock:
            return self._receipts.get(receipt_id)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
