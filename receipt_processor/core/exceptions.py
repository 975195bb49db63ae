"""Exception types raised by the receipt processor.

Validation problems, malformed request bodies and unknown receipt ids
are expected outcomes and are mapped to 4xx responses by the handlers in
:mod:`receipt_processor.api.error_handlers`. ``PointsInvariantError``
signals a bug: the points engine was handed data that validation should
have rejected.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from receipt_processor.models.enums import ErrorCode


class ReceiptProcessorError(Exception):
    """Base class for expected receipt processing failures."""


class ReceiptValidationError(ReceiptProcessorError):
    """A receipt failed validation.

    Only the first problem found is reported. ``str(exc)`` renders the
    error as a compact JSON object which is also what the API returns to
    the caller.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        self.code = code
        self.message = message
        self.field = field
        self.value = value
        super().__init__(self.__str__())

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"message": self.message, "code": self.code.value}
        if self.field:
            payload["field"] = self.field
        if self.value is not None:
            payload["value"] = self.value
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict())


class MissingFieldError(ReceiptValidationError):
    """A required field is absent or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(ErrorCode.MISSING_FIELD, "missing required field", field=field)


class InvalidFormatError(ReceiptValidationError):
    """A field is present but does not match its expected format."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(ErrorCode.INVALID_FORMAT, "invalid format", field=field, value=value)


class MalformedRequestBodyError(ReceiptProcessorError):
    """The request body could not be read or decoded into a receipt."""

    def __init__(self, detail: str = "Invalid JSON format. Please verify input.") -> None:
        self.detail = detail
        super().__init__(detail)


class ReceiptNotFoundError(ReceiptProcessorError):
    """No receipt has been stored under the requested id."""

    def __init__(self, receipt_id: str) -> None:
        self.receipt_id = receipt_id
        super().__init__(f"receipt {receipt_id!r} not found")


class PointsInvariantError(RuntimeError):
    """Raised when the points engine meets a value validation should have rejected."""


__all__ = [
    "ReceiptProcessorError",
    "ReceiptValidationError",
    "MissingFieldError",
    "InvalidFormatError",
    "MalformedRequestBodyError",
    "ReceiptNotFoundError",
    "PointsInvariantError",
]
