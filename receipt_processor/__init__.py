"""Top-level package for the receipt processor API.

The service accepts receipts over HTTP, scores them with reward points
using a fixed set of rules and keeps the scored receipts in memory so
their points can be looked up by identifier afterwards. It is organised
into a validation layer, a points engine, an in-memory store and the
FastAPI routers that glue them together.

To run the API locally you can execute:

```bash
uvicorn receipt_processor.api.main:app --reload --port 8080
```

or use the ``receipt-processor`` console script installed with the
package. Configuration values are read from environment variables or a
``.env`` file at the project root.
"""

__all__: list[str] = []  # explicit for linters
