"""Root pytest configuration (kept intentionally minimal).

The ``receipt_processor`` package sits at the repository root, so
pytest can import it from the rootdir without path manipulation. Shared
fixtures live in ``tests/conftest.py``.
"""
