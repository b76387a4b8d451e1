"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Error responses share one JSON envelope (see error_handlers.py)

Design Decisions:
    - Thin routes delegate to CardOperations; no SQL in route modules
"""
