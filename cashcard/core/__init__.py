"""Core Layer — card entity, domain types, errors and pagination. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (store, guard, routes)
"""
