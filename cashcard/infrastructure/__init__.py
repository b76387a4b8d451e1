"""Infrastructure Layer — database, card stores, authentication and logging.

Invariants:
    - Infrastructure implements core protocols; core never imports infrastructure
    - All storage failures mapped to StorageFailureError before leaving this layer
"""
