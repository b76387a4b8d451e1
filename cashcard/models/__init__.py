"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Models imported here so Base.metadata is complete before create_all or autogenerate
"""

from cashcard.models.card import CashCard  # noqa: F401
