"""Domain services package."""

from .account_resolver import LedgerAccountResolver
from .activity_selection import (
    PendingActivity,
    derive_reference_number,
    is_importable,
    select_new_activities,
)
from .entry_builders import build_balance, build_transaction, to_amount

__all__ = [
    "LedgerAccountResolver",
    "PendingActivity",
    "derive_reference_number",
    "is_importable",
    "select_new_activities",
    "build_balance",
    "build_transaction",
    "to_amount",
]
