"""Domain constants for the Rogers Bank ledger mapper."""

from enum import Enum

DEFAULT_LIABILITY_TYPES = (
    "LIABILITY",
    "CREDIT",
    "PAYABLE",
)

DEFAULT_EXPENSE_ACCOUNT = "Expenses:TODO"

IMPORTER_TYPE = "rogers"


class MetaDataKey(str, Enum):
    """Metadata keys shared with the ledger.

    Renaming any of these breaks account resolution or deduplication of
    previously imported transactions.
    """

    LAST_FOUR = "last-four"
    IMPORTER_TYPE = "importer-type"
    ACTIVITY_ID = "rogers-bank-id"


__all__ = [
    "DEFAULT_LIABILITY_TYPES",
    "DEFAULT_EXPENSE_ACCOUNT",
    "IMPORTER_TYPE",
    "MetaDataKey",
]
