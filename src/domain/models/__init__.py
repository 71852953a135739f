"""Domain models package."""

from .ledger import (
    Amount,
    Balance,
    Ledger,
    LedgerAccount,
    Posting,
    Transaction,
    TransactionMetaData,
)
from .rogers import (
    Activity,
    ActivityCategory,
    ActivityStatus,
    ActivityType,
    BankAccount,
    BankAmount,
    Customer,
    ForeignCurrency,
    Merchant,
)

__all__ = [
    "Amount",
    "Balance",
    "Ledger",
    "LedgerAccount",
    "Posting",
    "Transaction",
    "TransactionMetaData",
    "Activity",
    "ActivityCategory",
    "ActivityStatus",
    "ActivityType",
    "BankAccount",
    "BankAmount",
    "Customer",
    "ForeignCurrency",
    "Merchant",
]
