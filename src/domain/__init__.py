"""Domain package for mapping rules and core models."""

from .constants import (
    DEFAULT_EXPENSE_ACCOUNT,
    DEFAULT_LIABILITY_TYPES,
    IMPORTER_TYPE,
    MetaDataKey,
)
from .errors import (
    AccountNotFoundError,
    AmbiguousAccountError,
    MissingActivityDataError,
    RogersBankMappingError,
)
from .models import (
    Activity,
    Amount,
    Balance,
    BankAccount,
    Ledger,
    LedgerAccount,
    Posting,
    Transaction,
    TransactionMetaData,
)
from .policies import AccountMatchPolicy
from .services import (
    LedgerAccountResolver,
    build_balance,
    build_transaction,
    select_new_activities,
)

__all__ = [
    "DEFAULT_EXPENSE_ACCOUNT",
    "DEFAULT_LIABILITY_TYPES",
    "IMPORTER_TYPE",
    "MetaDataKey",
    "AccountNotFoundError",
    "AmbiguousAccountError",
    "MissingActivityDataError",
    "RogersBankMappingError",
    "Activity",
    "Amount",
    "Balance",
    "BankAccount",
    "Ledger",
    "LedgerAccount",
    "Posting",
    "Transaction",
    "TransactionMetaData",
    "AccountMatchPolicy",
    "LedgerAccountResolver",
    "build_balance",
    "build_transaction",
    "select_new_activities",
]
