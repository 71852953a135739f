"""Domain models for ledger accounts and entries."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.constants import DEFAULT_LIABILITY_TYPES, MetaDataKey


@dataclass(frozen=True)
class Amount:
    """Exact amount of a commodity.

    Attributes:
        number: Signed value.
        commodity: Commodity or currency symbol (e.g., CAD).
        decimal_digits: Number of digits after the decimal point.
    """

    number: Decimal
    commodity: str
    decimal_digits: int = 2

    def __neg__(self) -> "Amount":
        number = self.number.copy_negate()
        if number.is_zero():
            # Zero keeps a positive sign whatever the decimal context.
            number = number.copy_abs()
        return Amount(
            number=number,
            commodity=self.commodity,
            decimal_digits=self.decimal_digits,
        )


@dataclass(frozen=True)
class LedgerAccount:
    """Ledger account with its metadata tags."""

    name: str
    account_type: str
    metadata: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_liability(self) -> bool:
        """Return True for liability-typed accounts."""
        return self.account_type.upper() in DEFAULT_LIABILITY_TYPES

    def meta(self, key: MetaDataKey) -> str | None:
        """Return the metadata value stored under a known key."""
        return self.metadata.get(key.value)


@dataclass(frozen=True)
class Posting:
    """One leg of a transaction.

    Attributes:
        account_name: Account the leg is posted to.
        amount: Amount in the account commodity.
        price: Optional conversion price.
        total_price: The price covers the whole amount (@@) instead of one
            unit (@).
    """

    account_name: str
    amount: Amount
    price: Amount | None = None
    total_price: bool = False

    def weight(self) -> Amount:
        """Return the amount this leg contributes to the balance."""
        if self.price is None:
            return self.amount
        if self.total_price:
            number = abs(self.price.number)
            if self.amount.number < 0:
                number = -number
            return Amount(
                number=number,
                commodity=self.price.commodity,
                decimal_digits=self.price.decimal_digits,
            )
        return Amount(
            number=self.amount.number * self.price.number,
            commodity=self.price.commodity,
            decimal_digits=self.price.decimal_digits,
        )


@dataclass(frozen=True)
class TransactionMetaData:
    """Header of a ledger transaction."""

    date: date
    payee: str
    narration: str = ""
    metadata: Mapping[str, str] = field(default_factory=dict)

    def meta(self, key: MetaDataKey) -> str | None:
        """Return the metadata value stored under a known key."""
        return self.metadata.get(key.value)


@dataclass(frozen=True)
class Transaction:
    """Ledger transaction made of a header and its postings."""

    metadata: TransactionMetaData
    postings: tuple[Posting, ...] = ()


@dataclass(frozen=True)
class Balance:
    """Balance assertion for an account on a given day."""

    date: date
    account_name: str
    amount: Amount


@dataclass(frozen=True)
class Ledger:
    """Read-only snapshot of the ledger used for lookups."""

    accounts: tuple[LedgerAccount, ...] = ()
    transactions: tuple[Transaction, ...] = ()

    def reference_numbers(self) -> set[str]:
        """Return every activity id already imported into the ledger."""
        references = set()
        for transaction in self.transactions:
            value = transaction.metadata.meta(MetaDataKey.ACTIVITY_ID)
            if value is not None:
                references.add(value)
        return references


__all__ = [
    "Amount",
    "LedgerAccount",
    "Posting",
    "TransactionMetaData",
    "Transaction",
    "Balance",
    "Ledger",
]
