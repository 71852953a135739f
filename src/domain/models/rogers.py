"""Domain models for records downloaded from Rogers Bank."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ActivityStatus(str, Enum):
    """Processing status reported for an activity."""

    APPROVED = "APPROVED"
    PENDING = "PENDING"
    DECLINED = "DECLINED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class ActivityType(str, Enum):
    """Kind of activity reported for a card."""

    TRANSACTION = "TRANSACTION"
    AUTHORIZATION = "AUTHORIZATION"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class ActivityCategory(str, Enum):
    """Category reported for an activity."""

    PURCHASE = "PURCHASE"
    PAYMENT = "PAYMENT"
    OVERLIMIT_FEE = "OVERLIMIT_FEE"
    INTEREST = "INTEREST"
    CASH_ADVANCE = "CASH_ADVANCE"
    OTHER = "OTHER"

    @classmethod
    def _missing_(cls, value):
        return cls.OTHER


@dataclass(frozen=True)
class BankAmount:
    """Amount as reported by the bank, still formatted as a string."""

    value: str
    currency: str


@dataclass(frozen=True)
class Customer:
    """Card holder details of an account."""

    card_last4: str


@dataclass(frozen=True)
class BankAccount:
    """Credit card account snapshot."""

    current_balance: BankAmount
    customer: Customer


@dataclass(frozen=True)
class Merchant:
    """Merchant an activity was made with."""

    name: str


@dataclass(frozen=True)
class ForeignCurrency:
    """Original amount of an activity made in another currency."""

    original_amount: BankAmount


@dataclass(frozen=True)
class Activity:
    """Single card activity.

    Attributes:
        activity_status: Processing status, only approved ones are final.
        activity_type: Kind of activity.
        activity_category: Category used to derive reference numbers.
        card_number: Card number, the last four digits identify the card.
        merchant: Merchant of the activity.
        posted_date: Date the activity was posted, None while pending.
        reference_number: Bank reference, not provided for payments.
        amount: Amount in the card currency.
        foreign: Original amount for foreign currency activities.
    """

    activity_status: ActivityStatus
    activity_type: ActivityType
    activity_category: ActivityCategory
    card_number: str
    merchant: Merchant
    amount: BankAmount
    posted_date: date | None = None
    reference_number: str | None = None
    foreign: ForeignCurrency | None = None

    @property
    def card_last4(self) -> str:
        """Return the last four digits of the card number."""
        return self.card_number[-4:]


__all__ = [
    "ActivityStatus",
    "ActivityType",
    "ActivityCategory",
    "BankAmount",
    "Customer",
    "BankAccount",
    "Merchant",
    "ForeignCurrency",
    "Activity",
]
