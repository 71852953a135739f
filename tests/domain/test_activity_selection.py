"""Tests for activity filtering and deduplication."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.domain.errors import MissingActivityDataError
from src.domain.models import (
    Activity,
    ActivityCategory,
    ActivityStatus,
    ActivityType,
    BankAmount,
    Merchant,
)
from src.domain.services.activity_selection import (
    derive_reference_number,
    select_new_activities,
)


def _activity(**overrides) -> Activity:
    values = {
        "activity_status": ActivityStatus.APPROVED,
        "activity_type": ActivityType.TRANSACTION,
        "activity_category": ActivityCategory.PURCHASE,
        "card_number": "5100000000001234",
        "merchant": Merchant(name="Coffee Shop"),
        "amount": BankAmount(value="-4.50", currency="CAD"),
        "posted_date": date(2023, 4, 1),
        "reference_number": "REF42",
    }
    values.update(overrides)
    return Activity(**values)


def test_only_approved_transactions_are_selected() -> None:
    """Pending, declined and non-transaction activities should be dropped."""
    activities = [
        _activity(activity_status=ActivityStatus.PENDING, posted_date=None),
        _activity(activity_status=ActivityStatus.DECLINED),
        _activity(activity_type=ActivityType.AUTHORIZATION),
        _activity(reference_number="REF43"),
    ]

    selected = list(select_new_activities(activities, [], logger=MagicMock()))

    assert [item.reference_number for item in selected] == ["REF43"]


def test_missing_posted_date_raises() -> None:
    """Approved transactions need a posted date."""
    with pytest.raises(MissingActivityDataError) as error:
        list(
            select_new_activities(
                [_activity(posted_date=None)],
                [],
                logger=MagicMock(),
            )
        )

    assert error.value.key == "postedDate"


def test_missing_reference_number_raises_for_purchases() -> None:
    """Purchases need the bank reference number."""
    with pytest.raises(MissingActivityDataError) as error:
        list(
            select_new_activities(
                [_activity(reference_number=None)],
                [],
                logger=MagicMock(),
            )
        )

    assert error.value.key == "referenceNumber"


def test_error_stops_processing_of_batch() -> None:
    """The first invalid activity aborts the call."""
    with pytest.raises(MissingActivityDataError):
        list(
            select_new_activities(
                [_activity(posted_date=None), _activity(reference_number=None)],
                [],
                logger=MagicMock(),
            )
        )


def test_payment_and_fee_references_use_posted_date() -> None:
    """Payments and overlimit fees are keyed by category and date."""
    payment = _activity(
        activity_category=ActivityCategory.PAYMENT,
        reference_number=None,
        posted_date=date(2023, 4, 5),
    )
    fee = _activity(
        activity_category=ActivityCategory.OVERLIMIT_FEE,
        reference_number="IGNORED",
        posted_date=date(2023, 4, 6),
    )

    assert derive_reference_number(payment, date(2023, 4, 5)) == (
        "payment-2023-04-05"
    )
    assert derive_reference_number(fee, date(2023, 4, 6)) == (
        "overlimit-fee-2023-04-06"
    )


def test_already_imported_activities_are_skipped() -> None:
    """Reference numbers present in the ledger should not be selected."""
    activities = [
        _activity(reference_number="REF42"),
        _activity(
            activity_category=ActivityCategory.PAYMENT,
            reference_number=None,
            posted_date=date(2023, 4, 5),
        ),
        _activity(reference_number="REF44"),
    ]

    selected = list(
        select_new_activities(
            activities,
            {"REF42", "payment-2023-04-05"},
            logger=MagicMock(),
        )
    )

    assert [item.reference_number for item in selected] == ["REF44"]


def test_duplicate_reference_in_batch_is_selected_once() -> None:
    """A reference number is only emitted once per call."""
    logger = MagicMock()
    activities = [
        _activity(
            activity_category=ActivityCategory.PAYMENT,
            reference_number=None,
            posted_date=date(2023, 4, 5),
            amount=BankAmount(value="100.00", currency="CAD"),
        ),
        _activity(
            activity_category=ActivityCategory.PAYMENT,
            reference_number=None,
            posted_date=date(2023, 4, 5),
            amount=BankAmount(value="50.00", currency="CAD"),
        ),
    ]

    selected = list(select_new_activities(activities, [], logger=logger))

    assert len(selected) == 1
    assert selected[0].activity.amount.value == "100.00"
    logger.warning.assert_called_once()


def test_selection_keeps_input_order_and_dates() -> None:
    """Selected activities keep their order and carry the posted date."""
    activities = [
        _activity(reference_number="B", posted_date=date(2023, 4, 2)),
        _activity(reference_number="A", posted_date=date(2023, 4, 1)),
    ]

    selected = list(select_new_activities(activities, [], logger=MagicMock()))

    assert [(item.reference_number, item.date) for item in selected] == [
        ("B", date(2023, 4, 2)),
        ("A", date(2023, 4, 1)),
    ]


def test_selection_is_lazy() -> None:
    """Later activities are only checked once earlier ones are consumed."""
    selected = select_new_activities(
        [_activity(reference_number="A"), _activity(posted_date=None)],
        [],
        logger=MagicMock(),
    )

    assert next(selected).reference_number == "A"
    with pytest.raises(MissingActivityDataError):
        next(selected)
