"""Tests for the Rogers Bank JSON export reader."""

import json
from datetime import date
from unittest.mock import MagicMock

import pytest

from src.domain.models import ActivityCategory, ActivityStatus, ActivityType
from src.infrastructure.rogers_export_reader import (
    RogersExportReader,
    parse_activity,
)


def _activity_payload(**overrides) -> dict:
    payload = {
        "referenceNumber": "REF42",
        "activityType": "TRANSACTION",
        "amount": {"value": "-13.57", "currency": "CAD"},
        "activityStatus": "APPROVED",
        "activityCategory": "PURCHASE",
        "cardNumber": "************1234",
        "merchant": {"name": "Book Store", "categoryCode": "5942"},
        "postedDate": "2023-04-01",
        "foreign": {
            "exchangeRate": "1.357",
            "originalAmount": {"value": "-10.00", "currency": "USD"},
        },
    }
    payload.update(overrides)
    return payload


def test_reader_decodes_accounts_and_activities(tmp_path) -> None:
    """The reader should decode both sections of the export."""
    export = tmp_path / "rogers.json"
    export.write_text(
        json.dumps(
            {
                "accounts": [
                    {
                        "currentBalance": {"value": "123.45", "currency": "CAD"},
                        "customer": {"cardLast4": "1234"},
                    }
                ],
                "activities": [_activity_payload()],
            }
        ),
        encoding="utf-8",
    )

    reader = RogersExportReader(export, logger=MagicMock())
    accounts = reader.fetch_accounts()
    activities = reader.fetch_activities()

    assert accounts[0].customer.card_last4 == "1234"
    assert accounts[0].current_balance.value == "123.45"
    activity = activities[0]
    assert activity.activity_status == ActivityStatus.APPROVED
    assert activity.activity_type == ActivityType.TRANSACTION
    assert activity.activity_category == ActivityCategory.PURCHASE
    assert activity.card_last4 == "1234"
    assert activity.posted_date == date(2023, 4, 1)
    assert activity.foreign.original_amount.currency == "USD"


def test_reader_accepts_bare_activity_list(tmp_path) -> None:
    """A list document only contains activities."""
    export = tmp_path / "activities.json"
    export.write_text(json.dumps([_activity_payload()]), encoding="utf-8")

    reader = RogersExportReader(export, logger=MagicMock())

    assert reader.fetch_accounts() == []
    assert len(reader.fetch_activities()) == 1


def test_parse_activity_handles_optional_and_unknown_values() -> None:
    """Unknown enums fall back, missing optional fields become None."""
    activity = parse_activity(
        _activity_payload(
            activityStatus="HELD",
            activityType="ALERT",
            activityCategory="CASHBACK",
            postedDate=None,
            referenceNumber=None,
            foreign=None,
        )
    )

    assert activity.activity_status == ActivityStatus.UNKNOWN
    assert activity.activity_type == ActivityType.UNKNOWN
    assert activity.activity_category == ActivityCategory.OTHER
    assert activity.posted_date is None
    assert activity.reference_number is None
    assert activity.foreign is None


def test_parse_activity_rejects_missing_required_keys() -> None:
    """Missing amounts raise ValueError."""
    payload = _activity_payload()
    del payload["amount"]

    with pytest.raises(ValueError):
        parse_activity(payload)


def test_reader_rejects_invalid_json(tmp_path) -> None:
    """Malformed files raise ValueError."""
    export = tmp_path / "broken.json"
    export.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError):
        RogersExportReader(export, logger=MagicMock()).fetch_activities()
