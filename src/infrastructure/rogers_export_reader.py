"""Reader for Rogers Bank data exported as JSON.

The export contains the payloads returned by the Rogers Bank API, either as
``{"accounts": [...], "activities": [...]}`` or as a bare list of activities.
"""

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any

from src.application.ports.rogers_source import RogersSourcePort
from src.domain.models import (
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
from src.infrastructure.logging.logger import get_app_logger


def _parse_amount(payload: dict[str, Any]) -> BankAmount:
    return BankAmount(
        value=str(payload["value"]),
        currency=str(payload["currency"]),
    )


def _parse_date(raw_value) -> date | None:
    if not raw_value:
        return None
    try:
        return date.fromisoformat(str(raw_value)[:10])
    except ValueError:
        return datetime.fromisoformat(str(raw_value)).date()


def parse_account(payload: dict[str, Any]) -> BankAccount:
    """Decode an account payload.

    Raises:
        ValueError: If a required key is missing.
    """
    try:
        return BankAccount(
            current_balance=_parse_amount(payload["currentBalance"]),
            customer=Customer(card_last4=str(payload["customer"]["cardLast4"])),
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Invalid account payload: missing {exc}") from exc


def parse_activity(payload: dict[str, Any]) -> Activity:
    """Decode an activity payload.

    Unknown enum values decode to the fallback members, missing optional
    fields to None.

    Raises:
        ValueError: If a required key is missing or a date is malformed.
    """
    try:
        foreign_payload = payload.get("foreign") or None
        foreign = None
        if foreign_payload and foreign_payload.get("originalAmount"):
            foreign = ForeignCurrency(
                original_amount=_parse_amount(foreign_payload["originalAmount"])
            )
        return Activity(
            activity_status=ActivityStatus(payload["activityStatus"]),
            activity_type=ActivityType(payload["activityType"]),
            activity_category=ActivityCategory(payload["activityCategory"]),
            card_number=str(payload["cardNumber"]),
            merchant=Merchant(name=str(payload["merchant"]["name"])),
            amount=_parse_amount(payload["amount"]),
            posted_date=_parse_date(payload.get("postedDate")),
            reference_number=payload.get("referenceNumber") or None,
            foreign=foreign,
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Invalid activity payload: missing {exc}") from exc


class RogersExportReader(RogersSourcePort):
    """Rogers Bank source backed by a JSON export file."""

    def __init__(self, export_path: Path | str, logger=None) -> None:
        """Initialize the reader.

        Args:
            export_path: Path to the JSON export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._export_path = Path(export_path)
        self._logger = logger or get_app_logger()
        self._document = None

    def _load(self) -> dict[str, list]:
        if self._document is None:
            try:
                raw = json.loads(self._export_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                raise ValueError(
                    f"Invalid JSON in Rogers export {self._export_path}"
                ) from exc
            if isinstance(raw, list):
                raw = {"accounts": [], "activities": raw}
            if not isinstance(raw, dict):
                raise ValueError(
                    f"Unexpected Rogers export layout in {self._export_path}"
                )
            self._document = raw
        return self._document

    def fetch_accounts(self) -> list[BankAccount]:
        """Return the accounts of the export."""
        accounts = [
            parse_account(item) for item in self._load().get("accounts", [])
        ]
        self._logger.info(f"Read {len(accounts)} accounts from Rogers export")
        return accounts

    def fetch_activities(self) -> list[Activity]:
        """Return the activities of the export in file order."""
        activities = [
            parse_activity(item) for item in self._load().get("activities", [])
        ]
        self._logger.info(
            f"Read {len(activities)} activities from Rogers export"
        )
        return activities


__all__ = ["RogersExportReader", "parse_account", "parse_activity"]
