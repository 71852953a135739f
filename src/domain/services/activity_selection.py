"""Filtering and deduplication of downloaded activities."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date
from logging import Logger

from src.domain.errors import MissingActivityDataError
from src.domain.models import (
    Activity,
    ActivityCategory,
    ActivityStatus,
    ActivityType,
)

_DATED_REFERENCE_PREFIXES = {
    ActivityCategory.PAYMENT: "payment",
    ActivityCategory.OVERLIMIT_FEE: "overlimit-fee",
}


@dataclass(frozen=True)
class PendingActivity:
    """Activity selected for import with its resolved keys."""

    activity: Activity
    date: date
    reference_number: str


def is_importable(activity: Activity) -> bool:
    """Return True for approved transactions."""
    return (
        activity.activity_status == ActivityStatus.APPROVED
        and activity.activity_type == ActivityType.TRANSACTION
    )


def derive_reference_number(activity: Activity, posted_date: date) -> str:
    """Return the deduplication key of an activity.

    Payments and overlimit fees carry no bank reference; they are keyed by
    category and posted date, at most one per day.

    Raises:
        MissingActivityDataError: If a bank reference is required but absent.
    """
    prefix = _DATED_REFERENCE_PREFIXES.get(activity.activity_category)
    if prefix is not None:
        return f"{prefix}-{posted_date.isoformat()}"
    if activity.reference_number:
        return activity.reference_number
    raise MissingActivityDataError(activity, "referenceNumber")


def select_new_activities(
    activities: Iterable[Activity],
    existing_reference_numbers: Iterable[str],
    *,
    logger: Logger,
) -> Iterator[PendingActivity]:
    """Yield the activities which are not in the ledger yet.

    Args:
        activities: Downloaded activities in bank order.
        existing_reference_numbers: Activity ids stored in the ledger.
        logger: Logger used for diagnostics.

    Yields:
        PendingActivity: Activities to import, in input order. Checks run
        lazily, so a caller consuming one item at a time stops at the
        first failing activity.

    Raises:
        MissingActivityDataError: On the first activity lacking a posted
            date or a required reference number.
    """
    imported = set(existing_reference_numbers)
    seen: set[str] = set()
    for activity in activities:
        if not is_importable(activity):
            logger.debug(
                f"Skipping {activity.activity_status.value} "
                f"{activity.activity_type.value} activity"
            )
            continue
        if activity.posted_date is None:
            raise MissingActivityDataError(activity, "postedDate")
        reference_number = derive_reference_number(
            activity,
            activity.posted_date,
        )
        if reference_number in imported:
            logger.debug(f"Skipping already imported {reference_number}")
            continue
        if reference_number in seen:
            logger.warning(
                f"Duplicate reference {reference_number} in download, "
                "keeping the first activity"
            )
            continue
        seen.add(reference_number)
        yield PendingActivity(
            activity=activity,
            date=activity.posted_date,
            reference_number=reference_number,
        )


__all__ = [
    "PendingActivity",
    "is_importable",
    "derive_reference_number",
    "select_new_activities",
]
