"""Port for reading records downloaded from Rogers Bank."""

from typing import Protocol

from src.domain.models import Activity, BankAccount


class RogersSourcePort(Protocol):
    """Port exposing downloaded accounts and activities."""

    def fetch_accounts(self) -> list[BankAccount]:
        """Return the downloaded credit card accounts."""

    def fetch_activities(self) -> list[Activity]:
        """Return the downloaded activities in bank order."""


__all__ = ["RogersSourcePort"]
