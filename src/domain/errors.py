"""Errors raised while mapping Rogers Bank data to ledger entries."""


class RogersBankMappingError(Exception):
    """Base class for mapping failures."""


class AccountNotFoundError(RogersBankMappingError):
    """No liability account in the ledger carries the card's last four."""

    def __init__(self, last_four: str) -> None:
        self.last_four = last_four
        super().__init__(
            f"No ledger account found for card ending in {last_four}"
        )


class AmbiguousAccountError(RogersBankMappingError):
    """More than one ledger account qualifies for the same card."""

    def __init__(self, last_four: str, candidates: list[str]) -> None:
        self.last_four = last_four
        self.candidates = list(candidates)
        super().__init__(
            f"Multiple ledger accounts found for card ending in {last_four}: "
            f"{', '.join(self.candidates)}"
        )


class MissingActivityDataError(RogersBankMappingError):
    """An activity lacks a field needed to import it."""

    def __init__(self, activity, key: str) -> None:
        self.activity = activity
        self.key = key
        super().__init__(f"Activity is missing {key}: {activity}")


__all__ = [
    "RogersBankMappingError",
    "AccountNotFoundError",
    "AmbiguousAccountError",
    "MissingActivityDataError",
]
