"""Tests for the LedgerAccountResolver."""

from unittest.mock import MagicMock

import pytest

from src.domain.errors import AccountNotFoundError, AmbiguousAccountError
from src.domain.models import LedgerAccount
from src.domain.policies import AccountMatchPolicy
from src.domain.services.account_resolver import LedgerAccountResolver


def _account(name, account_type="CREDIT", **metadata) -> LedgerAccount:
    return LedgerAccount(
        name=name,
        account_type=account_type,
        metadata={key.replace("_", "-"): value for key, value in metadata.items()},
    )


def test_resolve_returns_tagged_liability_account() -> None:
    """The liability account carrying the digits should be returned."""
    resolver = LedgerAccountResolver(
        [
            _account("Assets:Chequing", "BANK", last_four="1234"),
            _account("Liabilities:Rogers", last_four="1234"),
        ],
        logger=MagicMock(),
    )

    assert resolver.resolve("1234") == "Liabilities:Rogers"


def test_resolve_raises_when_no_account_matches() -> None:
    """Unknown digits should raise AccountNotFoundError."""
    resolver = LedgerAccountResolver(
        [_account("Liabilities:Rogers", last_four="1234")],
        logger=MagicMock(),
    )

    with pytest.raises(AccountNotFoundError) as error:
        resolver.resolve("9999")

    assert error.value.last_four == "9999"


def test_resolve_ignores_accounts_without_tag() -> None:
    """Liability accounts without last-four metadata are not candidates."""
    resolver = LedgerAccountResolver(
        [_account("Liabilities:Loan", "LIABILITY")],
        logger=MagicMock(),
    )

    with pytest.raises(AccountNotFoundError):
        resolver.resolve("1234")


def test_first_match_policy_keeps_ledger_order_and_warns() -> None:
    """Ties resolve to the first account in ledger order."""
    logger = MagicMock()
    resolver = LedgerAccountResolver(
        [
            _account("Liabilities:Rogers:Old", last_four="1234"),
            _account("Liabilities:Rogers:New", "LIABILITY", last_four="1234"),
        ],
        logger=logger,
    )

    assert resolver.resolve("1234") == "Liabilities:Rogers:Old"
    logger.warning.assert_called_once()


def test_strict_policy_raises_on_ambiguity() -> None:
    """Strict resolution should refuse to choose between accounts."""
    resolver = LedgerAccountResolver(
        [
            _account("Liabilities:Rogers:Old", last_four="1234"),
            _account("Liabilities:Rogers:New", last_four="1234"),
        ],
        logger=MagicMock(),
        policy=AccountMatchPolicy.STRICT,
    )

    with pytest.raises(AmbiguousAccountError) as error:
        resolver.resolve("1234")

    assert error.value.candidates == [
        "Liabilities:Rogers:Old",
        "Liabilities:Rogers:New",
    ]


def test_importer_type_disambiguates_accounts() -> None:
    """With an importer type only accounts tagged for it are candidates."""
    resolver = LedgerAccountResolver(
        [
            _account("Liabilities:Other", last_four="1234", importer_type="other"),
            _account("Liabilities:Rogers", last_four="1234", importer_type="rogers"),
        ],
        logger=MagicMock(),
        importer_type="rogers",
        policy=AccountMatchPolicy.STRICT,
    )

    assert resolver.resolve("1234") == "Liabilities:Rogers"
