"""Policies applied when several ledger accounts match one card."""

from enum import Enum


class AccountMatchPolicy(str, Enum):
    """How ties between qualifying ledger accounts are handled.

    FIRST_MATCH keeps the first account in ledger order, STRICT refuses to
    choose.
    """

    FIRST_MATCH = "first_match"
    STRICT = "strict"


def parse_account_match_policy(strict: bool) -> AccountMatchPolicy:
    """Return the policy matching a strict flag."""
    if strict:
        return AccountMatchPolicy.STRICT
    return AccountMatchPolicy.FIRST_MATCH


__all__ = ["AccountMatchPolicy", "parse_account_match_policy"]
