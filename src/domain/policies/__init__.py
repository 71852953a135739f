"""Domain policies package."""

from .account_match import AccountMatchPolicy, parse_account_match_policy

__all__ = ["AccountMatchPolicy", "parse_account_match_policy"]
