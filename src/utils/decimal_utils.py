"""Helpers for exact Decimal parsing."""

from decimal import Decimal, InvalidOperation


def parse_amount_decimal(value: str) -> tuple[Decimal, int]:
    """Parse a bank formatted amount without losing precision.

    Args:
        value: Decimal string such as "-1,234.50".

    Returns:
        tuple[Decimal, int]: Parsed value and its number of decimal digits.

    Raises:
        ValueError: If the string is not a finite decimal number.
    """
    cleaned = str(value).strip().replace(",", "")
    try:
        number = Decimal(cleaned)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid decimal amount: {value!r}") from exc
    if not number.is_finite():
        raise ValueError(f"Invalid decimal amount: {value!r}")
    exponent = number.as_tuple().exponent
    return number, max(0, -exponent)


__all__ = ["parse_amount_decimal"]
