"""Exact-decimal parsing of raw feed tokens."""

from decimal import Decimal, InvalidOperation

from chartype.errors import DecimalParseError


def parse_decimal(field: str, raw: str) -> Decimal:
    """Parse a raw decimal string without any rounding.

    Args:
        field: Record attribute being parsed, used in the error.
        raw: Decimal text such as "101.25" or "-0.5".

    Returns:
        The exact decimal value.

    Raises:
        DecimalParseError: If raw is not the text of a finite decimal.
    """
    # Decimal() also accepts padding, digit separators and NaN/Infinity,
    # none of which is a price.
    if not isinstance(raw, str) or raw != raw.strip() or "_" in raw:
        raise DecimalParseError(field, raw)
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise DecimalParseError(field, raw) from None
    if not value.is_finite():
        raise DecimalParseError(field, raw)
    return value


def parse_decimals(pairs: tuple[tuple[str, str], ...]) -> dict[str, Decimal]:
    """Parse (name, raw) pairs in order, stopping at the first failure."""
    return {name: parse_decimal(name, raw) for name, raw in pairs}
