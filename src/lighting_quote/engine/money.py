"""
Money helpers for the quote engine.

All engine arithmetic runs on Decimal; values are converted back to
float only when a Quote is built, rounded half-up to the cent.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENT = Decimal("0.01")
ZERO = Decimal(0)

# Deposit is materials (plus lift) marked up 10%
DEPOSIT_MULTIPLIER = Decimal("1.10")


def to_decimal(value) -> Decimal:
    """
    Convert a caller-supplied amount to Decimal.

    None, non-numeric text, NaN and infinities all become 0 so a bad
    config field never stops a quote.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        number = value
    else:
        try:
            number = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError):
            return ZERO
    if not number.is_finite():
        return ZERO
    return number


def round2(value) -> float:
    """Round to 2 decimals using half-up. Applying it twice changes nothing."""
    number = to_decimal(value)
    try:
        return float(number.quantize(CENT, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # Too many digits to quantize in the default context
        return float(number)


def format_number(value) -> str:
    """Plain text for a count such as lift days; missing or bad values read 0."""
    return f"{to_decimal(value).normalize():f}"
