from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("1000000000000")     # exclusive


def format_currency(amount: Decimal | float, symbol: str = "$") -> str:
    """Format an amount as currency string, e.g. '$1,234.56'."""
    return f"{symbol}{Decimal(amount):,.2f}"


def to_decimal(value) -> Decimal:
    """Coerce a stored or typed amount to Decimal. Raises ValueError on junk."""
    if isinstance(value, float):
        value = repr(value)
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value).strip().replace(",", ""))
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value!r}")
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return value


def to_amount(value) -> Decimal:
    """Entry-time amount: finite, below MAX_AMOUNT in size, rounded to cents."""
    amount = to_decimal(value)
    if abs(amount) >= MAX_AMOUNT:
        raise ValueError("Amount is too large.")
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
