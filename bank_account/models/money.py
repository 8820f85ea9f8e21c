"""Money normalisation and amount validation."""

from decimal import ROUND_HALF_EVEN, Decimal, Inexact, InvalidOperation, localcontext

from bank_account.models.exceptions import InvalidAmountError

CENT = Decimal("0.01")


def _to_decimal(value) -> Decimal:
    if isinstance(value, bool):
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")
    if not amount.is_finite():
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")
    return amount


def as_money(value) -> Decimal:
    """
    Normalise a number to a Decimal with 2 fractional digits.

    Floats go through str() first so 25.5 becomes Decimal("25.50")
    rather than the binary expansion of 25.5.

    Raises:
        InvalidAmountError: If the value is not a finite number, or is too
            large to hold to the cent
    """
    amount = _to_decimal(value)
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_EVEN)
    except InvalidOperation:
        raise InvalidAmountError(f"Amount too large to hold to the cent: {value!r}")


def add_money(left: Decimal, right: Decimal) -> Decimal:
    """
    Add two money values without rounding.

    Raises:
        InvalidAmountError: If the sum no longer fits the decimal precision
    """
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            return as_money(left + right)
        except Inexact:
            raise InvalidAmountError(f"Balance too large to hold to the cent: {left} + {right}")


def validate_amount(value, min_amount=CENT, max_amount=None) -> Decimal:
    """
    Validate a transaction amount and return it normalised.

    Args:
        value: The amount to check
        min_amount: Smallest accepted amount (default: 0.01)
        max_amount: Largest accepted amount, or None for no cap

    Returns:
        The amount as a 2dp Decimal

    Raises:
        InvalidAmountError: If the amount has fractions of a cent, is
            negative, zero, below the minimum or above the maximum
    """
    amount = as_money(value)
    if _to_decimal(value) != amount:
        raise InvalidAmountError(
            f"Amount {value!r} has more than two decimal places."
        )
    if amount < 0:
        raise InvalidAmountError(
            f"Cannot use negative amount: {amount}. Amount must be positive."
        )
    if amount == 0:
        raise InvalidAmountError("Amount must be greater than zero.")
    if amount < as_money(min_amount):
        raise InvalidAmountError(f"Amount {amount} is below the minimum of {as_money(min_amount)}")
    if max_amount is not None and amount > as_money(max_amount):
        raise InvalidAmountError(
            f"Amount {amount} exceeds maximum allowed amount of {as_money(max_amount)}"
        )
    return amount


def format_money(value, symbol: str = "$") -> str:
    """Render an amount with a currency symbol and thousands separators."""
    amount = as_money(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
