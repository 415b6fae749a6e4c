"""Money helpers shared by pricing and display code."""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

NO_PRICE_LABEL = 'Không có giá'


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Coerce a raw amount (int, float, str, Decimal) to a finite Decimal.
    Returns None for missing or unparsable input instead of raising.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            # str() keeps floats at their shortest repr (0.1 -> Decimal('0.1'))
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError):
            return None

    if not amount.is_finite():
        return None
    return amount


def format_vnd(amount: Any) -> str:
    """Format an amount as Vietnamese đồng, e.g. 1800000 -> '1.800.000 ₫'."""
    value = to_decimal(amount)
    if value is None:
        return NO_PRICE_LABEL

    rounded = value.quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return f"{rounded:,.0f}".replace(',', '.') + ' ₫'
