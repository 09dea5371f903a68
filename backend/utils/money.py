# backend/utils/money.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

CENT = Decimal("0.01")


# Normalises an amount to the two decimal places of the NUMERIC(10, 2) columns
def to_money(value) -> Decimal:
    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def money_or_none(value) -> Optional[Decimal]:
    return None if value is None else to_money(value)
