"""Display formatting for calculator figures"""

import math
from typing import Optional

PESO_SIGN = "₱"


def format_currency(amount: float, symbol: str = PESO_SIGN) -> str:
    """Whole-peso amount with thousands separators, e.g. ₱39,390"""
    rounded = round(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,}"


def format_percent(value: float) -> str:
    """One decimal place, e.g. 80.0%"""
    return f"{value:.1f}%"


def down_payment_percent(property_price: float, down_payment: float) -> Optional[float]:
    """Down payment as a share of the price; None when the price is zero or the share overflows"""
    if property_price == 0:
        return None
    share = down_payment / property_price * 100
    return share if math.isfinite(share) else None
