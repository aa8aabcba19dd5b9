"""
Order pricing.

All amounts are Decimals rounded to cents, half up.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from backoffice.core.domain import Percentage, ValidationException, to_amount


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    discount: Decimal
    total_price: Decimal


def unit_price_with_customizations(base_price: Decimal, extra_prices: Iterable[Decimal]) -> Decimal:
    """Final per-unit price: product price plus every customization surcharge."""
    return to_amount(to_amount(base_price) + sum((to_amount(p) for p in extra_prices), Decimal("0")))


def compute_totals(lines: Iterable[tuple[Decimal, int]], discount_percentage: Decimal | float | int) -> OrderTotals:
    """
    Compute order totals from (unit price, quantity) lines.

    discount = subtotal * percentage / 100, clamped to [0, subtotal];
    total = subtotal - discount.
    """
    try:
        percentage = Percentage(Decimal(str(discount_percentage)))
    except (ValueError, ArithmeticError) as e:
        raise ValidationException(str(e), field="discountPercentage") from e

    subtotal = to_amount(sum((to_amount(price) * quantity for price, quantity in lines), Decimal("0")))
    discount = to_amount(percentage.apply_to(subtotal))
    discount = min(max(discount, Decimal("0")), subtotal)
    return OrderTotals(subtotal=subtotal, discount=discount, total_price=subtotal - discount)
