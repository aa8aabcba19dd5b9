"""
Catalog read models used by the orders domain.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from backoffice.core.domain import Entity


@dataclass(eq=False)
class Product(Entity[UUID]):
    name: str = ""
    price: Decimal = Decimal("0")
    image: str | None = None
    category_id: UUID | None = None


@dataclass(eq=False)
class Coupon(Entity[UUID]):
    code: str = ""
    discount_percentage: Decimal = Decimal("0")
    is_active: bool = True

    def is_redeemable(self) -> bool:
        return self.is_active
