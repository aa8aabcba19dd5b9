"""
Create Order Use Case

Prices a new order from current product prices and persists it as pending.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any
from uuid import UUID

from backoffice.core.domain import ValidationException
from backoffice.domains.orders.application.ports import ICouponRepository, IOrderRepository, IProductRepository
from backoffice.domains.orders.domain.entities import Order, OrderItem, Product
from backoffice.domains.orders.domain.services import unit_price_with_customizations
from backoffice.domains.orders.domain.value_objects import (
    CurrentUser,
    Customization,
    PaymentMethod,
    ShippingAddress,
)

logger = logging.getLogger(__name__)


@dataclass
class OrderItemInput:
    """Input for one order line."""

    product_id: UUID
    quantity: int
    customizations: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class CreateOrderRequest:
    """Request for creating an order."""

    owner: CurrentUser
    items: list[OrderItemInput]
    shipping_address: dict[str, Any] | None = None
    payment_method: str | None = None
    coupon_code: str | None = None


@dataclass
class CreateOrderResponse:
    order: Order
    success: bool = True


class CreateOrderUseCase:
    """
    Use Case: Create Order

    Responsibilities:
    - Validate quantities and resolve every product reference
    - Fix each line's price at purchase (current price + customizations)
    - Resolve the coupon into a discount percentage
    - Persist via repository with status pending
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
        coupon_repository: ICouponRepository,
    ):
        self.order_repository = order_repository
        self.product_repository = product_repository
        self.coupon_repository = coupon_repository

    async def execute(self, request: CreateOrderRequest) -> CreateOrderResponse:
        """
        Create a new order.

        Raises:
            ValidationException: empty items, quantity < 1, unknown product,
                unknown or inactive coupon, unknown payment method
        """
        self._validate_items(request.items)

        products = await self.product_repository.get_many(list({item.product_id for item in request.items}))
        missing = [str(item.product_id) for item in request.items if item.product_id not in products]
        if missing:
            logger.warning(f"Order rejected, unknown products: {missing}")
            raise ValidationException(
                f"Unknown product reference(s): {', '.join(missing)}",
                field="items",
                details={"missing_products": missing},
            )

        discount_percentage = await self._resolve_discount(request.coupon_code)

        try:
            payment_method = (
                PaymentMethod.from_string(request.payment_method) if request.payment_method else PaymentMethod.COD
            )
        except ValueError as e:
            raise ValidationException(str(e), field="paymentMethod") from e

        order = Order(
            owner_id=request.owner.id,
            items=[self._build_item(line, products[line.product_id]) for line in request.items],
            discount_percentage=discount_percentage,
            payment_method=payment_method,
            coupon_code=request.coupon_code.strip() if request.coupon_code else None,
            shipping_address=ShippingAddress.from_dict(request.shipping_address),
        )

        created = await self.order_repository.create(order)
        logger.info(f"Order created: {created.id} for user {request.owner.id} (total {created.total_price})")
        return CreateOrderResponse(order=created)

    @staticmethod
    def _validate_items(items: list[OrderItemInput]) -> None:
        if not items:
            raise ValidationException("At least one item is required", field="items")
        for i, item in enumerate(items):
            if isinstance(item.quantity, bool) or not isinstance(item.quantity, int) or item.quantity < 1:
                raise ValidationException(f"Item {i + 1}: quantity must be at least 1", field="quantity")

    async def _resolve_discount(self, coupon_code: str | None) -> Decimal:
        if not coupon_code or not coupon_code.strip():
            return Decimal("0")
        coupon = await self.coupon_repository.get_by_code(coupon_code.strip())
        if coupon is None or not coupon.is_redeemable():
            logger.warning(f"Order rejected, coupon not redeemable: {coupon_code}")
            raise ValidationException(f"Coupon '{coupon_code}' is not valid", field="couponCode")
        return coupon.discount_percentage

    @staticmethod
    def _build_item(line: OrderItemInput, product: Product) -> OrderItem:
        customizations = [Customization.from_dict(c) for c in line.customizations or []]
        return OrderItem(
            product_id=line.product_id,
            quantity=line.quantity,
            price_at_purchase=unit_price_with_customizations(
                product.price, [c.extra_price for c in customizations]
            ),
            customizations=customizations,
            product_name=product.name,
            product_image=product.image,
            product_price=product.price,
        )


__all__ = ["CreateOrderUseCase", "CreateOrderRequest", "CreateOrderResponse", "OrderItemInput"]
