"""
Order Entity for the Orders Domain

A customer order with its line items, totals, status and delivery assignment.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from backoffice.core.domain import Entity, ValidationException, to_amount

from ..services.pricing import compute_totals
from ..services.status_machine import OrderStatusMachine
from ..value_objects.order_details import Customization, ShippingAddress
from ..value_objects.order_status import OrderStatus, PaymentMethod

if TYPE_CHECKING:
    from .delivery_route import DeliveryRoute


@dataclass
class OrderItem:
    """
    A line in an order.

    price_at_purchase is the per-unit price including customizations, fixed
    when the order is placed. The product_* fields are filled in on read.
    """

    product_id: UUID
    quantity: int
    price_at_purchase: Decimal
    customizations: list[Customization] = field(default_factory=list)
    is_reviewed: bool = False
    product_name: str | None = None
    product_image: str | None = None
    product_price: Decimal | None = None

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValidationException(f"Quantity must be an integer >= 1, got {self.quantity}", field="quantity")
        self.price_at_purchase = to_amount(self.price_at_purchase)
        if self.price_at_purchase < 0:
            raise ValidationException("Price at purchase cannot be negative", field="priceAtPurchase")

    @property
    def line_total(self) -> Decimal:
        return self.price_at_purchase * self.quantity

    def mark_reviewed(self) -> None:
        self.is_reviewed = True


@dataclass(eq=False)
class Order(Entity[UUID]):
    """
    Order aggregate.

    Totals are always derived from the items and the discount percentage, so
    total_price == subtotal - discount holds for every constructed order.

    Example:
        ```python
        order = Order(
            owner_id=user_id,
            items=[OrderItem(product_id=a, quantity=2, price_at_purchase=Decimal("20"))],
            discount_percentage=Decimal("10"),
        )
        order.change_status(OrderStatus.PROCESSING)
        ```
    """

    owner_id: UUID | None = None
    items: list[OrderItem] = field(default_factory=list)

    discount_percentage: Decimal = Decimal("0")
    subtotal: Decimal = Decimal("0")
    discount: Decimal = Decimal("0")
    total_price: Decimal = Decimal("0")

    status: OrderStatus = OrderStatus.PENDING
    payment_method: PaymentMethod = PaymentMethod.COD
    coupon_code: str | None = None

    delivery_route_id: UUID | None = None
    delivery_date: date | None = None
    shipping_address: ShippingAddress = field(default_factory=ShippingAddress)

    # Populated on read
    owner_name: str | None = None
    owner_email: str | None = None
    delivery_route: "DeliveryRoute | None" = None

    def __post_init__(self):
        if self.owner_id is None:
            raise ValidationException("Order requires an owner", field="owner")
        if not self.items:
            raise ValidationException("Order requires at least one item", field="items")

        try:
            if not isinstance(self.status, OrderStatus):
                self.status = OrderStatus.from_string(self.status)
            if self.payment_method is None:
                self.payment_method = PaymentMethod.COD
            elif not isinstance(self.payment_method, PaymentMethod):
                self.payment_method = PaymentMethod.from_string(self.payment_method)
        except ValueError as e:
            raise ValidationException(str(e)) from e

        if self.delivery_date is not None and self.delivery_route_id is None:
            raise ValidationException("Delivery date requires a delivery route", field="deliveryDate")

        self._recalculate_totals()

    def _recalculate_totals(self) -> None:
        totals = compute_totals(
            ((item.price_at_purchase, item.quantity) for item in self.items),
            self.discount_percentage,
        )
        self.discount_percentage = to_amount(self.discount_percentage)
        self.subtotal = totals.subtotal
        self.discount = totals.discount
        self.total_price = totals.total_price

    # Status

    def change_status(self, new_status: OrderStatus) -> None:
        """Move to new_status, raising InvalidTransitionException if illegal."""
        OrderStatusMachine.ensure_transition(self.status, new_status)
        self.status = new_status
        self.touch()

    def can_review(self, item: OrderItem) -> bool:
        return OrderStatusMachine.can_review(self, item)

    # Delivery

    def assign_delivery_route(self, route_id: UUID, delivery_date: date) -> bool:
        """Set route and date together. Returns False when nothing changed."""
        if self.delivery_route_id == route_id and self.delivery_date == delivery_date:
            return False
        self.delivery_route_id = route_id
        self.delivery_date = delivery_date
        self.touch()
        return True

    def clear_delivery_route(self) -> bool:
        if self.delivery_route_id is None and self.delivery_date is None:
            return False
        self.delivery_route_id = None
        self.delivery_date = None
        self.delivery_route = None
        self.touch()
        return True

    # Reviews

    def find_item(self, product_id: UUID) -> OrderItem | None:
        """First item for the product, preferring one not yet reviewed."""
        matches = [item for item in self.items if item.product_id == product_id]
        for item in matches:
            if not item.is_reviewed:
                return item
        return matches[0] if matches else None

    @property
    def is_fully_reviewed(self) -> bool:
        return all(item.is_reviewed for item in self.items)

    def belongs_to(self, user_id: UUID) -> bool:
        return self.owner_id == user_id
