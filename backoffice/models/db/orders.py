"""
Order management models
"""

import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Uuid,
)
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .catalog import Product
    from .delivery import DeliveryRoute
    from .users import User


class Order(Base, TimestampMixin):
    """Customer orders"""

    __tablename__ = "orders"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False)

    # Amounts
    subtotal = Column(Numeric(12, 2), nullable=False, default=0)
    discount = Column(Numeric(12, 2), nullable=False, default=0)
    discount_percentage = Column(Numeric(5, 2), nullable=False, default=0)
    total_price = Column(Numeric(12, 2), nullable=False)

    status = Column(String(20), nullable=False, default="pending")
    payment_method = Column(String(20), nullable=False, default="cod")
    coupon_code = Column(String(50))

    # Delivery: route and date always change together
    delivery_route_id = Column(Uuid, ForeignKey("delivery_routes.id"), nullable=True)
    delivery_date = Column(Date, nullable=True)

    # {"firstName", "lastName", "streetAddress", "city", "postalCode", "phone", "email", "notes"}
    shipping_address = Column(JSON, nullable=False, default=dict)

    user: Mapped["User"] = relationship("User", back_populates="orders")
    delivery_route: Mapped["DeliveryRoute"] = relationship("DeliveryRoute", back_populates="orders")
    items: Mapped[List["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.position",
    )

    __table_args__ = (
        CheckConstraint("subtotal >= 0 AND discount >= 0 AND total_price >= 0", name="ck_orders_amounts"),
        CheckConstraint("total_price = subtotal - discount", name="ck_orders_total_matches"),
        CheckConstraint(
            "delivery_date IS NULL OR delivery_route_id IS NOT NULL",
            name="ck_orders_delivery_date_requires_route",
        ),
        Index("idx_orders_user", user_id),
        Index("idx_orders_status", status),
        Index("idx_orders_created_at", "created_at"),
        Index("idx_orders_delivery_route", delivery_route_id),
    )

    def __repr__(self):
        return f"<Order(id='{self.id}', status='{self.status}', total={self.total_price})>"


class OrderItem(Base):
    """Line items embedded in an order"""

    __tablename__ = "order_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    product_id = Column(Uuid, ForeignKey("products.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    # [{"type", "option", "extraPrice"}]
    customizations = Column(JSON, nullable=False, default=list)
    price_at_purchase = Column(Numeric(12, 2), nullable=False)
    is_reviewed = Column(Boolean, nullable=False, default=False)

    order: Mapped["Order"] = relationship("Order", back_populates="items")
    product: Mapped["Product"] = relationship("Product", back_populates="order_items")

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_order_items_quantity_positive"),
        CheckConstraint("price_at_purchase >= 0", name="ck_order_items_price_non_negative"),
        Index("idx_order_items_order", order_id),
        Index("idx_order_items_order_product", order_id, product_id),
    )

    def __repr__(self):
        return f"<OrderItem(product_id='{self.product_id}', quantity={self.quantity})>"
