"""
Delivery routes
"""

import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import Column, Date, Index, String, Uuid
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .orders import Order


class DeliveryRoute(Base, TimestampMixin):
    """A dated delivery run to one city."""

    __tablename__ = "delivery_routes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    city = Column(String(100), nullable=False)
    delivery_date = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default="pending")  # pending, processing, shipped, delivered

    orders: Mapped[List["Order"]] = relationship("Order", back_populates="delivery_route")

    __table_args__ = (Index("idx_delivery_routes_status", status),)

    def __repr__(self):
        return f"<DeliveryRoute(city='{self.city}', date={self.delivery_date}, status='{self.status}')>"
