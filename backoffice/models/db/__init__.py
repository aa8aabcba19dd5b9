"""
SQLAlchemy models for the backoffice schema.
"""

from .base import Base, TimestampMixin
from .catalog import Category, Product
from .content import Blog, Coupon
from .delivery import DeliveryRoute
from .orders import Order, OrderItem
from .reviews import Review
from .users import User

__all__ = [
    "Base",
    "TimestampMixin",
    "Blog",
    "Category",
    "Coupon",
    "DeliveryRoute",
    "Order",
    "OrderItem",
    "Product",
    "Review",
    "User",
]
