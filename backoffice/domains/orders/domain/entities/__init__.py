"""
Orders Domain Entities
"""

from backoffice.domains.orders.domain.entities.catalog import Coupon, Product
from backoffice.domains.orders.domain.entities.delivery_route import DeliveryRoute
from backoffice.domains.orders.domain.entities.order import Order, OrderItem
from backoffice.domains.orders.domain.entities.review import Review

__all__ = [
    "Coupon",
    "DeliveryRoute",
    "Order",
    "OrderItem",
    "Product",
    "Review",
]
