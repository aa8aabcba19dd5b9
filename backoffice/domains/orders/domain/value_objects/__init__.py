"""
Orders Domain Value Objects
"""

from backoffice.domains.orders.domain.value_objects.order_details import (
    CurrentUser,
    Customization,
    ShippingAddress,
)
from backoffice.domains.orders.domain.value_objects.order_status import (
    BlogStatus,
    DeliveryRouteStatus,
    OrderStatus,
    PaymentMethod,
    UserRole,
)

__all__ = [
    "BlogStatus",
    "CurrentUser",
    "Customization",
    "DeliveryRouteStatus",
    "OrderStatus",
    "PaymentMethod",
    "ShippingAddress",
    "UserRole",
]
