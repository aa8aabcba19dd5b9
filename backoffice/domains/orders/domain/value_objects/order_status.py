"""
Status value objects for the orders domain.
"""

from backoffice.core.domain import StatusEnum


class OrderStatus(StatusEnum):
    """
    Order lifecycle states.

    Legal transitions live in OrderStatusMachine:
    - PENDING -> PROCESSING, CANCELLED
    - PROCESSING -> SHIPPED, CANCELLED
    - SHIPPED -> DELIVERED, CANCELLED
    - DELIVERED -> RETURNED
    - CANCELLED, RETURNED -> (terminal states)
    """

    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    RETURNED = "returned"


class PaymentMethod(StatusEnum):
    """How the customer pays. Orders without one are cash on delivery."""

    COD = "cod"
    CARD = "card"
    PAYPAL = "paypal"
    STRIPE = "stripe"
    WALLET = "wallet"


class DeliveryRouteStatus(StatusEnum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"

    def accepts_assignments(self) -> bool:
        """Routes already on the road (or done) take no new orders."""
        return self not in (DeliveryRouteStatus.SHIPPED, DeliveryRouteStatus.DELIVERED)


class BlogStatus(StatusEnum):
    DRAFT = "draft"
    PUBLISHED = "published"


class UserRole(StatusEnum):
    ADMIN = "admin"
    CUSTOMER = "customer"
