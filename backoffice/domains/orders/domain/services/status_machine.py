"""
Order status machine.

Holds the legal order status transitions and the review-eligibility rule
derived from status.
"""

from typing import TYPE_CHECKING

from backoffice.core.domain import InvalidTransitionException

from ..value_objects.order_status import OrderStatus

if TYPE_CHECKING:
    from ..entities.order import Order, OrderItem


class OrderStatusMachine:
    """
    pending -> processing -> shipped -> delivered -> returned,
    with cancellation allowed from pending, processing and shipped.
    """

    TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
        OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
        OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
        OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
        OrderStatus.DELIVERED: frozenset({OrderStatus.RETURNED}),
        OrderStatus.CANCELLED: frozenset(),
        OrderStatus.RETURNED: frozenset(),
    }

    @classmethod
    def valid_transitions(cls, current: OrderStatus) -> frozenset[OrderStatus]:
        return cls.TRANSITIONS.get(current, frozenset())

    @classmethod
    def can_transition(cls, current: OrderStatus, target: OrderStatus) -> bool:
        return target in cls.valid_transitions(current)

    @classmethod
    def ensure_transition(cls, current: OrderStatus, target: OrderStatus) -> None:
        """Raise InvalidTransitionException unless current -> target is legal."""
        if not cls.can_transition(current, target):
            raise InvalidTransitionException(current.value, target.value)

    @classmethod
    def is_terminal(cls, status: OrderStatus) -> bool:
        return not cls.valid_transitions(status)

    @staticmethod
    def can_review(order: "Order", item: "OrderItem") -> bool:
        """An item is reviewable once its order is delivered, and only once."""
        return order.status == OrderStatus.DELIVERED and not item.is_reviewed
