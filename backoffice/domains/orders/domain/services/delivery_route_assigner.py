"""
Delivery route assignment rules.
"""

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Iterable

from backoffice.core.domain import InvalidOperationException, ValidationException

if TYPE_CHECKING:
    from ..entities.delivery_route import DeliveryRoute
    from ..entities.order import Order

logger = logging.getLogger(__name__)


def parse_delivery_date(value: Any) -> date:
    """
    Parse a delivery date from a date, datetime or ISO-8601 string.

    Raises:
        ValidationException: when the value is missing or unparseable
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationException("Delivery date is required", field="deliveryDate")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError as e:
            raise ValidationException(f"Invalid delivery date: {value}", field="deliveryDate") from e
    raise ValidationException(f"Invalid delivery date: {value!r}", field="deliveryDate")


class DeliveryRouteAssigner:
    """
    Attaches orders to delivery routes.

    The order's delivery date is a snapshot of the route's date taken at
    assignment; later changes to the route do not propagate until the order
    is assigned again.
    """

    def __init__(self, enforce_eligibility: bool = False):
        self.enforce_eligibility = enforce_eligibility

    @staticmethod
    def is_eligible(route: "DeliveryRoute") -> bool:
        return route.accepts_assignments()

    def eligible_routes(self, routes: Iterable["DeliveryRoute"]) -> list["DeliveryRoute"]:
        """Routes that may be offered for new assignments."""
        return [route for route in routes if self.is_eligible(route)]

    def assign(self, order: "Order", route: "DeliveryRoute") -> bool:
        """
        Point the order at the route and snapshot its date.

        Returns:
            False when the order already had this route and date
        """
        delivery_date = parse_delivery_date(route.delivery_date)
        if not self.is_eligible(route):
            if self.enforce_eligibility:
                raise InvalidOperationException(
                    "assign_delivery_route",
                    route.status.value,
                    f"Delivery route {route.id} is {route.status.value} and accepts no new orders",
                )
            logger.warning(f"Assigning order {order.id} to route {route.id} in status {route.status.value}")
        return order.assign_delivery_route(route.id, delivery_date)

    @staticmethod
    def unassign(order: "Order") -> bool:
        """Clear route and date; legal in any order status."""
        return order.clear_delivery_route()
