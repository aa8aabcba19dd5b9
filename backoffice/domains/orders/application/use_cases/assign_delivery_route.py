"""
Delivery route assignment use cases.
"""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from backoffice.core.domain import AuthorizationException, EntityNotFoundException
from backoffice.domains.orders.application.ports import IDeliveryRouteRepository, IOrderRepository
from backoffice.domains.orders.domain.entities import Order
from backoffice.domains.orders.domain.services import DeliveryRouteAssigner
from backoffice.domains.orders.domain.value_objects import CurrentUser

logger = logging.getLogger(__name__)


@dataclass
class AssignDeliveryRouteRequest:
    order_id: UUID
    route_id: UUID
    acting_user: CurrentUser
    # Date the client saw on the route; the stored route date wins
    requested_date: date | None = None


@dataclass
class DeliveryRouteAssignmentResponse:
    order: Order
    changed: bool
    success: bool = True


async def _load_order(order_repository: IOrderRepository, order_id: UUID) -> Order:
    order = await order_repository.get_by_id(order_id)
    if order is None:
        raise EntityNotFoundException("Order", order_id)
    return order


class AssignDeliveryRouteUseCase:
    """
    Use Case: Assign Delivery Route

    Attaches the order to the route and snapshots the route's delivery date.
    Route and date are written together in one statement; assigning the same
    route again is a no-op.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        route_repository: IDeliveryRouteRepository,
        assigner: DeliveryRouteAssigner,
    ):
        self.order_repository = order_repository
        self.route_repository = route_repository
        self.assigner = assigner

    async def execute(self, request: AssignDeliveryRouteRequest) -> DeliveryRouteAssignmentResponse:
        if not request.acting_user.is_admin:
            raise AuthorizationException("assign_delivery_route", "order", str(request.acting_user.id))

        order = await _load_order(self.order_repository, request.order_id)
        route = await self.route_repository.get_by_id(request.route_id)
        if route is None:
            raise EntityNotFoundException("DeliveryRoute", request.route_id)

        changed = self.assigner.assign(order, route)
        if request.requested_date is not None and request.requested_date != order.delivery_date:
            logger.warning(
                f"Requested date {request.requested_date} differs from route {route.id} date "
                f"{order.delivery_date}; using the route date"
            )

        if changed:
            if not await self.order_repository.set_delivery_route(order.id, route.id, order.delivery_date):
                raise EntityNotFoundException("Order", order.id)
            logger.info(f"Order {order.id} assigned to route {route.id} for {order.delivery_date}")

        updated = await _load_order(self.order_repository, order.id)
        return DeliveryRouteAssignmentResponse(order=updated, changed=changed)


class UnassignDeliveryRouteUseCase:
    """Use Case: clear an order's delivery route and date, in any status."""

    def __init__(self, order_repository: IOrderRepository, assigner: DeliveryRouteAssigner):
        self.order_repository = order_repository
        self.assigner = assigner

    async def execute(self, order_id: UUID, acting_user: CurrentUser) -> DeliveryRouteAssignmentResponse:
        if not acting_user.is_admin:
            raise AuthorizationException("unassign_delivery_route", "order", str(acting_user.id))

        order = await _load_order(self.order_repository, order_id)
        changed = self.assigner.unassign(order)
        if changed:
            if not await self.order_repository.set_delivery_route(order.id, None, None):
                raise EntityNotFoundException("Order", order.id)
            logger.info(f"Order {order.id} removed from its delivery route")

        updated = await _load_order(self.order_repository, order.id)
        return DeliveryRouteAssignmentResponse(order=updated, changed=changed)


__all__ = [
    "AssignDeliveryRouteRequest",
    "AssignDeliveryRouteUseCase",
    "DeliveryRouteAssignmentResponse",
    "UnassignDeliveryRouteUseCase",
]
