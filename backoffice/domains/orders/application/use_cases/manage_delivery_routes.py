"""
Delivery route administration use cases.
"""

import logging
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from backoffice.core.domain import AuthorizationException, EntityNotFoundException
from backoffice.domains.orders.application.ports import IDeliveryRouteRepository
from backoffice.domains.orders.domain.entities import DeliveryRoute
from backoffice.domains.orders.domain.services import DeliveryRouteAssigner, parse_delivery_date
from backoffice.domains.orders.domain.value_objects import CurrentUser

logger = logging.getLogger(__name__)


def _require_admin(user: CurrentUser, operation: str) -> None:
    if not user.is_admin:
        raise AuthorizationException(operation, "delivery_route", str(user.id))


class ListDeliveryRoutesUseCase:
    """
    Use Case: list delivery routes.

    With assignable_only, routes already shipped or delivered are left out,
    which is what the admin picker offers for new assignments.
    """

    def __init__(self, route_repository: IDeliveryRouteRepository, assigner: DeliveryRouteAssigner):
        self.route_repository = route_repository
        self.assigner = assigner

    async def execute(self, acting_user: CurrentUser, assignable_only: bool = True) -> list[DeliveryRoute]:
        _require_admin(acting_user, "list_delivery_routes")
        routes = await self.route_repository.list_all()
        return self.assigner.eligible_routes(routes) if assignable_only else routes


@dataclass
class CreateDeliveryRouteRequest:
    city: str
    delivery_date: Any
    acting_user: CurrentUser
    status: str = "pending"


class CreateDeliveryRouteUseCase:
    def __init__(self, route_repository: IDeliveryRouteRepository):
        self.route_repository = route_repository

    async def execute(self, request: CreateDeliveryRouteRequest) -> DeliveryRoute:
        _require_admin(request.acting_user, "create_delivery_route")
        route = DeliveryRoute(
            city=request.city,
            delivery_date=parse_delivery_date(request.delivery_date),
            status=request.status,
        )
        created = await self.route_repository.create(route)
        logger.info(f"Delivery route created: {created.id} ({created.city}, {created.delivery_date})")
        return created


class DeleteDeliveryRouteUseCase:
    """Deleting a route detaches its orders; it never deletes them."""

    def __init__(self, route_repository: IDeliveryRouteRepository):
        self.route_repository = route_repository

    async def execute(self, route_id: UUID, acting_user: CurrentUser) -> None:
        _require_admin(acting_user, "delete_delivery_route")
        if not await self.route_repository.delete(route_id):
            raise EntityNotFoundException("DeliveryRoute", route_id)
        logger.info(f"Delivery route deleted: {route_id}")


__all__ = [
    "CreateDeliveryRouteRequest",
    "CreateDeliveryRouteUseCase",
    "DeleteDeliveryRouteUseCase",
    "ListDeliveryRoutesUseCase",
]
