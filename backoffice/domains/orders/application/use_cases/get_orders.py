"""
Order listing use cases.
"""

import logging
from dataclasses import dataclass, field
from uuid import UUID

from backoffice.core.domain import AuthorizationException
from backoffice.domains.orders.application.ports import IOrderRepository
from backoffice.domains.orders.domain.entities import Order
from backoffice.domains.orders.domain.services import partition_by_review
from backoffice.domains.orders.domain.value_objects import CurrentUser

logger = logging.getLogger(__name__)


@dataclass
class GetCustomerOrdersRequest:
    acting_user: CurrentUser
    owner_id: UUID | None = None


@dataclass
class GetCustomerOrdersResponse:
    orders_without_review: list[Order] = field(default_factory=list)
    orders_with_review: list[Order] = field(default_factory=list)
    success: bool = True


class GetCustomerOrdersUseCase:
    """
    Use Case: Get Customer Orders

    Returns one user's orders split into current orders (at least one item
    still unreviewed) and history (every item reviewed). Customers may only
    read their own orders; admins may read anyone's.
    """

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, request: GetCustomerOrdersRequest) -> GetCustomerOrdersResponse:
        owner_id = request.owner_id or request.acting_user.id
        if owner_id != request.acting_user.id and not request.acting_user.is_admin:
            logger.warning(f"User {request.acting_user.id} tried to read orders of {owner_id}")
            raise AuthorizationException("list_orders", "orders", str(request.acting_user.id))

        orders = await self.order_repository.get_by_owner(owner_id)
        without_review, with_review = partition_by_review(orders)
        return GetCustomerOrdersResponse(
            orders_without_review=without_review,
            orders_with_review=with_review,
        )


class ListAllOrdersUseCase:
    """Use Case: every order, newest first (admin only)."""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, acting_user: CurrentUser) -> list[Order]:
        if not acting_user.is_admin:
            raise AuthorizationException("list_all_orders", "orders", str(acting_user.id))
        return await self.order_repository.list_all()


__all__ = [
    "GetCustomerOrdersRequest",
    "GetCustomerOrdersResponse",
    "GetCustomerOrdersUseCase",
    "ListAllOrdersUseCase",
]
