"""
Update Order Status Use Case
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from backoffice.core.domain import (
    AuthorizationException,
    ConcurrencyException,
    EntityNotFoundException,
    InvalidTransitionException,
    ValidationException,
)
from backoffice.domains.orders.application.ports import IOrderRepository
from backoffice.domains.orders.domain.entities import Order
from backoffice.domains.orders.domain.value_objects import CurrentUser, OrderStatus

logger = logging.getLogger(__name__)


@dataclass
class UpdateOrderStatusRequest:
    order_id: UUID
    new_status: str | None
    acting_user: CurrentUser


@dataclass
class UpdateOrderStatusResponse:
    order: Order
    previous_status: OrderStatus
    success: bool = True


class UpdateOrderStatusUseCase:
    """
    Use Case: Update Order Status

    Checks order: admin, order exists, status is known, transition is legal.
    The write is conditional on the status read, so two concurrent
    transitions cannot both apply.
    """

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, request: UpdateOrderStatusRequest) -> UpdateOrderStatusResponse:
        if not request.acting_user.is_admin:
            raise AuthorizationException("update_order_status", "order", str(request.acting_user.id))

        order = await self.order_repository.get_by_id(request.order_id)
        if order is None:
            raise EntityNotFoundException("Order", request.order_id)

        if not request.new_status:
            raise ValidationException("Status is required", field="status")
        try:
            target = OrderStatus.from_string(request.new_status)
        except ValueError as e:
            raise ValidationException(str(e), field="status") from e

        previous = order.status
        try:
            order.change_status(target)
        except InvalidTransitionException:
            logger.warning(f"Rejected transition {previous.value} -> {target.value} for order {order.id}")
            raise

        applied = await self.order_repository.transition_status(order.id, previous, target)
        if not applied:
            current = await self.order_repository.get_by_id(order.id)
            if current is None:
                raise EntityNotFoundException("Order", order.id)
            raise ConcurrencyException("Order", order.id, previous.value, current.status.value)

        updated = await self.order_repository.get_by_id(order.id)
        if updated is None:
            raise EntityNotFoundException("Order", order.id)

        logger.info(f"Order {order.id} status changed: {previous.value} -> {target.value}")
        return UpdateOrderStatusResponse(order=updated, previous_status=previous)


__all__ = ["UpdateOrderStatusRequest", "UpdateOrderStatusResponse", "UpdateOrderStatusUseCase"]
