"""
Order Repository Implementation

SQLAlchemy implementation of IOrderRepository.
"""

import logging
from datetime import UTC, date, datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backoffice.domains.orders.application.ports import IOrderRepository
from backoffice.domains.orders.domain.entities import Order
from backoffice.domains.orders.domain.value_objects import OrderStatus
from backoffice.models.db import Order as OrderModel
from backoffice.models.db import OrderItem as OrderItemModel

from .mappers import order_to_entity, order_to_model

logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(IOrderRepository):
    """
    SQLAlchemy implementation of order repository.

    Every read populates owner, item products and delivery route. Writes to
    existing orders are single conditional UPDATE statements.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _select(self):
        return (
            select(OrderModel)
            .options(
                selectinload(OrderModel.items).selectinload(OrderItemModel.product),
                selectinload(OrderModel.user),
                selectinload(OrderModel.delivery_route),
            )
            .execution_options(populate_existing=True)
        )

    async def create(self, order: Order) -> Order:
        model = order_to_model(order)
        try:
            self.session.add(model)
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error creating order for user {order.owner_id}: {e}")
            await self.session.rollback()
            raise
        created = await self.get_by_id(model.id)
        if created is None:
            raise RuntimeError(f"Order {model.id} vanished after insert")
        return created

    async def get_by_id(self, order_id: UUID) -> Order | None:
        try:
            result = await self.session.execute(self._select().where(OrderModel.id == order_id))
            model = result.scalar_one_or_none()
            return order_to_entity(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Error getting order by ID {order_id}: {e}")
            raise

    async def get_by_owner(self, owner_id: UUID) -> list[Order]:
        try:
            result = await self.session.execute(
                self._select().where(OrderModel.user_id == owner_id).order_by(OrderModel.created_at.desc())
            )
            return [order_to_entity(m) for m in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Error getting orders for user {owner_id}: {e}")
            raise

    async def list_all(self) -> list[Order]:
        try:
            result = await self.session.execute(self._select().order_by(OrderModel.created_at.desc()))
            return [order_to_entity(m) for m in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Error listing orders: {e}")
            raise

    async def transition_status(self, order_id: UUID, expected: OrderStatus, new_status: OrderStatus) -> bool:
        stmt = (
            update(OrderModel)
            .where(OrderModel.id == order_id, OrderModel.status == expected.value)
            .values(status=new_status.value, updated_at=datetime.now(UTC))
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error updating status for order {order_id}: {e}")
            await self.session.rollback()
            raise
        return result.rowcount == 1

    async def set_delivery_route(self, order_id: UUID, route_id: UUID | None, delivery_date: date | None) -> bool:
        stmt = (
            update(OrderModel)
            .where(OrderModel.id == order_id)
            .values(delivery_route_id=route_id, delivery_date=delivery_date, updated_at=datetime.now(UTC))
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error setting delivery route for order {order_id}: {e}")
            await self.session.rollback()
            raise
        return result.rowcount == 1
