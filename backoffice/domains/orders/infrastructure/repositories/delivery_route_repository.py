"""
Delivery Route Repository Implementation
"""

import logging
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.domains.orders.application.ports import IDeliveryRouteRepository
from backoffice.domains.orders.domain.entities import DeliveryRoute
from backoffice.models.db import DeliveryRoute as DeliveryRouteModel
from backoffice.models.db import Order as OrderModel

from .mappers import route_to_entity

logger = logging.getLogger(__name__)


class SQLAlchemyDeliveryRouteRepository(IDeliveryRouteRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, route_id: UUID) -> DeliveryRoute | None:
        result = await self.session.execute(
            select(DeliveryRouteModel)
            .where(DeliveryRouteModel.id == route_id)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        return route_to_entity(model) if model else None

    async def list_all(self) -> list[DeliveryRoute]:
        result = await self.session.execute(
            select(DeliveryRouteModel).order_by(DeliveryRouteModel.delivery_date, DeliveryRouteModel.city)
        )
        return [route_to_entity(m) for m in result.scalars().all()]

    async def create(self, route: DeliveryRoute) -> DeliveryRoute:
        model = DeliveryRouteModel(
            city=route.city.strip(),
            delivery_date=route.delivery_date,
            status=route.status.value,
        )
        try:
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            logger.error(f"Error creating delivery route {route.city}: {e}")
            await self.session.rollback()
            raise
        return route_to_entity(model)

    async def delete(self, route_id: UUID) -> bool:
        """Detach referencing orders (route and date together), then delete the route."""
        try:
            await self.session.execute(
                update(OrderModel)
                .where(OrderModel.delivery_route_id == route_id)
                .values(delivery_route_id=None, delivery_date=None, updated_at=datetime.now(UTC))
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(
                delete(DeliveryRouteModel)
                .where(DeliveryRouteModel.id == route_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                await self.session.rollback()
                return False
            await self.session.commit()
            return True
        except SQLAlchemyError as e:
            logger.error(f"Error deleting delivery route {route_id}: {e}")
            await self.session.rollback()
            raise
