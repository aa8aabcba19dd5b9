"""
Catalog, coupon and user read repositories.
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.domain import ensure_aware
from backoffice.domains.orders.application.ports import ICouponRepository, IProductRepository, IUserRepository
from backoffice.domains.orders.domain.entities import Coupon, Product
from backoffice.domains.orders.domain.value_objects import CurrentUser, UserRole
from backoffice.models.db import Coupon as CouponModel
from backoffice.models.db import Product as ProductModel
from backoffice.models.db import User as UserModel

from .mappers import product_to_entity

logger = logging.getLogger(__name__)


class SQLAlchemyProductRepository(IProductRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_many(self, product_ids: list[UUID]) -> dict[UUID, Product]:
        if not product_ids:
            return {}
        result = await self.session.execute(select(ProductModel).where(ProductModel.id.in_(product_ids)))
        return {model.id: product_to_entity(model) for model in result.scalars().all()}


class SQLAlchemyCouponRepository(ICouponRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_code(self, code: str) -> Coupon | None:
        result = await self.session.execute(select(CouponModel).where(CouponModel.code == code))
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return Coupon(
            id=model.id,
            code=model.code,
            discount_percentage=model.discount_percentage,
            is_active=bool(model.is_active),
            created_at=ensure_aware(model.created_at),
            updated_at=ensure_aware(model.updated_at),
        )


class SQLAlchemyUserRepository(IUserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_current_user(self, user_id: UUID) -> CurrentUser | None:
        result = await self.session.execute(select(UserModel.id, UserModel.role).where(UserModel.id == user_id))
        row = result.one_or_none()
        if row is None:
            return None
        try:
            role = UserRole.from_string(row.role)
        except ValueError:
            logger.warning(f"User {user_id} has unknown role '{row.role}', treating as customer")
            role = UserRole.CUSTOMER
        return CurrentUser(id=row.id, role=role)
