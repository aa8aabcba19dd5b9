"""
Stats Repository Implementation

Reads full collections for the dashboard. Only the columns the aggregator
needs are selected.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.domains.orders.application.ports import IStatsRepository
from backoffice.domains.orders.domain.services import (
    BlogFact,
    CategoryFact,
    CouponFact,
    OrderFact,
    ProductFact,
    StatsSnapshot,
    UserFact,
)
from backoffice.models.db import Blog, Category, Coupon, Order, Product, User


class SQLAlchemyStatsRepository(IStatsRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def load_snapshot(self) -> StatsSnapshot:
        orders = await self.session.execute(
            select(Order.id, Order.total_price, Order.status, Order.payment_method, Order.created_at)
        )
        products = await self.session.execute(
            select(Product.id, Product.name, Product.category_id, Product.created_at)
        )
        users = await self.session.execute(select(User.role))
        categories = await self.session.execute(select(Category.id, Category.name).order_by(Category.name))
        blogs = await self.session.execute(select(Blog.id, Blog.title, Blog.status, Blog.created_at))
        coupons = await self.session.execute(select(Coupon.is_active))

        return StatsSnapshot(
            orders=[
                OrderFact(
                    id=row.id,
                    total_price=row.total_price,
                    status=row.status,
                    payment_method=row.payment_method,
                    created_at=row.created_at,
                )
                for row in orders
            ],
            products=[
                ProductFact(id=row.id, name=row.name, category_id=row.category_id, created_at=row.created_at)
                for row in products
            ],
            users=[UserFact(role=row.role) for row in users],
            categories=[CategoryFact(id=row.id, name=row.name) for row in categories],
            blogs=[
                BlogFact(id=row.id, title=row.title, status=row.status, created_at=row.created_at)
                for row in blogs
            ],
            coupons=[CouponFact(is_active=bool(row.is_active)) for row in coupons],
        )
