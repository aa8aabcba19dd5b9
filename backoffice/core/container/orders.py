"""
Orders Domain Container.

Single Responsibility: Wire all orders domain dependencies.
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.domains.orders.application.use_cases import (
    AssignDeliveryRouteUseCase,
    CreateDeliveryRouteUseCase,
    CreateOrderUseCase,
    DeleteDeliveryRouteUseCase,
    GetCustomerOrdersUseCase,
    GetDashboardStatsUseCase,
    ListAllOrdersUseCase,
    ListDeliveryRoutesUseCase,
    SubmitReviewUseCase,
    UnassignDeliveryRouteUseCase,
    UpdateOrderStatusUseCase,
)
from backoffice.domains.orders.infrastructure.repositories import (
    SQLAlchemyCouponRepository,
    SQLAlchemyDeliveryRouteRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyReviewRepository,
    SQLAlchemyStatsRepository,
    SQLAlchemyUserRepository,
)

if TYPE_CHECKING:
    from backoffice.core.container.base import BaseContainer


class OrdersContainer:
    """
    Orders domain container.

    Repositories are bound to the request's session; use cases are cheap and
    built per request.
    """

    def __init__(self, base: "BaseContainer"):
        self._base = base

    # ==================== REPOSITORIES ====================

    def create_order_repository(self, db: AsyncSession) -> SQLAlchemyOrderRepository:
        return SQLAlchemyOrderRepository(session=db)

    def create_delivery_route_repository(self, db: AsyncSession) -> SQLAlchemyDeliveryRouteRepository:
        return SQLAlchemyDeliveryRouteRepository(session=db)

    def create_review_repository(self, db: AsyncSession) -> SQLAlchemyReviewRepository:
        return SQLAlchemyReviewRepository(session=db)

    def create_product_repository(self, db: AsyncSession) -> SQLAlchemyProductRepository:
        return SQLAlchemyProductRepository(session=db)

    def create_coupon_repository(self, db: AsyncSession) -> SQLAlchemyCouponRepository:
        return SQLAlchemyCouponRepository(session=db)

    def create_user_repository(self, db: AsyncSession) -> SQLAlchemyUserRepository:
        return SQLAlchemyUserRepository(session=db)

    def create_stats_repository(self, db: AsyncSession) -> SQLAlchemyStatsRepository:
        return SQLAlchemyStatsRepository(session=db)

    # ==================== USE CASES ====================

    def create_create_order_use_case(self, db: AsyncSession) -> CreateOrderUseCase:
        return CreateOrderUseCase(
            order_repository=self.create_order_repository(db),
            product_repository=self.create_product_repository(db),
            coupon_repository=self.create_coupon_repository(db),
        )

    def create_get_customer_orders_use_case(self, db: AsyncSession) -> GetCustomerOrdersUseCase:
        return GetCustomerOrdersUseCase(order_repository=self.create_order_repository(db))

    def create_list_all_orders_use_case(self, db: AsyncSession) -> ListAllOrdersUseCase:
        return ListAllOrdersUseCase(order_repository=self.create_order_repository(db))

    def create_update_order_status_use_case(self, db: AsyncSession) -> UpdateOrderStatusUseCase:
        return UpdateOrderStatusUseCase(order_repository=self.create_order_repository(db))

    def create_assign_delivery_route_use_case(self, db: AsyncSession) -> AssignDeliveryRouteUseCase:
        return AssignDeliveryRouteUseCase(
            order_repository=self.create_order_repository(db),
            route_repository=self.create_delivery_route_repository(db),
            assigner=self._base.get_route_assigner(),
        )

    def create_unassign_delivery_route_use_case(self, db: AsyncSession) -> UnassignDeliveryRouteUseCase:
        return UnassignDeliveryRouteUseCase(
            order_repository=self.create_order_repository(db),
            assigner=self._base.get_route_assigner(),
        )

    def create_list_delivery_routes_use_case(self, db: AsyncSession) -> ListDeliveryRoutesUseCase:
        return ListDeliveryRoutesUseCase(
            route_repository=self.create_delivery_route_repository(db),
            assigner=self._base.get_route_assigner(),
        )

    def create_create_delivery_route_use_case(self, db: AsyncSession) -> CreateDeliveryRouteUseCase:
        return CreateDeliveryRouteUseCase(route_repository=self.create_delivery_route_repository(db))

    def create_delete_delivery_route_use_case(self, db: AsyncSession) -> DeleteDeliveryRouteUseCase:
        return DeleteDeliveryRouteUseCase(route_repository=self.create_delivery_route_repository(db))

    def create_submit_review_use_case(self, db: AsyncSession) -> SubmitReviewUseCase:
        return SubmitReviewUseCase(
            order_repository=self.create_order_repository(db),
            review_repository=self.create_review_repository(db),
            gate=self._base.get_review_gate(),
        )

    def create_get_dashboard_stats_use_case(self, db: AsyncSession) -> GetDashboardStatsUseCase:
        return GetDashboardStatsUseCase(
            stats_repository=self.create_stats_repository(db),
            aggregator=self._base.get_stats_aggregator(),
        )
