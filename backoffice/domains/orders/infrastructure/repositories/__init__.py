"""
Orders Infrastructure Repositories
"""

from backoffice.domains.orders.infrastructure.repositories.catalog_repository import (
    SQLAlchemyCouponRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyUserRepository,
)
from backoffice.domains.orders.infrastructure.repositories.delivery_route_repository import (
    SQLAlchemyDeliveryRouteRepository,
)
from backoffice.domains.orders.infrastructure.repositories.order_repository import SQLAlchemyOrderRepository
from backoffice.domains.orders.infrastructure.repositories.review_repository import SQLAlchemyReviewRepository
from backoffice.domains.orders.infrastructure.repositories.stats_repository import SQLAlchemyStatsRepository

__all__ = [
    "SQLAlchemyCouponRepository",
    "SQLAlchemyDeliveryRouteRepository",
    "SQLAlchemyOrderRepository",
    "SQLAlchemyProductRepository",
    "SQLAlchemyReviewRepository",
    "SQLAlchemyStatsRepository",
    "SQLAlchemyUserRepository",
]
