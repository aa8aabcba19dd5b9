"""
Orders Domain Services
"""

from backoffice.domains.orders.domain.services.delivery_route_assigner import (
    DeliveryRouteAssigner,
    parse_delivery_date,
)
from backoffice.domains.orders.domain.services.order_partition import partition_by_review
from backoffice.domains.orders.domain.services.pricing import (
    OrderTotals,
    compute_totals,
    unit_price_with_customizations,
)
from backoffice.domains.orders.domain.services.review_gate import ReviewGate, is_image_url
from backoffice.domains.orders.domain.services.stats_aggregator import (
    BlogFact,
    CategoryFact,
    CouponFact,
    DashboardStats,
    OrderFact,
    ProductFact,
    StatsAggregator,
    StatsSnapshot,
    UserFact,
)
from backoffice.domains.orders.domain.services.status_machine import OrderStatusMachine

__all__ = [
    "BlogFact",
    "CategoryFact",
    "CouponFact",
    "DashboardStats",
    "DeliveryRouteAssigner",
    "OrderFact",
    "OrderStatusMachine",
    "OrderTotals",
    "ProductFact",
    "ReviewGate",
    "StatsAggregator",
    "StatsSnapshot",
    "UserFact",
    "compute_totals",
    "is_image_url",
    "parse_delivery_date",
    "partition_by_review",
    "unit_price_with_customizations",
]
