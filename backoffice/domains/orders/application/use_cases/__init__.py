"""
Orders Application Use Cases
"""

from backoffice.domains.orders.application.use_cases.assign_delivery_route import (
    AssignDeliveryRouteRequest,
    AssignDeliveryRouteUseCase,
    DeliveryRouteAssignmentResponse,
    UnassignDeliveryRouteUseCase,
)
from backoffice.domains.orders.application.use_cases.create_order import (
    CreateOrderRequest,
    CreateOrderResponse,
    CreateOrderUseCase,
    OrderItemInput,
)
from backoffice.domains.orders.application.use_cases.get_dashboard_stats import (
    DashboardStatsResponse,
    GetDashboardStatsUseCase,
)
from backoffice.domains.orders.application.use_cases.get_orders import (
    GetCustomerOrdersRequest,
    GetCustomerOrdersResponse,
    GetCustomerOrdersUseCase,
    ListAllOrdersUseCase,
)
from backoffice.domains.orders.application.use_cases.manage_delivery_routes import (
    CreateDeliveryRouteRequest,
    CreateDeliveryRouteUseCase,
    DeleteDeliveryRouteUseCase,
    ListDeliveryRoutesUseCase,
)
from backoffice.domains.orders.application.use_cases.submit_review import (
    SubmitReviewRequest,
    SubmitReviewResponse,
    SubmitReviewUseCase,
)
from backoffice.domains.orders.application.use_cases.update_order_status import (
    UpdateOrderStatusRequest,
    UpdateOrderStatusResponse,
    UpdateOrderStatusUseCase,
)

__all__ = [
    "AssignDeliveryRouteRequest",
    "AssignDeliveryRouteUseCase",
    "CreateDeliveryRouteRequest",
    "CreateDeliveryRouteUseCase",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "CreateOrderUseCase",
    "DashboardStatsResponse",
    "DeleteDeliveryRouteUseCase",
    "DeliveryRouteAssignmentResponse",
    "GetCustomerOrdersRequest",
    "GetCustomerOrdersResponse",
    "GetCustomerOrdersUseCase",
    "GetDashboardStatsUseCase",
    "ListAllOrdersUseCase",
    "ListDeliveryRoutesUseCase",
    "OrderItemInput",
    "SubmitReviewRequest",
    "SubmitReviewResponse",
    "SubmitReviewUseCase",
    "UnassignDeliveryRouteUseCase",
    "UpdateOrderStatusRequest",
    "UpdateOrderStatusResponse",
    "UpdateOrderStatusUseCase",
]
