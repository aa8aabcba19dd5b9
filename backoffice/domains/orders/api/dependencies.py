"""
Orders API Dependencies

FastAPI dependencies building the orders use cases for a request.
"""

from typing import Any
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.api.dependencies import get_container
from backoffice.core.container import DependencyContainer
from backoffice.core.domain import EntityNotFoundException, ValidationException
from backoffice.database.async_db import get_async_db
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


def parse_entity_id(value: Any, entity_type: str) -> UUID:
    """A malformed id cannot name an existing entity, so it is reported as not found."""
    try:
        return UUID(str(value).strip())
    except ValueError as e:
        raise EntityNotFoundException(entity_type, value) from e


def parse_reference(value: Any, field: str) -> UUID:
    """Ids inside request bodies must be well formed."""
    try:
        return UUID(str(value).strip())
    except ValueError as e:
        raise ValidationException(f"Invalid {field}: {value}", field=field) from e


def get_create_order_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> CreateOrderUseCase:
    return container.orders.create_create_order_use_case(db)


def get_customer_orders_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> GetCustomerOrdersUseCase:
    return container.orders.create_get_customer_orders_use_case(db)


def get_list_all_orders_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> ListAllOrdersUseCase:
    return container.orders.create_list_all_orders_use_case(db)


def get_update_order_status_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> UpdateOrderStatusUseCase:
    return container.orders.create_update_order_status_use_case(db)


def get_assign_delivery_route_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> AssignDeliveryRouteUseCase:
    return container.orders.create_assign_delivery_route_use_case(db)


def get_unassign_delivery_route_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> UnassignDeliveryRouteUseCase:
    return container.orders.create_unassign_delivery_route_use_case(db)


def get_list_delivery_routes_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> ListDeliveryRoutesUseCase:
    return container.orders.create_list_delivery_routes_use_case(db)


def get_create_delivery_route_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> CreateDeliveryRouteUseCase:
    return container.orders.create_create_delivery_route_use_case(db)


def get_delete_delivery_route_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> DeleteDeliveryRouteUseCase:
    return container.orders.create_delete_delivery_route_use_case(db)


def get_submit_review_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> SubmitReviewUseCase:
    return container.orders.create_submit_review_use_case(db)


def get_dashboard_stats_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> GetDashboardStatsUseCase:
    return container.orders.create_get_dashboard_stats_use_case(db)
