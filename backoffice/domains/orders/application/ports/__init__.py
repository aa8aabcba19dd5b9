"""
Orders Application Ports

Interface definitions (ports) for the orders domain.
Uses Protocol for structural typing.
"""

from datetime import date
from typing import Protocol, runtime_checkable
from uuid import UUID

from backoffice.domains.orders.domain.entities import Coupon, DeliveryRoute, Order, Product, Review
from backoffice.domains.orders.domain.services.stats_aggregator import StatsSnapshot
from backoffice.domains.orders.domain.value_objects import CurrentUser, OrderStatus


@runtime_checkable
class IOrderRepository(Protocol):
    """
    Interface for order repository.

    Reads return orders with owner, product and delivery route populated.
    """

    async def create(self, order: Order) -> Order:
        """Persist a new order with its items"""
        ...

    async def get_by_id(self, order_id: UUID) -> Order | None:
        ...

    async def get_by_owner(self, owner_id: UUID) -> list[Order]:
        """Orders of one user, newest first"""
        ...

    async def list_all(self) -> list[Order]:
        ...

    async def transition_status(self, order_id: UUID, expected: OrderStatus, new_status: OrderStatus) -> bool:
        """
        Set the status only if it is still `expected`.

        Returns False when the row was changed concurrently (or is gone).
        """
        ...

    async def set_delivery_route(self, order_id: UUID, route_id: UUID | None, delivery_date: date | None) -> bool:
        """Write route and date together in one statement"""
        ...


@runtime_checkable
class IDeliveryRouteRepository(Protocol):
    async def get_by_id(self, route_id: UUID) -> DeliveryRoute | None:
        ...

    async def list_all(self) -> list[DeliveryRoute]:
        ...

    async def create(self, route: DeliveryRoute) -> DeliveryRoute:
        ...

    async def delete(self, route_id: UUID) -> bool:
        """Delete the route and detach every order that referenced it"""
        ...


@runtime_checkable
class IReviewRepository(Protocol):
    async def create_for_order_item(self, review: Review) -> Review:
        """
        Insert the review and flag the matching order items as reviewed atomically.

        Raises:
            DuplicateEntityException: a review for (order, product) already exists
        """
        ...

    async def get_by_order_and_product(self, order_id: UUID, product_id: UUID) -> Review | None:
        ...


@runtime_checkable
class IProductRepository(Protocol):
    async def get_many(self, product_ids: list[UUID]) -> dict[UUID, Product]:
        """Products keyed by id; unknown ids are simply absent"""
        ...


@runtime_checkable
class ICouponRepository(Protocol):
    async def get_by_code(self, code: str) -> Coupon | None:
        ...


@runtime_checkable
class IUserRepository(Protocol):
    async def get_current_user(self, user_id: UUID) -> CurrentUser | None:
        """Resolve a user id to its role, None when unknown"""
        ...


@runtime_checkable
class IStatsRepository(Protocol):
    async def load_snapshot(self) -> StatsSnapshot:
        """Read every collection the dashboard needs"""
        ...


__all__ = [
    "ICouponRepository",
    "IDeliveryRouteRepository",
    "IOrderRepository",
    "IProductRepository",
    "IReviewRepository",
    "IStatsRepository",
    "IUserRepository",
]
