"""
Shared pytest fixtures for all tests.

Provides settings, an in-memory SQLite database, seeded catalog data,
an order factory and an HTTP client bound to the ASGI application.
"""

import os
from datetime import UTC, date, datetime
from decimal import Decimal
from types import SimpleNamespace
from typing import AsyncGenerator
from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config.settings import Settings
from backoffice.core.app_factory import create_app
from backoffice.database.async_db import Database
from backoffice.models.db import (
    Blog,
    Category,
    Coupon,
    DeliveryRoute,
    Order,
    OrderItem,
    Product,
    User,
)

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"


# ============================================================================
# SETTINGS & DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a private in-memory SQLite database."""
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        ENVIRONMENT="test",
        DEBUG=False,
        LOG_FORMAT="plain",
        SENTRY_DSN=None,
        STATS_TIMEZONE="UTC",
    )


@pytest_asyncio.fixture
async def database(settings: Settings) -> AsyncGenerator[Database, None]:
    """Connected database handle with the full schema created."""
    db = Database(settings)
    db.connect()
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as session:
        yield session


# ============================================================================
# DATA FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def seed(db_session: AsyncSession) -> SimpleNamespace:
    """
    Users, catalog, coupons and delivery routes.

    Only ids and plain values are returned so tests never touch ORM state
    that a rollback may have expired.
    """
    shirts = Category(name="Shirts")
    admin = User(name="Ada Admin", email="admin@example.com", role="admin")
    customer = User(name="Carla Customer", email="carla@example.com", role="customer")
    other = User(name="Otto Other", email="otto@example.com", role="customer")
    shirt = Product(name="Linen Shirt", price=Decimal("20.00"), image="https://cdn.example.com/shirt.png", category=shirts)
    mug = Product(name="Clay Mug", price=Decimal("15.00"), image=None)
    open_route = DeliveryRoute(city="Lyon", delivery_date=date(2026, 11, 3), status="pending")
    later_route = DeliveryRoute(city="Nantes", delivery_date=date(2026, 11, 10), status="processing")
    shipped_route = DeliveryRoute(city="Lille", delivery_date=date(2026, 10, 1), status="shipped")
    save10 = Coupon(code="SAVE10", discount_percentage=Decimal("10"), is_active=True)
    expired = Coupon(code="OLD50", discount_percentage=Decimal("50"), is_active=False)
    blog = Blog(title="Autumn collection", status="published")

    db_session.add_all(
        [shirts, admin, customer, other, shirt, mug, open_route, later_route, shipped_route, save10, expired, blog]
    )
    await db_session.commit()

    return SimpleNamespace(
        admin_id=admin.id,
        customer_id=customer.id,
        other_id=other.id,
        category_id=shirts.id,
        shirt_id=shirt.id,
        mug_id=mug.id,
        open_route_id=open_route.id,
        open_route_date=open_route.delivery_date,
        later_route_id=later_route.id,
        later_route_date=later_route.delivery_date,
        shipped_route_id=shipped_route.id,
    )


@pytest.fixture
def order_factory(db_session: AsyncSession):
    """
    Insert an order directly through the models.

    lines is a list of (product_id, unit_price, quantity); returns the order id.
    """

    async def _create(
        user_id: UUID,
        lines: list[tuple[UUID, Decimal, int]],
        status: str = "pending",
        route_id: UUID | None = None,
        delivery_date: date | None = None,
        reviewed: bool = False,
        created_at: datetime | None = None,
    ) -> UUID:
        subtotal = sum((price * quantity for _, price, quantity in lines), Decimal("0"))
        order = Order(
            user_id=user_id,
            subtotal=subtotal,
            discount=Decimal("0"),
            discount_percentage=Decimal("0"),
            total_price=subtotal,
            status=status,
            payment_method="cod",
            delivery_route_id=route_id,
            delivery_date=delivery_date,
            shipping_address={"city": "Lyon"},
            items=[
                OrderItem(
                    position=position,
                    product_id=product_id,
                    quantity=quantity,
                    customizations=[],
                    price_at_purchase=price,
                    is_reviewed=reviewed,
                )
                for position, (product_id, price, quantity) in enumerate(lines)
            ],
        )
        if created_at is not None:
            order.created_at = created_at
            order.updated_at = created_at
        db_session.add(order)
        await db_session.commit()
        return order.id

    return _create


# ============================================================================
# HTTP FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def app(settings: Settings, database: Database):
    """Application wired to the test database (lifespan is not run by ASGITransport)."""
    return create_app(settings, database=database)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def auth_headers():
    """Headers the authentication layer would set for a user."""

    def _headers(user_id: UUID) -> dict[str, str]:
        return {"X-User-Id": str(user_id)}

    return _headers


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 19, 15, 30, tzinfo=UTC)
