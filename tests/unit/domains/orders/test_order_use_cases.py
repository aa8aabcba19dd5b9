"""
Unit Tests for Orders Use Cases

Repositories are replaced by AsyncMock instances so each use case is
exercised in isolation.
"""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from backoffice.core.domain import (
    AuthorizationException,
    ConcurrencyException,
    EntityNotFoundException,
    InvalidOperationException,
    InvalidTransitionException,
    ValidationException,
)
from backoffice.domains.orders.application.use_cases import (
    AssignDeliveryRouteRequest,
    AssignDeliveryRouteUseCase,
    CreateDeliveryRouteRequest,
    CreateDeliveryRouteUseCase,
    CreateOrderRequest,
    CreateOrderUseCase,
    DeleteDeliveryRouteUseCase,
    GetCustomerOrdersRequest,
    GetCustomerOrdersUseCase,
    ListAllOrdersUseCase,
    ListDeliveryRoutesUseCase,
    OrderItemInput,
    UnassignDeliveryRouteUseCase,
    UpdateOrderStatusRequest,
    UpdateOrderStatusUseCase,
)
from backoffice.domains.orders.domain.entities import Coupon, DeliveryRoute, Order, OrderItem, Product
from backoffice.domains.orders.domain.services import DeliveryRouteAssigner
from backoffice.domains.orders.domain.value_objects import (
    CurrentUser,
    DeliveryRouteStatus,
    OrderStatus,
    PaymentMethod,
    UserRole,
)


@pytest.fixture
def admin():
    return CurrentUser(id=uuid4(), role=UserRole.ADMIN)


@pytest.fixture
def customer():
    return CurrentUser(id=uuid4(), role=UserRole.CUSTOMER)


@pytest.fixture
def mock_order_repository():
    repo = AsyncMock()
    repo.create.side_effect = lambda order: order
    return repo


def make_order(owner_id, status=OrderStatus.PENDING, reviewed=False, **kwargs) -> Order:
    kwargs.setdefault("id", uuid4())
    return Order(
        owner_id=owner_id,
        status=status,
        items=[OrderItem(product_id=uuid4(), quantity=1, price_at_purchase=Decimal("10"), is_reviewed=reviewed)],
        **kwargs,
    )


class TestCreateOrderUseCase:
    @pytest.fixture
    def products(self):
        shirt = Product(id=uuid4(), name="Linen Shirt", price=Decimal("20"))
        mug = Product(id=uuid4(), name="Clay Mug", price=Decimal("15"))
        return shirt, mug

    @pytest.fixture
    def use_case(self, mock_order_repository, products):
        product_repo = AsyncMock()
        product_repo.get_many.return_value = {p.id: p for p in products}
        coupon_repo = AsyncMock()
        coupon_repo.get_by_code.side_effect = lambda code: {
            "SAVE10": Coupon(id=uuid4(), code="SAVE10", discount_percentage=Decimal("10")),
            "OLD50": Coupon(id=uuid4(), code="OLD50", discount_percentage=Decimal("50"), is_active=False),
        }.get(code)
        return CreateOrderUseCase(mock_order_repository, product_repo, coupon_repo)

    @pytest.mark.asyncio
    async def test_prices_order_from_products_and_coupon(self, use_case, products, customer):
        shirt, mug = products
        request = CreateOrderRequest(
            owner=customer,
            items=[OrderItemInput(shirt.id, 2), OrderItemInput(mug.id, 1)],
            coupon_code="SAVE10",
            shipping_address={"city": "Lyon"},
        )

        result = await use_case.execute(request)

        order = result.order
        assert order.owner_id == customer.id
        assert order.status is OrderStatus.PENDING
        assert order.payment_method is PaymentMethod.COD
        assert (order.subtotal, order.discount, order.total_price) == (
            Decimal("55.00"),
            Decimal("5.50"),
            Decimal("49.50"),
        )
        assert order.shipping_address.city == "Lyon"

    @pytest.mark.asyncio
    async def test_customizations_raise_unit_price(self, use_case, products, customer):
        shirt, _ = products
        request = CreateOrderRequest(
            owner=customer,
            items=[OrderItemInput(shirt.id, 1, [{"type": "size", "option": "XL", "extraPrice": 2.5}])],
        )

        result = await use_case.execute(request)

        assert result.order.items[0].price_at_purchase == Decimal("22.50")
        assert result.order.total_price == Decimal("22.50")

    @pytest.mark.asyncio
    async def test_unknown_product(self, use_case, mock_order_repository, customer):
        with pytest.raises(ValidationException) as exc_info:
            await use_case.execute(CreateOrderRequest(owner=customer, items=[OrderItemInput(uuid4(), 1)]))

        assert exc_info.value.field == "items"
        mock_order_repository.create.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["NOPE", "OLD50"])
    async def test_unusable_coupon(self, use_case, products, customer, code):
        request = CreateOrderRequest(owner=customer, items=[OrderItemInput(products[0].id, 1)], coupon_code=code)

        with pytest.raises(ValidationException):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_zero_quantity(self, use_case, products, customer):
        with pytest.raises(ValidationException):
            await use_case.execute(CreateOrderRequest(owner=customer, items=[OrderItemInput(products[0].id, 0)]))

    @pytest.mark.asyncio
    async def test_unknown_payment_method(self, use_case, products, customer):
        request = CreateOrderRequest(
            owner=customer, items=[OrderItemInput(products[0].id, 1)], payment_method="barter"
        )

        with pytest.raises(ValidationException):
            await use_case.execute(request)


class TestGetCustomerOrdersUseCase:
    @pytest.mark.asyncio
    async def test_splits_by_review_state(self, mock_order_repository, customer):
        fresh = make_order(customer.id)
        done = make_order(customer.id, status=OrderStatus.DELIVERED, reviewed=True)
        mock_order_repository.get_by_owner.return_value = [fresh, done]

        result = await GetCustomerOrdersUseCase(mock_order_repository).execute(
            GetCustomerOrdersRequest(acting_user=customer)
        )

        mock_order_repository.get_by_owner.assert_awaited_once_with(customer.id)
        assert result.orders_without_review == [fresh]
        assert result.orders_with_review == [done]

    @pytest.mark.asyncio
    async def test_customer_cannot_read_others(self, mock_order_repository, customer):
        with pytest.raises(AuthorizationException):
            await GetCustomerOrdersUseCase(mock_order_repository).execute(
                GetCustomerOrdersRequest(acting_user=customer, owner_id=uuid4())
            )

    @pytest.mark.asyncio
    async def test_admin_reads_anyone(self, mock_order_repository, admin):
        owner_id = uuid4()
        mock_order_repository.get_by_owner.return_value = []

        await GetCustomerOrdersUseCase(mock_order_repository).execute(
            GetCustomerOrdersRequest(acting_user=admin, owner_id=owner_id)
        )

        mock_order_repository.get_by_owner.assert_awaited_once_with(owner_id)

    @pytest.mark.asyncio
    async def test_list_all_requires_admin(self, mock_order_repository, customer):
        with pytest.raises(AuthorizationException):
            await ListAllOrdersUseCase(mock_order_repository).execute(customer)


class TestUpdateOrderStatusUseCase:
    @pytest.mark.asyncio
    async def test_updates_status(self, mock_order_repository, admin):
        order = make_order(uuid4())
        updated = make_order(order.owner_id, status=OrderStatus.PROCESSING, id=order.id)
        mock_order_repository.get_by_id.side_effect = [order, updated]
        mock_order_repository.transition_status.return_value = True

        result = await UpdateOrderStatusUseCase(mock_order_repository).execute(
            UpdateOrderStatusRequest(order_id=order.id, new_status="processing", acting_user=admin)
        )

        mock_order_repository.transition_status.assert_awaited_once_with(
            order.id, OrderStatus.PENDING, OrderStatus.PROCESSING
        )
        assert result.previous_status is OrderStatus.PENDING
        assert result.order.status is OrderStatus.PROCESSING

    @pytest.mark.asyncio
    async def test_requires_admin(self, mock_order_repository, customer):
        with pytest.raises(AuthorizationException):
            await UpdateOrderStatusUseCase(mock_order_repository).execute(
                UpdateOrderStatusRequest(order_id=uuid4(), new_status="processing", acting_user=customer)
            )

        mock_order_repository.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_order(self, mock_order_repository, admin):
        mock_order_repository.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundException):
            await UpdateOrderStatusUseCase(mock_order_repository).execute(
                UpdateOrderStatusRequest(order_id=uuid4(), new_status="processing", acting_user=admin)
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("new_status", [None, "", "lost"])
    async def test_unknown_status(self, mock_order_repository, admin, new_status):
        mock_order_repository.get_by_id.return_value = make_order(uuid4())

        with pytest.raises(ValidationException):
            await UpdateOrderStatusUseCase(mock_order_repository).execute(
                UpdateOrderStatusRequest(order_id=uuid4(), new_status=new_status, acting_user=admin)
            )

    @pytest.mark.asyncio
    async def test_illegal_transition_writes_nothing(self, mock_order_repository, admin):
        mock_order_repository.get_by_id.return_value = make_order(uuid4(), status=OrderStatus.DELIVERED)

        with pytest.raises(InvalidTransitionException):
            await UpdateOrderStatusUseCase(mock_order_repository).execute(
                UpdateOrderStatusRequest(order_id=uuid4(), new_status="pending", acting_user=admin)
            )

        mock_order_repository.transition_status.assert_not_called()

    @pytest.mark.asyncio
    async def test_lost_race_raises_conflict(self, mock_order_repository, admin):
        order = make_order(uuid4(), status=OrderStatus.SHIPPED)
        raced = make_order(order.owner_id, status=OrderStatus.CANCELLED, id=order.id)
        mock_order_repository.get_by_id.side_effect = [order, raced]
        mock_order_repository.transition_status.return_value = False

        with pytest.raises(ConcurrencyException) as exc_info:
            await UpdateOrderStatusUseCase(mock_order_repository).execute(
                UpdateOrderStatusRequest(order_id=order.id, new_status="delivered", acting_user=admin)
            )

        assert exc_info.value.actual_state == "cancelled"


class TestDeliveryRouteUseCases:
    @pytest.fixture
    def route(self):
        return DeliveryRoute(id=uuid4(), city="Lyon", delivery_date=date(2026, 11, 3))

    @pytest.fixture
    def mock_route_repository(self, route):
        repo = AsyncMock()
        repo.get_by_id.return_value = route
        return repo

    @pytest.mark.asyncio
    async def test_assign_writes_route_date(self, mock_order_repository, mock_route_repository, route, admin):
        order = make_order(uuid4())
        mock_order_repository.get_by_id.return_value = order
        mock_order_repository.set_delivery_route.return_value = True
        use_case = AssignDeliveryRouteUseCase(mock_order_repository, mock_route_repository, DeliveryRouteAssigner())

        result = await use_case.execute(
            AssignDeliveryRouteRequest(
                order_id=order.id, route_id=route.id, acting_user=admin, requested_date=date(2026, 12, 25)
            )
        )

        mock_order_repository.set_delivery_route.assert_awaited_once_with(order.id, route.id, date(2026, 11, 3))
        assert result.changed is True

    @pytest.mark.asyncio
    async def test_assign_same_route_skips_write(self, mock_order_repository, mock_route_repository, route, admin):
        order = make_order(uuid4(), delivery_route_id=route.id, delivery_date=route.delivery_date)
        mock_order_repository.get_by_id.return_value = order
        use_case = AssignDeliveryRouteUseCase(mock_order_repository, mock_route_repository, DeliveryRouteAssigner())

        result = await use_case.execute(AssignDeliveryRouteRequest(order.id, route.id, admin))

        assert result.changed is False
        mock_order_repository.set_delivery_route.assert_not_called()

    @pytest.mark.asyncio
    async def test_assign_unknown_route(self, mock_order_repository, mock_route_repository, admin):
        mock_order_repository.get_by_id.return_value = make_order(uuid4())
        mock_route_repository.get_by_id.return_value = None
        use_case = AssignDeliveryRouteUseCase(mock_order_repository, mock_route_repository, DeliveryRouteAssigner())

        with pytest.raises(EntityNotFoundException):
            await use_case.execute(AssignDeliveryRouteRequest(uuid4(), uuid4(), admin))

    @pytest.mark.asyncio
    async def test_assign_requires_admin(self, mock_order_repository, mock_route_repository, customer):
        use_case = AssignDeliveryRouteUseCase(mock_order_repository, mock_route_repository, DeliveryRouteAssigner())

        with pytest.raises(AuthorizationException):
            await use_case.execute(AssignDeliveryRouteRequest(uuid4(), uuid4(), customer))

    @pytest.mark.asyncio
    async def test_enforced_eligibility(self, mock_order_repository, mock_route_repository, route, admin):
        route.status = DeliveryRouteStatus.SHIPPED
        mock_order_repository.get_by_id.return_value = make_order(uuid4())
        use_case = AssignDeliveryRouteUseCase(
            mock_order_repository, mock_route_repository, DeliveryRouteAssigner(enforce_eligibility=True)
        )

        with pytest.raises(InvalidOperationException):
            await use_case.execute(AssignDeliveryRouteRequest(uuid4(), route.id, admin))

        mock_order_repository.set_delivery_route.assert_not_called()

    @pytest.mark.asyncio
    async def test_unassign_clears_both_fields(self, mock_order_repository, route, admin):
        order = make_order(
            uuid4(), status=OrderStatus.DELIVERED, delivery_route_id=route.id, delivery_date=route.delivery_date
        )
        mock_order_repository.get_by_id.return_value = order
        mock_order_repository.set_delivery_route.return_value = True

        result = await UnassignDeliveryRouteUseCase(mock_order_repository, DeliveryRouteAssigner()).execute(
            order.id, admin
        )

        mock_order_repository.set_delivery_route.assert_awaited_once_with(order.id, None, None)
        assert result.changed is True

    @pytest.mark.asyncio
    async def test_list_filters_unassignable(self, admin):
        routes = [
            DeliveryRoute(id=uuid4(), city="Lyon", delivery_date=date(2026, 11, 3)),
            DeliveryRoute(id=uuid4(), city="Lille", delivery_date=date(2026, 10, 1), status="delivered"),
        ]
        repo = AsyncMock()
        repo.list_all.return_value = routes
        use_case = ListDeliveryRoutesUseCase(repo, DeliveryRouteAssigner())

        assert await use_case.execute(admin) == routes[:1]
        assert await use_case.execute(admin, assignable_only=False) == routes

    @pytest.mark.asyncio
    async def test_create_route_parses_date(self, admin):
        repo = AsyncMock()
        repo.create.side_effect = lambda route: route

        route = await CreateDeliveryRouteUseCase(repo).execute(
            CreateDeliveryRouteRequest(city="Lyon", delivery_date="2026-11-03", acting_user=admin)
        )

        assert route.delivery_date == date(2026, 11, 3)
        assert route.status is DeliveryRouteStatus.PENDING

    @pytest.mark.asyncio
    async def test_delete_missing_route(self, admin):
        repo = AsyncMock()
        repo.delete.return_value = False

        with pytest.raises(EntityNotFoundException):
            await DeleteDeliveryRouteUseCase(repo).execute(uuid4(), admin)
