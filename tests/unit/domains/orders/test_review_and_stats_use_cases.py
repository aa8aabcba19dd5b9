"""
Unit tests for SubmitReviewUseCase and GetDashboardStatsUseCase.
"""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from backoffice.core.domain import (
    AggregationException,
    AuthorizationException,
    DuplicateEntityException,
    InvalidOperationException,
    ValidationException,
)
from backoffice.domains.orders.application.use_cases import (
    GetDashboardStatsUseCase,
    SubmitReviewRequest,
    SubmitReviewUseCase,
)
from backoffice.domains.orders.domain.entities import Order, OrderItem
from backoffice.domains.orders.domain.services import ReviewGate, StatsAggregator, StatsSnapshot
from backoffice.domains.orders.domain.value_objects import CurrentUser, OrderStatus, UserRole


@pytest.fixture
def customer():
    return CurrentUser(id=uuid4())


@pytest.fixture
def product_id():
    return uuid4()


@pytest.fixture
def order(customer, product_id):
    return Order(
        id=uuid4(),
        owner_id=customer.id,
        status=OrderStatus.DELIVERED,
        items=[OrderItem(product_id=product_id, quantity=1, price_at_purchase=Decimal("20"))],
    )


@pytest.fixture
def mock_order_repository(order):
    repo = AsyncMock()
    repo.get_by_id.return_value = order
    return repo


@pytest.fixture
def mock_review_repository():
    repo = AsyncMock()

    async def _create(review):
        review.id = uuid4()
        return review

    repo.create_for_order_item.side_effect = _create
    return repo


@pytest.fixture
def use_case(mock_order_repository, mock_review_repository):
    return SubmitReviewUseCase(mock_order_repository, mock_review_repository, ReviewGate())


class TestSubmitReviewUseCase:
    @pytest.mark.asyncio
    async def test_stores_review(self, use_case, mock_review_repository, order, product_id, customer):
        result = await use_case.execute(
            SubmitReviewRequest(
                order_id=order.id,
                product_id=product_id,
                acting_user=customer,
                rating=5,
                comment="  Lovely fabric  ",
                images=["https://img.example.com/1.jpg"],
            )
        )

        review = result.review
        assert review.id is not None
        assert review.user_id == customer.id
        assert review.comment == "Lovely fabric"
        assert review.images == ["https://img.example.com/1.jpg"]
        mock_review_repository.create_for_order_item.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0, 6, "5", None])
    async def test_rating_out_of_range(self, use_case, mock_review_repository, order, product_id, customer, rating):
        with pytest.raises(ValidationException) as exc_info:
            await use_case.execute(SubmitReviewRequest(order.id, product_id, customer, rating, "ok"))

        assert exc_info.value.field == "rating"
        mock_review_repository.create_for_order_item.assert_not_called()

    @pytest.mark.asyncio
    async def test_foreign_order(self, use_case, order, product_id):
        with pytest.raises(AuthorizationException):
            await use_case.execute(SubmitReviewRequest(order.id, product_id, CurrentUser(id=uuid4()), 4, "ok"))

    @pytest.mark.asyncio
    async def test_undelivered_order(self, use_case, order, product_id, customer):
        order.status = OrderStatus.SHIPPED

        with pytest.raises(InvalidOperationException):
            await use_case.execute(SubmitReviewRequest(order.id, product_id, customer, 4, "ok"))

    @pytest.mark.asyncio
    async def test_store_conflict_propagates(self, use_case, mock_review_repository, order, product_id, customer):
        mock_review_repository.create_for_order_item.side_effect = DuplicateEntityException(
            "Review", "order_product", f"{order.id}:{product_id}"
        )

        with pytest.raises(DuplicateEntityException):
            await use_case.execute(SubmitReviewRequest(order.id, product_id, customer, 4, "ok"))


class TestGetDashboardStatsUseCase:
    @pytest.fixture
    def admin(self):
        return CurrentUser(id=uuid4(), role=UserRole.ADMIN)

    @pytest.mark.asyncio
    async def test_returns_stats_with_timestamp(self, admin):
        now = datetime(2026, 10, 19, 12, tzinfo=UTC)
        repo = AsyncMock()
        repo.load_snapshot.return_value = StatsSnapshot()
        use_case = GetDashboardStatsUseCase(repo, StatsAggregator(UTC), clock=lambda: now)

        result = await use_case.execute(admin)

        assert result.generated_at == now
        assert result.stats.overview["totalOrders"] == 0
        repo.load_snapshot.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_requires_admin(self):
        repo = AsyncMock()

        with pytest.raises(AuthorizationException):
            await GetDashboardStatsUseCase(repo, StatsAggregator(UTC)).execute(CurrentUser(id=uuid4()))

        repo.load_snapshot.assert_not_called()

    @pytest.mark.asyncio
    async def test_read_failure_is_aggregation_error(self, admin):
        repo = AsyncMock()
        repo.load_snapshot.side_effect = RuntimeError("connection reset")

        with pytest.raises(AggregationException) as exc_info:
            await GetDashboardStatsUseCase(repo, StatsAggregator(UTC)).execute(admin)

        assert exc_info.value.status_code == 500
        assert "connection reset" in exc_info.value.details["original_error"]

    @pytest.mark.asyncio
    async def test_aggregation_failure_is_aggregation_error(self, admin):
        repo = AsyncMock()
        repo.load_snapshot.return_value = StatsSnapshot()
        aggregator = Mock(spec=StatsAggregator)
        aggregator.aggregate.side_effect = ValueError("bad row")

        with pytest.raises(AggregationException):
            await GetDashboardStatsUseCase(repo, aggregator).execute(admin)
