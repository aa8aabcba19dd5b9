"""
Unit tests for the order status machine and review eligibility.
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from backoffice.core.domain import InvalidOperationException, InvalidTransitionException
from backoffice.domains.orders.domain.entities import Order, OrderItem
from backoffice.domains.orders.domain.services import OrderStatusMachine
from backoffice.domains.orders.domain.value_objects import OrderStatus

S = OrderStatus

LEGAL = {
    (S.PENDING, S.PROCESSING),
    (S.PENDING, S.CANCELLED),
    (S.PROCESSING, S.SHIPPED),
    (S.PROCESSING, S.CANCELLED),
    (S.SHIPPED, S.DELIVERED),
    (S.SHIPPED, S.CANCELLED),
    (S.DELIVERED, S.RETURNED),
}


@pytest.mark.parametrize("current", list(S))
@pytest.mark.parametrize("target", list(S))
def test_transition_table(current, target):
    assert OrderStatusMachine.can_transition(current, target) is ((current, target) in LEGAL)


@pytest.mark.parametrize(
    "current,target",
    [
        (S.DELIVERED, S.PENDING),
        (S.CANCELLED, S.PROCESSING),
        (S.RETURNED, S.DELIVERED),
        (S.PENDING, S.PENDING),
        (S.PENDING, S.SHIPPED),
    ],
)
def test_ensure_transition_rejects_illegal(current, target):
    with pytest.raises(InvalidTransitionException) as exc_info:
        OrderStatusMachine.ensure_transition(current, target)

    error = exc_info.value
    assert isinstance(error, InvalidOperationException)
    assert error.code == "INVALID_TRANSITION"
    assert error.status_code == 409


def test_terminal_states():
    assert OrderStatusMachine.is_terminal(S.CANCELLED)
    assert OrderStatusMachine.is_terminal(S.RETURNED)
    assert not OrderStatusMachine.is_terminal(S.DELIVERED)


class TestCanReview:
    @pytest.mark.parametrize("status", list(S))
    @pytest.mark.parametrize("is_reviewed", [False, True])
    def test_only_unreviewed_items_of_delivered_orders(self, status, is_reviewed):
        item = OrderItem(product_id=uuid4(), quantity=1, price_at_purchase=Decimal("10"), is_reviewed=is_reviewed)
        order = Order(owner_id=uuid4(), items=[item], status=status)

        expected = status is S.DELIVERED and not is_reviewed
        assert order.can_review(item) is expected
        assert OrderStatusMachine.can_review(order, item) is expected
