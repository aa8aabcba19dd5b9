from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from ..entities.order import Order


def partition_by_review(orders: Iterable["Order"]) -> tuple[list["Order"], list["Order"]]:
    """
    Split orders into (without review, with review).

    An order lands in the second list only when every one of its items has
    been reviewed. Input order is preserved in both lists.
    """
    without_review: list["Order"] = []
    with_review: list["Order"] = []
    for order in orders:
        (with_review if order.is_fully_reviewed else without_review).append(order)
    return without_review, with_review
