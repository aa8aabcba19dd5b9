"""
Submit Review Use Case
"""

import logging
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from backoffice.core.domain import DuplicateEntityException
from backoffice.domains.orders.application.ports import IOrderRepository, IReviewRepository
from backoffice.domains.orders.domain.entities import Review
from backoffice.domains.orders.domain.services import ReviewGate
from backoffice.domains.orders.domain.value_objects import CurrentUser

logger = logging.getLogger(__name__)


@dataclass
class SubmitReviewRequest:
    order_id: UUID
    product_id: UUID
    acting_user: CurrentUser
    rating: Any
    comment: str | None = None
    images: Any = field(default_factory=list)


@dataclass
class SubmitReviewResponse:
    review: Review
    success: bool = True


class SubmitReviewUseCase:
    """
    Use Case: Submit Review

    Runs the review gate, then stores the review and flags the order item
    as reviewed in one transaction. The store's (order, product) uniqueness
    makes the losing side of a concurrent double submit fail with a conflict.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        review_repository: IReviewRepository,
        gate: ReviewGate,
    ):
        self.order_repository = order_repository
        self.review_repository = review_repository
        self.gate = gate

    async def execute(self, request: SubmitReviewRequest) -> SubmitReviewResponse:
        order = await self.order_repository.get_by_id(request.order_id)
        self.gate.check(order, request.product_id, request.acting_user, request.comment, request.images)

        review = Review(
            user_id=request.acting_user.id,
            product_id=request.product_id,
            order_id=request.order_id,
            rating=request.rating,
            comment=request.comment or "",
            images=list(request.images or []),
        )

        try:
            created = await self.review_repository.create_for_order_item(review)
        except DuplicateEntityException:
            logger.warning(f"Duplicate review for order {request.order_id} product {request.product_id}")
            raise

        logger.info(f"Review {created.id} stored for order {request.order_id} product {request.product_id}")
        return SubmitReviewResponse(review=created)


__all__ = ["SubmitReviewRequest", "SubmitReviewResponse", "SubmitReviewUseCase"]
