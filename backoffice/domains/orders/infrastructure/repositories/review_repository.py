"""
Review Repository Implementation
"""

import logging
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.domain import DuplicateEntityException, InvalidOperationException, ensure_aware
from backoffice.domains.orders.application.ports import IReviewRepository
from backoffice.domains.orders.domain.entities import Review
from backoffice.domains.orders.domain.value_objects import OrderStatus
from backoffice.models.db import Order as OrderModel
from backoffice.models.db import OrderItem as OrderItemModel
from backoffice.models.db import Review as ReviewModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    message = str(error).lower()
    return "unique constraint" in message or "duplicate key" in message


class SQLAlchemyReviewRepository(IReviewRepository):
    """
    Reviews are unique per (order, product); the database constraint is the
    arbiter when two submissions race. The item flag is only written while
    the order is still delivered.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_for_order_item(self, review: Review) -> Review:
        model = ReviewModel(
            user_id=review.user_id,
            product_id=review.product_id,
            order_id=review.order_id,
            rating=review.rating,
            comment=review.comment,
            images=list(review.images),
        )
        try:
            self.session.add(model)
            await self.session.flush()
            delivered_orders = select(OrderModel.id).where(OrderModel.status == OrderStatus.DELIVERED.value)
            result = await self.session.execute(
                update(OrderItemModel)
                .where(
                    OrderItemModel.order_id == review.order_id,
                    OrderItemModel.product_id == review.product_id,
                    OrderItemModel.order_id.in_(delivered_orders),
                )
                .values(is_reviewed=True)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                await self.session.rollback()
                logger.warning(f"Order {review.order_id} left delivered before review could be stored")
                raise InvalidOperationException(
                    "submit_review", "not_delivered", "Only delivered orders can be reviewed"
                )
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if _is_unique_violation(e):
                raise DuplicateEntityException(
                    "Review", "order_product", f"{review.order_id}:{review.product_id}"
                ) from e
            logger.error(f"Failed to create review for order {review.order_id}: {e}")
            raise
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error creating review for order {review.order_id}: {e}")
            raise

        return self._to_entity(model)

    async def get_by_order_and_product(self, order_id: UUID, product_id: UUID) -> Review | None:
        result = await self.session.execute(
            select(ReviewModel).where(ReviewModel.order_id == order_id, ReviewModel.product_id == product_id)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: ReviewModel) -> Review:
        return Review(
            id=model.id,
            user_id=model.user_id,
            product_id=model.product_id,
            order_id=model.order_id,
            rating=model.rating,
            comment=model.comment,
            images=list(model.images or []),
            created_at=ensure_aware(model.created_at),
            updated_at=ensure_aware(model.updated_at),
        )
