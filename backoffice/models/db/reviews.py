"""
Product reviews tied to a delivered order
"""

import uuid

from sqlalchemy import JSON, CheckConstraint, Column, ForeignKey, Index, Integer, Text, UniqueConstraint, Uuid

from .base import Base, TimestampMixin


class Review(Base, TimestampMixin):
    """One review per (order, product)."""

    __tablename__ = "reviews"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    product_id = Column(Uuid, ForeignKey("products.id"), nullable=False)
    order_id = Column(Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False)
    images = Column(JSON, nullable=False, default=list)

    __table_args__ = (
        UniqueConstraint("order_id", "product_id", name="uq_reviews_order_product"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
        Index("idx_reviews_product", product_id),
    )

    def __repr__(self):
        return f"<Review(order_id='{self.order_id}', product_id='{self.product_id}', rating={self.rating})>"
