"""
Marketing content: blog posts and coupons
"""

import uuid

from sqlalchemy import Boolean, CheckConstraint, Column, Index, Numeric, String, Uuid

from .base import Base, TimestampMixin


class Blog(Base, TimestampMixin):
    __tablename__ = "blogs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(300), nullable=False)
    status = Column(String(20), nullable=False, default="draft")  # draft, published

    __table_args__ = (Index("idx_blogs_created_at", "created_at"),)

    def __repr__(self):
        return f"<Blog(title='{self.title}', status='{self.status}')>"


class Coupon(Base, TimestampMixin):
    __tablename__ = "coupons"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    code = Column(String(50), nullable=False, unique=True)
    discount_percentage = Column(Numeric(5, 2), nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint(
            "discount_percentage >= 0 AND discount_percentage <= 100",
            name="ck_coupons_discount_percentage_range",
        ),
    )

    def __repr__(self):
        return f"<Coupon(code='{self.code}', active={self.is_active})>"
