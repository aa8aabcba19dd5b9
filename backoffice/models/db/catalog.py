"""
Catalog models: categories and products
"""

import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .orders import OrderItem


class Category(Base, TimestampMixin):
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)

    products: Mapped[List["Product"]] = relationship("Product", back_populates="category")

    def __repr__(self):
        return f"<Category(name='{self.name}')>"


class Product(Base, TimestampMixin):
    """Sellable product; price is the current list price."""

    __tablename__ = "products"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    image = Column(String(500))
    category_id = Column(Uuid, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)

    category: Mapped["Category"] = relationship("Category", back_populates="products")
    order_items: Mapped[List["OrderItem"]] = relationship("OrderItem", back_populates="product")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        Index("idx_products_category", category_id),
        Index("idx_products_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<Product(name='{self.name}', price={self.price})>"
