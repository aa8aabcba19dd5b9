"""
User accounts (read model for ownership and roles)
"""

import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import Column, Index, String, Uuid
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .orders import Order


class User(Base, TimestampMixin):
    """Registered users; role is 'admin' or 'customer'."""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    role = Column(String(20), nullable=False, default="customer")

    orders: Mapped[List["Order"]] = relationship("Order", back_populates="user")

    __table_args__ = (Index("idx_users_role", role),)

    def __repr__(self):
        return f"<User(email='{self.email}', role='{self.role}')>"
