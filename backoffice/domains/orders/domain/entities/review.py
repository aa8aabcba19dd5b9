"""
Review Entity
"""

from dataclasses import dataclass, field
from uuid import UUID

from backoffice.core.domain import Entity, ValidationException


@dataclass(eq=False)
class Review(Entity[UUID]):
    """A customer's rating of one product from one delivered order."""

    user_id: UUID | None = None
    product_id: UUID | None = None
    order_id: UUID | None = None
    rating: int = 0
    comment: str = ""
    images: list[str] = field(default_factory=list)

    def __post_init__(self):
        if self.user_id is None or self.product_id is None or self.order_id is None:
            raise ValidationException("Review requires a user, a product and an order")
        if isinstance(self.rating, bool) or not isinstance(self.rating, int) or not 1 <= self.rating <= 5:
            raise ValidationException("Rating must be an integer between 1 and 5", field="rating")
        self.comment = (self.comment or "").strip()
        if not self.comment:
            raise ValidationException("Comment cannot be empty", field="comment")
        self.images = list(self.images or [])
