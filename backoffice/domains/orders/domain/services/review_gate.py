"""
Review gate: decides whether a customer may review an order item.
"""

from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse
from uuid import UUID

from backoffice.core.domain import (
    AuthorizationException,
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidOperationException,
    ValidationException,
)

if TYPE_CHECKING:
    from ..entities.order import Order, OrderItem
    from ..value_objects.order_details import CurrentUser


def is_image_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    parsed = urlparse(value.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


REVIEW_IMAGE_LIMIT = 5


class ReviewGate:
    """
    Checks run in a fixed order and the first failure wins:

    1. the order exists and belongs to the acting user
    2. an item of the order references the product
    3. the item can be reviewed (order delivered, item not yet reviewed)
    4. the comment is not blank
    5. at most max_images images, each an http(s) URL
    """

    def __init__(self, max_images: int = REVIEW_IMAGE_LIMIT):
        if not 0 <= max_images <= REVIEW_IMAGE_LIMIT:
            raise ValueError(f"max_images must be between 0 and {REVIEW_IMAGE_LIMIT}")
        self.max_images = max_images

    def check(
        self,
        order: "Order | None",
        product_id: UUID,
        acting_user: "CurrentUser",
        comment: str | None,
        images: Any,
    ) -> "OrderItem":
        """Return the order item being reviewed, or raise the first failing check."""
        if order is None or not order.belongs_to(acting_user.id):
            raise AuthorizationException("submit_review", "order", str(acting_user.id))

        item = order.find_item(product_id)
        if item is None:
            raise EntityNotFoundException(
                "OrderItem", product_id, f"Order {order.id} has no item for product {product_id}"
            )

        if not order.can_review(item):
            if item.is_reviewed:
                raise DuplicateEntityException("Review", "order_product", f"{order.id}:{product_id}")
            raise InvalidOperationException(
                "submit_review",
                order.status.value,
                "Only items of delivered orders can be reviewed",
            )

        if not isinstance(comment, str) or not comment.strip():
            raise ValidationException("Comment cannot be empty", field="comment")

        if images is None:
            images = []
        if not isinstance(images, list):
            raise ValidationException("Images must be a list of URLs", field="images")
        if len(images) > self.max_images:
            raise ValidationException(f"At most {self.max_images} images are allowed", field="images")
        for image in images:
            if not is_image_url(image):
                raise ValidationException(f"Invalid image URL: {image!r}", field="images")

        return item
