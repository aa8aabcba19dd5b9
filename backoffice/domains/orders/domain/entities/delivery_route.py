"""
Delivery Route Entity
"""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from backoffice.core.domain import Entity, ValidationException

from ..value_objects.order_status import DeliveryRouteStatus


@dataclass(eq=False)
class DeliveryRoute(Entity[UUID]):
    """A dated delivery run to one city that orders can be attached to."""

    city: str = ""
    delivery_date: date | None = None
    status: DeliveryRouteStatus = DeliveryRouteStatus.PENDING

    def __post_init__(self):
        if not self.city or not self.city.strip():
            raise ValidationException("Delivery route requires a city", field="city")
        if not isinstance(self.status, DeliveryRouteStatus):
            try:
                self.status = DeliveryRouteStatus.from_string(self.status)
            except ValueError as e:
                raise ValidationException(str(e), field="status") from e

    def accepts_assignments(self) -> bool:
        return self.status.accepts_assignments()
