"""
Value objects embedded in an order: item customizations, shipping address and the acting user.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any
from uuid import UUID

from backoffice.core.domain import ValidationException, ValueObject, to_amount

from .order_status import UserRole


@dataclass(frozen=True)
class Customization(ValueObject):
    """One selected option on a line item, e.g. type="size", option="XL"."""

    type: str
    option: str
    extra_price: Decimal = Decimal("0")

    def _validate(self) -> None:
        if not self.type or not self.option:
            raise ValidationException("Customization requires a type and an option", field="selectedCustomizations")
        try:
            extra_price = to_amount(self.extra_price)
        except ArithmeticError as e:
            raise ValidationException(
                f"Invalid customization extra price: {self.extra_price}", field="selectedCustomizations"
            ) from e
        if extra_price < 0:
            raise ValidationException("Customization extra price cannot be negative", field="selectedCustomizations")
        object.__setattr__(self, "extra_price", extra_price)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "option": self.option, "extraPrice": float(self.extra_price)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Customization":
        return cls(
            type=data.get("type", ""),
            option=data.get("option", ""),
            extra_price=data.get("extraPrice", data.get("extra_price", 0)) or 0,
        )


@dataclass(frozen=True)
class ShippingAddress(ValueObject):
    """Snapshot of where the order ships, captured when it is placed."""

    first_name: str | None = None
    last_name: str | None = None
    street_address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    phone: str | None = None
    email: str | None = None
    notes: str | None = None

    _KEYS = (
        ("first_name", "firstName"),
        ("last_name", "lastName"),
        ("street_address", "streetAddress"),
        ("city", "city"),
        ("postal_code", "postalCode"),
        ("phone", "phone"),
        ("email", "email"),
        ("notes", "notes"),
    )

    def to_dict(self) -> dict[str, Any]:
        return {key: getattr(self, attr) for attr, key in self._KEYS}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ShippingAddress":
        data = data or {}
        return cls(**{attr: data.get(key, data.get(attr)) for attr, key in cls._KEYS})


@dataclass(frozen=True)
class CurrentUser(ValueObject):
    """The caller as resolved by the authentication layer."""

    id: UUID
    role: UserRole = UserRole.CUSTOMER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
