"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

from abc import ABC
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Self

CENT = Decimal("0.01")


def to_amount(value: Decimal | float | int | str) -> Decimal:
    """Convert to a Decimal rounded to cents (half up)."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


@dataclass(frozen=True)
class Percentage(ValueObject):
    """
    Percentage value object.

    Represents a percentage value (0-100 or custom range).
    """

    value: Decimal
    min_value: Decimal = Decimal("0")
    max_value: Decimal = Decimal("100")

    def _validate(self) -> None:
        if not isinstance(self.value, Decimal):
            object.__setattr__(self, "value", Decimal(str(self.value)))
        if self.value < self.min_value or self.value > self.max_value:
            raise ValueError(f"Percentage must be between {self.min_value} and {self.max_value}")

    def as_decimal(self) -> Decimal:
        """Get percentage as decimal (0.0 - 1.0)."""
        return self.value / Decimal("100")

    def apply_to(self, amount: Decimal) -> Decimal:
        """Apply percentage to an amount."""
        return amount * self.as_decimal()

    def __str__(self) -> str:
        return f"{self.value}%"


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}")
