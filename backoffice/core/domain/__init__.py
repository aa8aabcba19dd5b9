"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from backoffice.core.domain.entities import Entity, ensure_aware, generate_uuid
from backoffice.core.domain.exceptions import (
    AggregationException,
    AuthorizationException,
    ConcurrencyException,
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidOperationException,
    InvalidTransitionException,
    ValidationException,
)
from backoffice.core.domain.value_objects import (
    Percentage,
    StatusEnum,
    ValueObject,
    to_amount,
)

__all__ = [
    # Entities
    "Entity",
    "ensure_aware",
    "generate_uuid",
    # Value Objects
    "ValueObject",
    "Percentage",
    "StatusEnum",
    "to_amount",
    # Exceptions
    "DomainException",
    "ValidationException",
    "AuthorizationException",
    "EntityNotFoundException",
    "InvalidOperationException",
    "InvalidTransitionException",
    "DuplicateEntityException",
    "ConcurrencyException",
    "AggregationException",
]
