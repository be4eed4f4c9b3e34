"""
Core domain building blocks shared by every bounded context.
"""

from .exceptions import (
    ConflictException,
    DomainException,
    EntityNotFoundException,
    ValidationException,
)
from .value_objects import StatusEnum

__all__ = [
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "ConflictException",
    "StatusEnum",
]
