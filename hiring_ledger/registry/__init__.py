"""
Registry module for Hiring Ledger.
"""

from hiring_ledger.registry.errors import (
    RegistryError,
    Unauthorized,
    NotFound,
    AlreadyFilled,
    DuplicateApplication,
    InvalidRating,
    NotificationError,
)
from hiring_ledger.registry.registry import Registry

__all__ = [
    "Registry",
    "RegistryError",
    "Unauthorized",
    "NotFound",
    "AlreadyFilled",
    "DuplicateApplication",
    "InvalidRating",
    "NotificationError",
]
