"""
Hiring Ledger - an in-memory registry of job openings and applicant profiles.
"""

from hiring_ledger.models import Applicant, Job, Notification, WorkPreference
from hiring_ledger.registry import (
    Registry,
    RegistryError,
    Unauthorized,
    NotFound,
    AlreadyFilled,
    DuplicateApplication,
    InvalidRating,
    NotificationError,
)

__version__ = "0.1.0"

__all__ = [
    "Applicant",
    "Job",
    "Notification",
    "WorkPreference",
    "Registry",
    "RegistryError",
    "Unauthorized",
    "NotFound",
    "AlreadyFilled",
    "DuplicateApplication",
    "InvalidRating",
    "NotificationError",
]
