"""
Data models for the Hiring Ledger.
"""

from hiring_ledger.models.applicant import Applicant, WorkPreference
from hiring_ledger.models.job import Job, UNASSIGNED
from hiring_ledger.models.notification import Notification, NOTIFICATION_NAMES

__all__ = [
    "Applicant",
    "WorkPreference",
    "Job",
    "UNASSIGNED",
    "Notification",
    "NOTIFICATION_NAMES",
]
