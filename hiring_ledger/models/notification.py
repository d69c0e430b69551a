"""
Notification records emitted by registry mutations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


APPLICANT_REGISTERED = "ApplicantRegistered"
JOB_POSTED = "JobPosted"
APPLICATION_SUBMITTED = "ApplicationSubmitted"
APPLICANT_HIRED = "ApplicantHired"
RATING_RECORDED = "RatingRecorded"
WORK_PREFERENCE_CHANGED = "WorkPreferenceChanged"

NOTIFICATION_NAMES = (
    APPLICANT_REGISTERED,
    JOB_POSTED,
    APPLICATION_SUBMITTED,
    APPLICANT_HIRED,
    RATING_RECORDED,
    WORK_PREFERENCE_CHANGED,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Notification:
    """One entry in the registry's notification log."""

    sequence: int
    name: str
    fields: dict[str, Any] = field(default_factory=dict)
    emitted_at: datetime = field(default_factory=_utc_now)

    def to_dict(self) -> dict:
        return {
            'sequence': self.sequence,
            'name': self.name,
            'fields': dict(self.fields),
            'emitted_at': self.emitted_at.isoformat(timespec="seconds"),
        }

    def __str__(self) -> str:
        details = ", ".join(f"{k}={v}" for k, v in self.fields.items())
        return f"#{self.sequence} {self.name}({details})"
