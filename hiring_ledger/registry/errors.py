"""
Errors raised by registry operations.
"""

from typing import Optional


class RegistryError(Exception):
    """Base class for rejected registry operations."""


class Unauthorized(RegistryError):
    """Caller lacks the privilege the operation requires."""

    def __init__(self, caller: str, operation: str):
        self.caller = caller
        self.operation = operation
        super().__init__(f"{caller!r} is not allowed to call {operation}")


class NotFound(RegistryError):
    """Referenced job or applicant id is outside the assigned range."""

    def __init__(self, kind: str, record_id: int):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} not found")


class AlreadyFilled(RegistryError):
    """Job has already been filled."""

    def __init__(self, job_id: int, applicant_id: Optional[int] = None):
        self.job_id = job_id
        self.applicant_id = applicant_id
        super().__init__(f"Job {job_id} is already filled")


class DuplicateApplication(RegistryError):
    """Caller has already applied to the job."""

    def __init__(self, caller: str, job_id: int):
        self.caller = caller
        self.job_id = job_id
        super().__init__(f"{caller!r} has already applied to job {job_id}")


class InvalidRating(RegistryError):
    """Rating is outside the accepted range."""

    def __init__(self, rating: int, max_rating: int):
        self.rating = rating
        self.max_rating = max_rating
        super().__init__(f"Rating {rating} is outside 0..{max_rating}")


class NotificationError(Exception):
    """
    One or more subscribers raised while handling a notification.

    The mutation behind the notification has been committed; this is not
    a RegistryError. The committed record's id is in notification.fields.
    """

    def __init__(self, notification, failures: list):
        self.notification = notification
        self.failures = failures
        reasons = "; ".join(f"{type(f).__name__}: {f}" for f in failures)
        super().__init__(
            f"{len(failures)} subscriber(s) failed on {notification.name} "
            f"#{notification.sequence} (committed): {reasons}"
        )
