"""
In-memory registry of job openings and applicant profiles.

All mutations are gated by a single admin identity fixed at construction,
except applying for a job, which any non-admin caller may do once per job.
Every successful mutation appends exactly one Notification to the log.
"""

import threading
from dataclasses import replace
from typing import Any, Callable, Optional, Union

import structlog

from hiring_ledger.config.settings import settings
from hiring_ledger.models.applicant import Applicant, WorkPreference
from hiring_ledger.models.job import Job
from hiring_ledger.models import notification as names
from hiring_ledger.models.notification import Notification
from hiring_ledger.registry.errors import (
    RegistryError,
    Unauthorized,
    NotFound,
    AlreadyFilled,
    DuplicateApplication,
    InvalidRating,
    NotificationError,
)

logger = structlog.get_logger()

IdentityResolver = Callable[[str], Optional[int]]
Subscriber = Callable[[Notification], None]


class Registry:
    """
    Holds the Jobs and Applicants tables, the admin guard, and the
    per-caller application flags.

    Ids are positions in the tables plus one; records are never removed,
    so ids are dense and never reused.
    """

    def __init__(
        self,
        admin: Optional[str] = None,
        identity_resolver: Optional[IdentityResolver] = None,
        max_rating: Optional[int] = None,
        hire_rating_bonus: Optional[int] = None,
    ):
        self._admin = admin if admin is not None else settings.admin_identity
        self._identity_resolver = identity_resolver
        self._max_rating = settings.max_rating if max_rating is None else max_rating
        self._hire_rating_bonus = (
            settings.hire_rating_bonus if hire_rating_bonus is None else hire_rating_bonus
        )
        _require_int(self._max_rating, "max_rating")
        _require_int(self._hire_rating_bonus, "hire_rating_bonus")
        if self._max_rating < 0 or self._hire_rating_bonus < 0:
            raise ValueError("max_rating and hire_rating_bonus must be non-negative")

        self._applicants: list[Applicant] = []
        self._jobs: list[Job] = []
        self._applications: set[tuple[str, int]] = set()
        self._events: list[Notification] = []
        self._subscribers: list[Subscriber] = []
        self._lock = threading.RLock()

        self.logger = logger.bind(admin=self._admin)

    @property
    def admin(self) -> str:
        return self._admin

    @property
    def max_rating(self) -> int:
        return self._max_rating

    # Mutations

    def add_applicant(
        self,
        caller: str,
        name: str,
        skills: str,
        phone: str,
        email: str,
        preference: Union[WorkPreference, str, int] = WorkPreference.NOT_SPECIFIED,
    ) -> int:
        """
        Register a new applicant profile.

        Returns:
            The new applicant id.
        """
        with self._lock:
            self._require_admin(caller, "add_applicant")
            preference = WorkPreference.parse(preference)

            applicant = Applicant(
                id=len(self._applicants) + 1,
                name=name,
                skills=skills,
                phone=phone,
                email=email,
                rating=0,
                work_preference=preference,
            )
            self._applicants.append(applicant)

            self.logger.info("Applicant registered", applicant_id=applicant.id, name=name)
            self._emit(
                names.APPLICANT_REGISTERED,
                applicant_id=applicant.id,
                name=name,
                preference=preference.label,
            )
            return applicant.id

    def add_job(self, caller: str, title: str, description: str, salary: int) -> int:
        """
        Post a new job opening.

        Returns:
            The new job id.
        """
        with self._lock:
            self._require_admin(caller, "add_job")
            _require_int(salary, "salary")
            if salary < 0:
                raise ValueError(f"Salary must be non-negative, got {salary}")

            job = Job(
                id=len(self._jobs) + 1,
                title=title,
                description=description,
                salary=salary,
            )
            self._jobs.append(job)

            self.logger.info("Job posted", job_id=job.id, title=title, salary=salary)
            self._emit(names.JOB_POSTED, job_id=job.id, title=title, salary=salary)
            return job.id

    def apply_for_job(
        self,
        caller: str,
        job_id: int,
        applicant_id: Optional[int] = None,
    ) -> None:
        """
        Record that caller applied to a job.

        The applicant id carried by the notification is the explicit
        applicant_id if given, otherwise whatever the identity resolver
        returns for caller, otherwise None.
        """
        with self._lock:
            if caller == self._admin:
                raise self._rejected(Unauthorized(caller, "apply_for_job"))

            job = self._job(job_id)
            if job.filled:
                raise self._rejected(AlreadyFilled(job_id, job.applicant_id))

            key = (caller, job_id)
            if key in self._applications:
                raise self._rejected(DuplicateApplication(caller, job_id))

            if applicant_id is not None:
                self._applicant(applicant_id)
            elif self._identity_resolver is not None:
                applicant_id = self._identity_resolver(caller)
                if applicant_id is not None:
                    self._applicant(applicant_id)

            self._applications.add(key)

            self.logger.info(
                "Application submitted", job_id=job_id, caller=caller, applicant_id=applicant_id
            )
            self._emit(
                names.APPLICATION_SUBMITTED,
                job_id=job_id,
                applicant_id=applicant_id,
                caller=caller,
            )

    def hire_applicant(self, caller: str, job_id: int, applicant_id: int) -> None:
        """Assign an applicant to a job and mark it filled."""
        with self._lock:
            self._require_admin(caller, "hire_applicant")
            job = self._job(job_id)
            applicant = self._applicant(applicant_id)
            if job.filled:
                raise self._rejected(AlreadyFilled(job_id, job.applicant_id))

            job.applicant_id = applicant_id
            job.filled = True
            applicant.rating += self._hire_rating_bonus

            self.logger.info("Applicant hired", job_id=job_id, applicant_id=applicant_id)
            self._emit(names.APPLICANT_HIRED, job_id=job_id, applicant_id=applicant_id)

    def provide_rating(self, caller: str, applicant_id: int, rating: int) -> None:
        """
        Add rating to the applicant's accumulated rating.

        Ratings accumulate across calls; they never overwrite.
        """
        with self._lock:
            self._require_admin(caller, "provide_rating")
            applicant = self._applicant(applicant_id)
            _require_int(rating, "rating")
            if rating < 0 or rating > self._max_rating:
                raise self._rejected(InvalidRating(rating, self._max_rating))

            applicant.rating += rating

            self.logger.info(
                "Rating recorded", applicant_id=applicant_id, rating=rating, total=applicant.rating
            )
            self._emit(
                names.RATING_RECORDED,
                applicant_id=applicant_id,
                rating=rating,
                total=applicant.rating,
            )

    def update_work_preference(
        self,
        caller: str,
        applicant_id: int,
        preference: Union[WorkPreference, str, int],
    ) -> None:
        """Overwrite an applicant's work preference. Admin only."""
        with self._lock:
            self._require_admin(caller, "update_work_preference")
            self._set_work_preference(applicant_id, preference)

    def _set_work_preference(
        self,
        applicant_id: int,
        preference: Union[WorkPreference, str, int],
    ) -> None:
        # Internal path: no caller check
        with self._lock:
            applicant = self._applicant(applicant_id)
            preference = WorkPreference.parse(preference)

            applicant.work_preference = preference

            self.logger.info(
                "Work preference changed", applicant_id=applicant_id, preference=preference.label
            )
            self._emit(
                names.WORK_PREFERENCE_CHANGED,
                applicant_id=applicant_id,
                preference=preference.label,
            )

    # Read accessors

    def get_applicant(self, applicant_id: int) -> Applicant:
        with self._lock:
            return replace(self._applicant(applicant_id))

    def get_job(self, job_id: int) -> Job:
        with self._lock:
            return replace(self._job(job_id))

    def get_applicant_rating(self, applicant_id: int) -> int:
        with self._lock:
            return self._applicant(applicant_id).rating

    def get_applicant_type(self, applicant_id: int) -> WorkPreference:
        """Return the applicant's work preference."""
        with self._lock:
            return self._applicant(applicant_id).work_preference

    def list_applicants(self) -> list[Applicant]:
        with self._lock:
            return [replace(a) for a in self._applicants]

    def list_jobs(self) -> list[Job]:
        with self._lock:
            return [replace(j) for j in self._jobs]

    def has_applied(self, caller: str, job_id: int) -> bool:
        with self._lock:
            return (caller, job_id) in self._applications

    def count_applicants(self) -> int:
        return len(self._applicants)

    def count_jobs(self) -> int:
        return len(self._jobs)

    @property
    def events(self) -> list[Notification]:
        """Ordered copy of the notification log."""
        with self._lock:
            return list(self._events)

    def subscribe(self, callback: Subscriber) -> None:
        """
        Register a callback invoked with each notification after it is logged.

        Every subscriber runs even if an earlier one raises. Failures are
        logged and then reported together as NotificationError; the
        mutation itself stays committed.
        """
        self._subscribers.append(callback)

    def summary(self) -> dict[str, Any]:
        """
        Return counts describing the current registry state.

        Returns:
            Dictionary with applicant, job, application and notification counts.
        """
        with self._lock:
            return {
                "admin": self._admin,
                "applicants": len(self._applicants),
                "jobs": len(self._jobs),
                "jobs_filled": sum(1 for j in self._jobs if j.filled),
                "applications": len(self._applications),
                "notifications": len(self._events),
            }

    # Internals

    def _require_admin(self, caller: str, operation: str) -> None:
        if caller != self._admin:
            raise self._rejected(Unauthorized(caller, operation))

    def _applicant(self, applicant_id: int) -> Applicant:
        _require_int(applicant_id, "applicant_id")
        if not 1 <= applicant_id <= len(self._applicants):
            raise self._rejected(NotFound("Applicant", applicant_id))
        return self._applicants[applicant_id - 1]

    def _job(self, job_id: int) -> Job:
        _require_int(job_id, "job_id")
        if not 1 <= job_id <= len(self._jobs):
            raise self._rejected(NotFound("Job", job_id))
        return self._jobs[job_id - 1]

    def _rejected(self, error: RegistryError) -> RegistryError:
        self.logger.warning(
            "Registry operation rejected", error=type(error).__name__, reason=str(error)
        )
        return error

    def _emit(self, event_name: str, **fields: Any) -> Notification:
        notification = Notification(sequence=len(self._events) + 1, name=event_name, fields=fields)
        self._events.append(notification)

        # The mutation is committed; every subscriber still gets the notification
        failures: list[Exception] = []
        for callback in list(self._subscribers):
            try:
                callback(notification)
            except Exception as e:
                self.logger.exception(
                    "Subscriber failed", notification=event_name, sequence=notification.sequence
                )
                failures.append(e)
        if failures:
            raise NotificationError(notification, failures) from failures[0]
        return notification


def _require_int(value: Any, field: str) -> None:
    # bool is an int subclass but never a valid id or amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be an int, got {type(value).__name__}")
