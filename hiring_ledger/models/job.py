"""
Job opening model.
"""

from dataclasses import dataclass


# applicant_id value of a job nobody has been hired for
UNASSIGNED = 0


@dataclass
class Job:
    """Represents a posted job opening."""

    id: int = 0
    title: str = ""
    description: str = ""
    salary: int = 0
    applicant_id: int = UNASSIGNED
    filled: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Job":
        """Create a Job from a dictionary."""
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in known_fields}
        if 'filled' in filtered:
            filtered['filled'] = bool(filtered['filled'])
        return cls(**filtered)

    def to_dict(self) -> dict:
        """Convert Job to a dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'salary': self.salary,
            'applicant_id': self.applicant_id,
            'filled': self.filled,
        }

    @property
    def salary_display(self) -> str:
        """Format salary for display."""
        return f"${self.salary:,}"

    @property
    def is_assigned(self) -> bool:
        return self.applicant_id != UNASSIGNED
