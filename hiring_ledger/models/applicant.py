"""
Applicant model and work preference enum.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class WorkPreference(str, Enum):
    """Desired work arrangement of an applicant."""

    NOT_SPECIFIED = "not_specified"
    REMOTE = "remote"
    WFH = "wfh"
    HYBRID = "hybrid"

    @property
    def label(self) -> str:
        """Display name, e.g. 'NotSpecified' or 'WFH'."""
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Union["WorkPreference", str, int]) -> "WorkPreference":
        """
        Resolve a preference from a member, label, value, or ordinal.

        Raises:
            ValueError: If the value matches no preference.
        """
        if isinstance(value, cls):
            return value

        # bool is an int subclass; True/False are not ordinals
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            raise ValueError(f"Unknown work preference ordinal: {value}")

        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_").replace(" ", "_")
            for member in cls:
                if key in (member.value, member.label.lower()):
                    return member

        raise ValueError(f"Unknown work preference: {value!r}")


_LABELS = {
    WorkPreference.NOT_SPECIFIED: "NotSpecified",
    WorkPreference.REMOTE: "Remote",
    WorkPreference.WFH: "WFH",
    WorkPreference.HYBRID: "Hybrid",
}


@dataclass
class Applicant:
    """Represents a registered candidate profile."""

    id: int = 0
    name: str = ""
    skills: str = ""
    phone: str = ""
    email: str = ""
    rating: int = 0
    work_preference: WorkPreference = WorkPreference.NOT_SPECIFIED

    @classmethod
    def from_dict(cls, data: dict) -> "Applicant":
        """Create an Applicant from a dictionary."""
        # Filter to only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in known_fields}

        if 'work_preference' in filtered:
            filtered['work_preference'] = WorkPreference.parse(filtered['work_preference'])

        return cls(**filtered)

    def to_dict(self) -> dict:
        """Convert Applicant to a dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'skills': self.skills,
            'phone': self.phone,
            'email': self.email,
            'rating': self.rating,
            'work_preference': self.work_preference.label,
        }
