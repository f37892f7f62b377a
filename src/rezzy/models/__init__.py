"""Data models for resume and cover letter rendering."""

from rezzy.models.cover_letter import CoverLetterPayload
from rezzy.models.resume import (
    Basics,
    Certificate,
    Education,
    Interest,
    Location,
    Profile,
    ResumeDocument,
    Skill,
    Work,
)

__all__ = [
    "Basics",
    "Certificate",
    "CoverLetterPayload",
    "Education",
    "Interest",
    "Location",
    "Profile",
    "ResumeDocument",
    "Skill",
    "Work",
]
