"""Pydantic models for JSON Resume documents."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ResumeModel(BaseModel):
    """Base for JSON Resume objects: camelCase aliases, unknown keys kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # JSON Resume exports often carry explicit nulls; treat them as absent.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Location(ResumeModel):
    address: str | None = None
    postal_code: str | None = None
    city: str | None = None
    country_code: str | None = None
    region: str | None = None


class Profile(ResumeModel):
    network: str | None = None
    username: str | None = None
    url: str | None = None


class Basics(ResumeModel):
    name: str | None = None
    label: str | None = None
    email: str | None = None
    phone: str | None = None
    url: str | None = None
    summary: str | None = None
    location: Location | None = None
    profiles: list[Profile] = Field(default_factory=list)


class Work(ResumeModel):
    name: str | None = None
    position: str | None = None
    location: str | None = None
    url: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    summary: str | None = None
    highlights: list[str] = Field(default_factory=list)


class Education(ResumeModel):
    institution: str | None = None
    url: str | None = None
    area: str | None = None
    study_type: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    score: str | None = None
    courses: list[str] = Field(default_factory=list)


class Certificate(ResumeModel):
    name: str | None = None
    date: str | None = None
    issuer: str | None = None
    url: str | None = None


class Skill(ResumeModel):
    name: str | None = None
    level: str | None = None
    keywords: list[str] = Field(default_factory=list)


class Interest(ResumeModel):
    name: str | None = None
    keywords: list[str] = Field(default_factory=list)


class ResumeDocument(ResumeModel):
    """A JSON Resume document. Every section is optional."""

    basics: Basics = Field(default_factory=Basics)
    work: list[Work] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    certificates: list[Certificate] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    interests: list[Interest] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        """Dump using JSON Resume field names, dropping unset values."""
        return self.model_dump(by_alias=True, exclude_none=True)
