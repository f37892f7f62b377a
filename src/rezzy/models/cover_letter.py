"""Pydantic model for the provider-generated cover letter payload."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CoverLetterPayload(BaseModel):
    """Structured cover letter returned by an LLM provider.

    Address fields may hold placeholder tokens such as ``[COMPANY ADDRESS]``
    when the job description does not name them.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    greeting: str = ""
    company_street_address: str = ""
    company_city: str = ""
    company_state: str = ""
    company_zip_code: str = ""
    letter_body: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
