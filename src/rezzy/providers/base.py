"""The capability set every LLM provider offers, plus response parsing."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential
from tenacity.wait import wait_base

from rezzy.exceptions import ProviderError
from rezzy.models.cover_letter import CoverLetterPayload
from rezzy.models.resume import ResumeDocument
from rezzy.parsers.resume_parser import parse_resume_json
from rezzy.utils.json_parser import extract_json


@runtime_checkable
class LLMProvider(Protocol):
    name: str

    async def generate_cover_letter(
        self,
        job_description: str,
        resume: ResumeDocument,
        prompt: str | None = None,
    ) -> CoverLetterPayload:
        """Write a cover letter for ``resume`` aimed at ``job_description``."""
        ...

    async def process_document(self, file_path: str | Path) -> ResumeDocument:
        """Convert a resume document (PDF) into JSON Resume data."""
        ...


def parse_cover_letter(text: str) -> CoverLetterPayload:
    """Turn raw model output into a CoverLetterPayload."""
    try:
        return CoverLetterPayload.model_validate(extract_json(text))
    except ValueError as exc:  # includes pydantic.ValidationError
        raise ProviderError(f"Provider returned an unusable cover letter: {exc}") from exc


def parse_resume(text: str) -> ResumeDocument:
    """Turn raw model output into a ResumeDocument."""
    try:
        return parse_resume_json(extract_json(text))
    except ValueError as exc:  # includes pydantic.ValidationError
        raise ProviderError(f"Provider returned an unusable resume: {exc}") from exc


DEFAULT_WAIT = wait_exponential(min=1, max=10)


def retrying(
    attempts: int,
    retry_on: tuple[type[BaseException], ...],
    wait: wait_base = DEFAULT_WAIT,
) -> AsyncRetrying:
    """Exponential back-off for transient provider failures; the last error is re-raised."""
    return AsyncRetrying(
        stop=stop_after_attempt(attempts),
        wait=wait,
        retry=retry_if_exception_type(retry_on),
        reraise=True,
    )
