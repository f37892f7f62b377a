"""Pipeline orchestrator: resume source -> provider -> LaTeX composers."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from rezzy.models.cover_letter import CoverLetterPayload
from rezzy.models.resume import ResumeDocument
from rezzy.parsers.resume_parser import fetch_resume
from rezzy.providers.base import LLMProvider
from rezzy.renderers.cover_letter_renderer import build_cover_letter
from rezzy.renderers.resume_renderer import build_resume

logger = logging.getLogger(__name__)


@dataclass
class RezzyResult:
    """Everything one run produced."""

    resume: ResumeDocument
    latex_resume: list[str]
    letter: CoverLetterPayload | None = None
    latex_cover_letter: list[str] | None = None
    elapsed_seconds: float = 0.0
    metadata: dict = field(default_factory=dict)


def build_documents(
    resume: ResumeDocument,
    letter: CoverLetterPayload | None = None,
    today: date | None = None,
) -> tuple[list[str], list[str] | None]:
    """Render the resume and, when a letter is given, the cover letter."""
    latex_resume = build_resume(resume)
    latex_cover_letter = None
    if letter is not None:
        latex_cover_letter = build_cover_letter(resume, letter, today=today)
    return latex_resume, latex_cover_letter


class RezzyOrchestrator:
    """Runs one build: load the resume, optionally write a letter, render both."""

    def __init__(self, provider: LLMProvider | None = None, *, today: date | None = None):
        self.provider = provider
        self.today = today

    def _require_provider(self) -> LLMProvider:
        if self.provider is None:
            raise ValueError("An LLM provider is required for document processing and cover letters")
        return self.provider

    async def load_resume(
        self,
        resume_source: str | None = None,
        document: str | Path | None = None,
    ) -> ResumeDocument:
        """Load the resume from exactly one of a JSON source or a document."""
        if (resume_source is None) == (document is None):
            raise ValueError("Provide exactly one of resume_source or document")
        if resume_source is not None:
            return await asyncio.to_thread(fetch_resume, resume_source)
        logger.info("Converting %s to JSON Resume", document)
        return await self._require_provider().process_document(document)

    async def run(
        self,
        resume_source: str | None = None,
        document: str | Path | None = None,
        job_description: str | None = None,
        prompt: str | None = None,
        *,
        on_phase: Callable[[str, str], None] | None = None,
    ) -> RezzyResult:
        """Run the pipeline.

        Args:
            resume_source: URL or path of a JSON Resume document.
            document: Path of a resume document for the provider to convert.
            job_description: Job description text; enables the cover letter.
            prompt: Extra instructions for the cover letter writer.
            on_phase: Optional callback(phase_name, detail) for progress.
        """
        start = time.monotonic()

        def _notify(phase: str, detail: str = ""):
            if on_phase:
                on_phase(phase, detail)

        _notify("resume", "Loading resume")
        resume = await self.load_resume(resume_source, document)

        letter = None
        if job_description:
            _notify("cover_letter", "Writing cover letter")
            letter = await self._require_provider().generate_cover_letter(
                job_description, resume, prompt
            )

        _notify("render", "Rendering LaTeX")
        latex_resume, latex_cover_letter = build_documents(resume, letter, today=self.today)

        elapsed = time.monotonic() - start
        _notify("done", f"Finished in {elapsed:.1f}s")
        metadata = {"provider": getattr(self.provider, "name", None)}
        token_summary = getattr(self.provider, "get_token_summary", None)
        if token_summary is not None:
            metadata["usage"] = token_summary()
        return RezzyResult(
            resume=resume,
            latex_resume=latex_resume,
            letter=letter,
            latex_cover_letter=latex_cover_letter,
            elapsed_seconds=elapsed,
            metadata=metadata,
        )
