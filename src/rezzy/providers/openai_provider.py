"""OpenAI chat completions provider."""

from __future__ import annotations

import logging
from pathlib import Path

import openai
from tenacity.wait import wait_base

from rezzy.config import OpenAIConfig
from rezzy.exceptions import ProviderError, UnsupportedDocumentError
from rezzy.models.cover_letter import CoverLetterPayload
from rezzy.models.resume import ResumeDocument
from rezzy.providers.base import DEFAULT_WAIT, parse_cover_letter, parse_resume, retrying
from rezzy.providers.prompts import (
    COVER_LETTER_SYSTEM,
    build_cover_letter_prompt,
    resume_parser_system_prompt,
)

logger = logging.getLogger(__name__)

TRANSIENT_ERRORS = (
    openai.APIConnectionError,
    openai.RateLimitError,
    openai.InternalServerError,
)

PERMISSION_HINT = (
    "OpenAI refused the request (403). Check that OPENAI_API_KEY is valid and "
    "has access to model {model!r}, or pick another model with OPENAI_MODEL."
)


class OpenAIProvider:
    """LLMProvider backed by ``openai.AsyncOpenAI``."""

    name = "openai"

    def __init__(
        self,
        config: OpenAIConfig,
        *,
        timeout: float | None = None,
        max_retries: int = 3,
        client: openai.AsyncOpenAI | None = None,
        wait: wait_base = DEFAULT_WAIT,
    ):
        self.model = config.model
        self.max_retries = max_retries
        self._wait = wait
        if client is None:
            kwargs: dict = {"api_key": config.api_key, "max_retries": 0}
            if config.base_url:
                kwargs["base_url"] = config.base_url
            if timeout is not None:
                kwargs["timeout"] = timeout
            client = openai.AsyncOpenAI(**kwargs)
        self.client = client

    async def _call_api(self, call, **kwargs):
        async for attempt in retrying(self.max_retries, TRANSIENT_ERRORS, self._wait):
            with attempt:
                return await call(**kwargs)

    async def _complete(self, messages: list[dict]) -> str:
        logger.debug("OpenAI call: model=%s", self.model)
        try:
            response = await self._call_api(
                self.client.chat.completions.create,
                model=self.model,
                messages=messages,
                response_format={"type": "json_object"},
            )
        except openai.PermissionDeniedError as exc:
            logger.error("OpenAI call refused", exc_info=True)
            raise ProviderError(PERMISSION_HINT.format(model=self.model)) from exc
        except openai.OpenAIError as exc:
            logger.error("OpenAI call failed", exc_info=True)
            raise ProviderError(f"OpenAI request failed: {exc}") from exc

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise ProviderError("OpenAI returned an empty response")
        return content

    async def generate_cover_letter(
        self,
        job_description: str,
        resume: ResumeDocument,
        prompt: str | None = None,
    ) -> CoverLetterPayload:
        text = await self._complete([
            {"role": "system", "content": COVER_LETTER_SYSTEM},
            {"role": "user", "content": build_cover_letter_prompt(job_description, resume, prompt)},
        ])
        return parse_cover_letter(text)

    async def process_document(self, file_path: str | Path) -> ResumeDocument:
        """Upload a PDF, have the model convert it to JSON Resume, then delete the upload."""
        path = Path(file_path)
        if path.suffix.lower() != ".pdf":
            raise UnsupportedDocumentError(
                f"OpenAI document processing only supports PDF files, got {path.suffix or path.name!r}"
            )

        logger.info("Uploading %s to OpenAI", path.name)
        try:
            uploaded = await self._call_api(
                self.client.files.create, file=path, purpose="user_data"
            )
        except openai.OpenAIError as exc:
            logger.error("OpenAI file upload failed", exc_info=True)
            raise ProviderError(f"Failed to upload file to OpenAI: {exc}") from exc

        try:
            text = await self._complete([
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": resume_parser_system_prompt()},
                        {"type": "text", "text": "Please extract the resume information from this PDF document:"},
                        {"type": "file", "file": {"file_id": uploaded.id}},
                    ],
                }
            ])
        finally:
            await self._delete_file(uploaded.id)
        return parse_resume(text)

    async def _delete_file(self, file_id: str) -> None:
        try:
            await self.client.files.delete(file_id)
        except openai.OpenAIError:
            logger.warning("Failed to delete uploaded file %s", file_id, exc_info=True)
        else:
            logger.debug("Deleted uploaded file %s", file_id)

    async def aclose(self) -> None:
        await self.client.close()
