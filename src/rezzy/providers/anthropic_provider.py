"""Claude API provider with async support and retry logic."""

from __future__ import annotations

import asyncio
import base64
import logging
from pathlib import Path

import anthropic
from tenacity.wait import wait_base

from rezzy.config import AnthropicConfig
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
    anthropic.APIConnectionError,
    anthropic.RateLimitError,
    anthropic.InternalServerError,
)


class AnthropicProvider:
    """Async Claude client with exponential-backoff retries and token accounting."""

    name = "anthropic"

    def __init__(
        self,
        config: AnthropicConfig,
        *,
        timeout: float | None = None,
        max_retries: int = 3,
        client: anthropic.AsyncAnthropic | None = None,
        wait: wait_base = DEFAULT_WAIT,
    ):
        self.model = config.model
        self.max_tokens = config.max_tokens
        self.max_retries = max_retries
        self._wait = wait
        if client is None:
            kwargs: dict = {"api_key": config.api_key, "max_retries": 0}
            if timeout is not None:
                kwargs["timeout"] = timeout
            client = anthropic.AsyncAnthropic(**kwargs)
        self.client = client
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def _call_api(self, content, system: str) -> anthropic.types.Message:
        kwargs: dict = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": 0.0,
            "messages": [{"role": "user", "content": content}],
        }
        if system:
            kwargs["system"] = system
        async for attempt in retrying(self.max_retries, TRANSIENT_ERRORS, self._wait):
            with attempt:
                return await self.client.messages.create(**kwargs)

    async def generate(self, content, system: str = "") -> str:
        """Send one user turn to Claude and return the text of the reply."""
        logger.debug("LLM call: model=%s", self.model)
        try:
            message = await self._call_api(content, system)
        except anthropic.AnthropicError as exc:
            logger.error("LLM call failed", exc_info=True)
            raise ProviderError(f"Anthropic request failed: {exc}") from exc
        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((self.model, input_tokens, output_tokens))
        return "".join(block.text for block in message.content if block.type == "text")

    async def generate_cover_letter(
        self,
        job_description: str,
        resume: ResumeDocument,
        prompt: str | None = None,
    ) -> CoverLetterPayload:
        text = await self.generate(
            build_cover_letter_prompt(job_description, resume, prompt),
            system=COVER_LETTER_SYSTEM,
        )
        return parse_cover_letter(text)

    async def process_document(self, file_path: str | Path) -> ResumeDocument:
        """Send a PDF as a base64 document block and parse the JSON Resume reply.

        Args:
            file_path: Path to the PDF resume.

        Returns:
            The parsed resume.
        """
        path = Path(file_path)
        if path.suffix.lower() != ".pdf":
            raise UnsupportedDocumentError(
                f"Anthropic document processing only supports PDF files, got {path.suffix or path.name!r}"
            )
        data = await asyncio.to_thread(path.read_bytes)
        b64_data = base64.b64encode(data).decode("utf-8")
        text = await self.generate(
            [
                {
                    "type": "document",
                    "source": {
                        "type": "base64",
                        "media_type": "application/pdf",
                        "data": b64_data,
                    },
                },
                {"type": "text", "text": "Please extract the resume information from this PDF document."},
            ],
            system=resume_parser_system_prompt(),
        )
        return parse_resume(text)

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary

    async def aclose(self) -> None:
        await self.client.close()
