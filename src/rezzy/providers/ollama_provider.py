"""Ollama provider speaking the native /api/chat endpoint over httpx."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import httpx
from tenacity.wait import wait_base

from rezzy.config import OllamaConfig
from rezzy.exceptions import ProviderError, UnsupportedDocumentError
from rezzy.models.cover_letter import CoverLetterPayload
from rezzy.models.resume import ResumeDocument
from rezzy.parsers.resume_parser import extract_pdf_text
from rezzy.providers.base import DEFAULT_WAIT, parse_cover_letter, parse_resume, retrying
from rezzy.providers.prompts import (
    COVER_LETTER_SYSTEM,
    build_cover_letter_prompt,
    resume_parser_system_prompt,
)

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt", ".md")


class OllamaProvider:
    """LLMProvider for a local or remote Ollama server."""

    name = "ollama"

    def __init__(
        self,
        config: OllamaConfig,
        *,
        timeout: float = 120.0,
        max_retries: int = 3,
        client: httpx.AsyncClient | None = None,
        wait: wait_base = DEFAULT_WAIT,
    ):
        # 0.0.0.0 is a bind address, not something a client can connect to
        self.base_url = config.base_url.replace("://0.0.0.0", "://localhost").rstrip("/")
        self.model = config.model
        self.max_retries = max_retries
        self._wait = wait
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def _post(self, payload: dict) -> dict:
        url = f"{self.base_url}/api/chat"
        async for attempt in retrying(self.max_retries, (httpx.TransportError,), self._wait):
            with attempt:
                response = await self.client.post(url, json=payload)
                response.raise_for_status()
                return response.json()

    async def _chat(self, messages: list[dict]) -> str:
        logger.debug("Ollama call: model=%s", self.model)
        payload = {
            "model": self.model,
            "messages": messages,
            "stream": False,
            "format": "json",
        }
        try:
            data = await self._post(payload)
        except httpx.HTTPStatusError as exc:
            logger.error("Ollama call failed", exc_info=True)
            raise ProviderError(
                f"Ollama returned HTTP {exc.response.status_code} for model {self.model!r}"
            ) from exc
        except (httpx.HTTPError, json.JSONDecodeError) as exc:
            logger.error("Ollama call failed", exc_info=True)
            raise ProviderError(f"Ollama request failed: {exc}") from exc

        content = (data.get("message") or {}).get("content")
        if not content:
            choices = data.get("choices") or [{}]
            content = (choices[0].get("message") or {}).get("content")
        if not content:
            raise ProviderError("Ollama returned an empty response")
        return content

    async def generate_cover_letter(
        self,
        job_description: str,
        resume: ResumeDocument,
        prompt: str | None = None,
    ) -> CoverLetterPayload:
        text = await self._chat([
            {"role": "system", "content": COVER_LETTER_SYSTEM},
            {"role": "user", "content": build_cover_letter_prompt(job_description, resume, prompt)},
        ])
        return parse_cover_letter(text)

    async def process_document(self, file_path: str | Path) -> ResumeDocument:
        """Extract the document text locally, then let the model structure it."""
        path = Path(file_path)
        suffix = path.suffix.lower()
        if suffix == ".pdf":
            text = await asyncio.to_thread(extract_pdf_text, path)
        elif suffix in TEXT_SUFFIXES:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        else:
            raise UnsupportedDocumentError(
                f"Unsupported document type {suffix or path.name!r}; expected .pdf, .txt or .md"
            )
        return await self.process_resume_text(text)

    async def process_resume_text(self, resume_text: str) -> ResumeDocument:
        text = await self._chat([
            {"role": "system", "content": resume_parser_system_prompt()},
            {"role": "user", "content": resume_text},
        ])
        return parse_resume(text)

    async def aclose(self) -> None:
        await self.client.aclose()
