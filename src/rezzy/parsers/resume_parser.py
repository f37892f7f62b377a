"""Load JSON Resume documents from URLs or files, and text from PDFs."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import httpx

from rezzy.exceptions import ResumeFetchError
from rezzy.models.resume import ResumeDocument

logger = logging.getLogger(__name__)


def fetch_resume(source: str, *, timeout: float = 30.0) -> ResumeDocument:
    """Fetch a resume from an http(s) URL or read it from a local JSON file."""
    if source.startswith(("http://", "https://")):
        return parse_resume_json(_fetch_url(source, timeout=timeout))
    return load_resume_file(source)


def load_resume_file(path: str | Path) -> ResumeDocument:
    """Read a JSON Resume file."""
    return parse_resume_json(json.loads(Path(path).read_text(encoding="utf-8")))


def parse_resume_json(data: dict) -> ResumeDocument:
    """Validate decoded JSON, unwrapping a top-level ``{"resume": ...}`` object."""
    if isinstance(data, dict) and set(data) == {"resume"} and isinstance(data["resume"], dict):
        data = data["resume"]
    return ResumeDocument.model_validate(data)


def _fetch_url(url: str, *, timeout: float) -> dict:
    logger.info("Fetching resume: %s", url)
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise ResumeFetchError(
            f"Resume fetch failed with HTTP {exc.response.status_code}: {url}"
        ) from exc
    except httpx.HTTPError as exc:
        raise ResumeFetchError(f"Resume fetch failed: {url}: {exc}") from exc
    return response.json()


def extract_pdf_text(path: str | Path) -> str:
    """Extract the plain text of every page of a PDF."""
    import fitz  # pymupdf

    doc = fitz.open(str(path))
    try:
        text = "\n".join(page.get_text() for page in doc)
    finally:
        doc.close()
    logger.debug("Extracted %d characters from %s", len(text), path)
    return text
