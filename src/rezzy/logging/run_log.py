"""JSON dump of each build run, written next to other temp files by default."""

from __future__ import annotations

import logging
import tempfile
import uuid
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class RunLog(BaseModel):
    """Single record of a build: what went in and what came out."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=datetime.now)
    command: str = "build"
    inputs: dict = Field(default_factory=dict)
    provider: str | None = None
    resume: dict | None = None
    letter: dict | None = None
    latex_resume: list[str] = Field(default_factory=list)
    latex_cover_letter: list[str] | None = None
    usage: dict | None = None
    elapsed_seconds: float = 0.0


def write_run_log(
    log: RunLog,
    directory: str | Path | None = None,
    prefix: str = "rezzy",
) -> Path:
    """Write ``log`` as ``<prefix>_<timestamp>.json`` and return the path."""
    target = Path(directory) if directory else Path(tempfile.gettempdir())
    target.mkdir(parents=True, exist_ok=True)
    stamp = log.timestamp.strftime("%Y-%m-%d_%H-%M-%S")
    path = target / f"{prefix}_{stamp}_{log.id[:8]}.json"
    path.write_text(log.model_dump_json(indent=2), encoding="utf-8")
    logger.debug("Wrote run log %s", path)
    return path
