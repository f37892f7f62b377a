"""Utility to extract a JSON object from LLM responses."""

from __future__ import annotations

import json
import re

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def extract_json(text: str) -> dict:
    """Extract a JSON object from LLM output.

    Models wrap JSON in markdown fences or surround it with prose even when
    told not to. Tries in order:
    1. The body of the first fenced code block
    2. The whole text
    3. The span from the first '{' to the last '}'
    """
    text = (text or "").strip()
    candidates = []
    match = _FENCE_RE.search(text)
    if match:
        candidates.append(match.group(1).strip())
    candidates.append(text)

    for candidate in candidates:
        result = _loads_object(candidate)
        if result is not None:
            return result

        start = candidate.find("{")
        end = candidate.rfind("}")
        if start != -1 and end > start:
            result = _loads_object(candidate[start : end + 1])
            if result is not None:
                return result

    raise ValueError(f"Could not extract JSON from text: {text[:200]}...")


def _loads_object(text: str) -> dict | None:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    return data if isinstance(data, dict) else None
