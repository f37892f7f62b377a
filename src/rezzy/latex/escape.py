"""Character escaping for values headed into LaTeX source."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from rezzy.models.resume import ResumeDocument

ESCAPE_PREFIX = "\\"

# Characters LaTeX treats specially in running text.
LATEX_CHARS: tuple[str, ...] = ("&", "%", "$", "#", "_", "{", "}", "~", "^", "\\")

# Earlier, narrower set. Kept for callers that pinned it; new code uses LATEX_CHARS.
LEGACY_LATEX_CHARS: tuple[str, ...] = ("&", "#")


def escape_string(value: str, chars_to_escape: Iterable[str]) -> str:
    """Prefix every character found in ``chars_to_escape`` with a backslash."""
    charset = set(chars_to_escape)
    return "".join(f"{ESCAPE_PREFIX}{ch}" if ch in charset else ch for ch in value)


def neutralize_brackets(text: str) -> str:
    """Brace each square bracket so text after ``\\\\`` is never read as an option."""
    return "".join("{" + ch + "}" if ch in "[]" else ch for ch in text)


def escape_chars(value: Any, chars_to_escape: Iterable[str]) -> Any:
    """Return an escaped deep copy of a JSON-like value.

    Strings are escaped character by character, lists and tuples are escaped
    element-wise, mappings are rebuilt with their keys untouched and values
    escaped. Numbers, booleans and ``None`` pass through. The input is never
    mutated.

    Escaping is not idempotent: running it twice doubles the backslashes.
    """
    charset = frozenset(chars_to_escape)
    return _escape(value, charset)


def _escape(value: Any, charset: frozenset[str]) -> Any:
    if isinstance(value, str):
        return escape_string(value, charset)
    if isinstance(value, Mapping):
        return {key: _escape(item, charset) for key, item in value.items()}
    if isinstance(value, list):
        return [_escape(item, charset) for item in value]
    if isinstance(value, tuple):
        return tuple(_escape(item, charset) for item in value)
    return value


def escape_resume(
    resume: ResumeDocument,
    chars_to_escape: Iterable[str] = LATEX_CHARS,
) -> ResumeDocument:
    """Escape every string in a resume, returning a new document."""
    escaped = escape_chars(resume.to_json_dict(), chars_to_escape)
    return ResumeDocument.model_validate(escaped)
