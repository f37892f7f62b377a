"""LaTeX document composers for resumes and cover letters."""

from rezzy.renderers.cover_letter_renderer import (
    CoverLetterRenderer,
    build_cover_letter,
    neutralize_brackets,
)
from rezzy.renderers.resume_renderer import build_resume, render_resume

__all__ = [
    "CoverLetterRenderer",
    "build_cover_letter",
    "build_resume",
    "neutralize_brackets",
    "render_resume",
]
