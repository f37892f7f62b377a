"""LaTeX building blocks: escaping, commands, sections."""

from rezzy.latex.escape import (
    LATEX_CHARS,
    LEGACY_LATEX_CHARS,
    escape_chars,
    escape_resume,
    escape_string,
    neutralize_brackets,
)
from rezzy.latex.markup import ENVIRONMENTS, latex_command, latex_new_command
from rezzy.latex.sections import latex_banner_comment, latex_list, latex_section

__all__ = [
    "ENVIRONMENTS",
    "LATEX_CHARS",
    "LEGACY_LATEX_CHARS",
    "escape_chars",
    "escape_resume",
    "escape_string",
    "latex_banner_comment",
    "latex_command",
    "latex_list",
    "latex_new_command",
    "latex_section",
    "neutralize_brackets",
]
