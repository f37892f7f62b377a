"""Multi-line LaTeX blocks: sections, itemized lists, banner comments."""

from __future__ import annotations

from rezzy.latex.markup import latex_command

SECTION_ENVIRONMENT = "rSection"
BANNER_RULE = "%" + "-" * 88


def latex_banner_comment(comment: str | None) -> list[str]:
    """A blank-line padded comment banner, or nothing for an empty comment."""
    if not comment:
        return []
    return [
        "",
        BANNER_RULE,
        f"% {comment.upper()}",
        BANNER_RULE,
        "",
    ]


def latex_section(title: str, lines: list[str]) -> list[str]:
    """Wrap ``lines`` in a titled section; an empty section renders nothing."""
    if not lines:
        return []
    return [
        *latex_banner_comment(f"Section: {title}"),
        latex_command("begin", [SECTION_ENVIRONMENT, title]),
        *lines,
        latex_command("end", [SECTION_ENVIRONMENT]),
    ]


def latex_list(lines: list[str]) -> list[str]:
    """Render ``lines`` as a tight itemize list; an empty list renders nothing."""
    if not lines:
        return []
    return [
        latex_command("begin", ["itemize"]),
        latex_command("setlength", [latex_command("itemsep"), "-3pt"]),
        *(latex_command("item", [line]) for line in lines),
        latex_command("end", ["itemize"]),
    ]
