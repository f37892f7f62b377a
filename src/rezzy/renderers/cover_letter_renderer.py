"""Compose a one-page cover letter in plain ``article`` LaTeX."""

from __future__ import annotations

from datetime import date

from rezzy.latex.escape import LATEX_CHARS, escape_resume, escape_string, neutralize_brackets
from rezzy.latex.markup import latex_command
from rezzy.models.cover_letter import CoverLetterPayload
from rezzy.models.resume import ResumeDocument
from rezzy.renderers.contact import contact_links, contact_parts

LINE_BREAK = "\\\\"
DIAMOND = " $\\diamond$ "
FONT = "\\fontsize{12}{14}\\selectfont"

PREAMBLE = [
    "\\documentclass[12pt,letterpaper]{article}",
    "\\usepackage[left=0.75in,right=0.75in,top=0.75in,bottom=0.75in]{geometry}",
    "\\usepackage{enumitem}",
    "\\usepackage{xcolor}",
    "\\usepackage{setspace}",
    "\\usepackage[colorlinks=true, linkcolor=blue, urlcolor=blue]{hyperref}",
    "\\definecolor{blackcolor}{RGB}{0,0,0}",
    "\\setlength{\\parskip}{1em}",
    "\\pagenumbering{gobble}",
    "\\setlength{\\parindent}{0pt}",
    "\\setlist[itemize]{leftmargin=2em, itemsep=0.5em, parsep=0pt}",
    "\\begin{document}",
]


def format_letter_date(day: date) -> str:
    return f"{day:%B} {day.day}, {day.year}"


def build_cover_letter(
    resume: ResumeDocument,
    letter: CoverLetterPayload,
    today: date | None = None,
) -> list[str]:
    """Escape the inputs and render the cover letter as LaTeX lines.

    The resume and the letter's greeting and body are escaped. Company
    address fields are left as written, apart from bracket neutralizing, so
    placeholder tokens like ``[COMPANY ADDRESS]`` come through intact.
    """
    escaped_letter = letter.model_copy(
        update={
            "greeting": escape_string(letter.greeting, LATEX_CHARS),
            "letter_body": escape_string(letter.letter_body, LATEX_CHARS),
        }
    )
    renderer = CoverLetterRenderer(escape_resume(resume, LATEX_CHARS), escaped_letter, today=today)
    return renderer.render()


class CoverLetterRenderer:
    """Renders an escaped resume header plus a letter payload."""

    def __init__(
        self,
        resume: ResumeDocument,
        letter: CoverLetterPayload,
        *,
        today: date | None = None,
    ):
        self.resume = resume
        self.letter = letter
        self.today = today or date.today()

    def render(self) -> list[str]:
        return [
            *self.build_preamble(),
            *self.build_header(),
            *self.build_body(),
            *self.build_footer(),
        ]

    def build_preamble(self) -> list[str]:
        return list(PREAMBLE)

    def build_header(self) -> list[str]:
        basics = self.resume.basics
        full_name = (basics.name or "").upper()

        lines = [
            latex_command("begin", ["center"]),
            f"{{\\LARGE\\bfseries\\color{{blackcolor}} {full_name}}} {LINE_BREAK}[-0.2em]",
            latex_command("vspace", [".75em"]),
        ]
        contact = DIAMOND.join(contact_parts(basics))
        if contact:
            lines.append(f"{contact} {LINE_BREAK}")
        lines.append(latex_command("vspace", [".5em"]))
        links = DIAMOND.join(contact_links(basics))
        if links:
            lines.append(links)
        lines.extend([
            "\\noindent" + latex_command("rule", ["\\textwidth", ".75pt"]),
            latex_command("end", ["center"]),
        ])
        return lines

    def build_body(self) -> list[str]:
        lines = [
            latex_command("vspace", ["0.5em"]),
            f"{{{FONT} {format_letter_date(self.today)}}}",
            latex_command("vspace", ["1em"]),
        ]
        address = self.address_lines()
        if address:
            block = f" {LINE_BREAK} ".join(address)
            lines.extend([
                f"{{{FONT} {block} {LINE_BREAK}}}",
                latex_command("vspace", ["1em"]),
            ])

        message = f" {LINE_BREAK} ".join(
            neutralize_brackets(part)
            for part in (self.letter.greeting, self.letter.letter_body)
            if part
        )
        lines.append(f"{{{FONT} {message}}}")
        return lines

    def address_lines(self) -> list[str]:
        """Street line and ``City, ST Zip`` line from whichever parts exist."""
        letter = self.letter
        city_state = ", ".join(part for part in (letter.company_city, letter.company_state) if part)
        locality = " ".join(part for part in (city_state, letter.company_zip_code) if part)
        return [
            neutralize_brackets(part)
            for part in (letter.company_street_address, locality)
            if part
        ]

    def build_footer(self) -> list[str]:
        return [latex_command("end", ["document"])]
