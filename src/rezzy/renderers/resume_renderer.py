"""Compose a full resume document in the ``resume.cls`` LaTeX format.

Every section builder takes an already-escaped :class:`ResumeDocument` and
returns its lines, or an empty list when the source data is missing, so the
document is a plain concatenation of the builders in reading order.
"""

from __future__ import annotations

from rezzy.latex.escape import LATEX_CHARS, escape_resume, neutralize_brackets
from rezzy.latex.markup import latex_command, latex_new_command
from rezzy.latex.sections import latex_banner_comment, latex_list, latex_section
from rezzy.models.resume import Certificate, Education, ResumeDocument, Work
from rezzy.renderers.contact import contact_links, contact_parts

LINE_BREAK = "\\\\"
COLUMN_SEP = "&"
ADDRESS_SEPARATOR = f" {LINE_BREAK} "
EXPERTISE_COLUMNS = 3

GEOMETRY = "left=0.4 in,top=0.4in,right=0.4 in,bottom=0.4in"


def build_resume(resume: ResumeDocument) -> list[str]:
    """Escape ``resume`` once and render it as LaTeX lines."""
    return render_resume(escape_resume(resume, LATEX_CHARS))


def render_resume(resume: ResumeDocument) -> list[str]:
    """Render an already-escaped resume."""
    return [
        *build_preamble(resume),
        *build_objective_section(resume),
        *build_areas_of_expertise_section(resume),
        *build_skills_section(resume),
        *build_experience_section(resume),
        *build_education_section(resume),
        *build_certifications_section(resume),
        *build_footer(resume),
    ]


def build_preamble(resume: ResumeDocument) -> list[str]:
    basics = resume.basics
    itab_body = latex_command("hspace", ["0em"]) + latex_command("rlap", ["#1"])
    name = latex_command("name", [basics.name]) if basics.name else "\\name{}"

    lines = [
        latex_command("documentclass", ["resume"]),
        latex_command("usepackage", ["geometry"], GEOMETRY),
        latex_command("usepackage", ["tabularx"]),
        latex_new_command("itab", 1, itab_body, "1"),
        name,
    ]

    address = ADDRESS_SEPARATOR.join(map(neutralize_brackets, contact_parts(basics)))
    if address:
        lines.append(latex_command("address", [address]))

    links = ADDRESS_SEPARATOR.join(contact_links(basics))
    if links:
        lines.append(latex_command("address", [links]))

    lines.append(latex_command("begin", ["document"]))
    return lines


def build_objective_section(resume: ResumeDocument) -> list[str]:
    summary = resume.basics.summary
    if not summary:
        return []
    return latex_section("OBJECTIVE", [f"{{{summary}}}"])


def build_areas_of_expertise_section(resume: ResumeDocument) -> list[str]:
    names = [neutralize_brackets(interest.name) for interest in resume.interests if interest.name]
    rows = []
    for index, name in enumerate(names, start=1):
        end = LINE_BREAK if index % EXPERTISE_COLUMNS == 0 else COLUMN_SEP
        rows.append(f"{name} {end}")
    if not rows:
        return []
    return latex_section("Areas of Expertise", _table("X" * EXPERTISE_COLUMNS, rows))


def build_skills_section(resume: ResumeDocument) -> list[str]:
    rows = []
    for skill in resume.skills:
        keywords = [keyword for keyword in skill.keywords if keyword]
        if not skill.name or not keywords:
            continue
        label = latex_command("textbf", [neutralize_brackets(skill.name)])
        cells = ", ".join(map(neutralize_brackets, keywords))
        rows.append(f"{label} {COLUMN_SEP} {cells} {LINE_BREAK}")
    if not rows:
        return []
    return latex_section("Skills", _table("lX", rows))


def build_experience_section(resume: ResumeDocument) -> list[str]:
    lines = [line for work in resume.work for line in build_work(work)]
    return latex_section("EXPERIENCE", lines)


def build_work(work: Work) -> list[str]:
    """One experience block; entries without a company or position are skipped."""
    if not work.name or not work.position:
        return []

    position = latex_command("textbf", [work.position])
    dates = latex_command("hfill", [_date_range(work.start_date, work.end_date)])
    company = latex_command("textit", [work.name])
    if work.location:
        location = latex_command("textit", [work.location])
        company_line = f"{company} {latex_command('hfill')} {location} {LINE_BREAK}"
    else:
        company_line = f"{company} {LINE_BREAK}"

    lines = [
        *latex_banner_comment(f"Experience: {work.name} - {work.position}"),
        f"{position} {dates} {LINE_BREAK}",
        company_line,
    ]
    if work.summary:
        lines.append(f"{{{work.summary}}}")
    lines.extend(latex_list([item for item in work.highlights if item]))
    return lines


def build_education_section(resume: ResumeDocument) -> list[str]:
    lines = [line for line in map(build_education_line, resume.education) if line]
    return latex_section("Education", lines)


def build_education_line(education: Education) -> str:
    area = latex_command("textbf", [education.area]) if education.area else None
    dates = _date_range(education.start_date, education.end_date)
    return _dated_line([area, education.institution], dates)


def build_certifications_section(resume: ResumeDocument) -> list[str]:
    lines = [line for line in map(build_certificate_line, resume.certificates) if line]
    return latex_section("Certifications", lines)


def build_certificate_line(certificate: Certificate) -> str:
    name = latex_command("textbf", [certificate.name]) if certificate.name else None
    return _dated_line([name, certificate.issuer], certificate.date or "")


def build_footer(_resume: ResumeDocument) -> list[str]:
    return [latex_command("end", ["document"])]


def _table(column_spec: str, rows: list[str]) -> list[str]:
    return [
        latex_command("begin", ["table"], "h"),
        latex_command("centering"),
        latex_command("begin", ["tabularx", latex_command("textwidth"), column_spec]),
        *rows,
        latex_command("end", ["tabularx"]),
        latex_command("end", ["table"]),
    ]


def _date_range(start: str | None, end: str | None) -> str:
    return " - ".join(part for part in (start, end) if part)


def _dated_line(parts: list[str | None], dates: str) -> str:
    """``first, second \\hfill{dates} \\\\``, or "" when there is nothing to show."""
    head = ", ".join(neutralize_brackets(part) for part in parts if part)
    if not head and not dates:
        return ""
    return f"{head} {latex_command('hfill', [dates])} {LINE_BREAK}"
