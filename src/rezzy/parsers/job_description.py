import re
from pathlib import Path

from rezzy.parsers.resume_parser import extract_pdf_text


def clean_job_description(text: str) -> str:
    """Collapse runs of blank lines and inline whitespace, strip each line."""
    text = re.sub(r"[ \t]+", " ", text)
    lines = [line.strip() for line in text.splitlines()]
    return re.sub(r"\n{3,}", "\n\n", "\n".join(lines)).strip()


def load_job_description(file_path: str | Path) -> str:
    """Load a job description from a text or PDF file."""
    path = Path(file_path)
    if path.suffix.lower() == ".pdf":
        raw = extract_pdf_text(path)
    else:
        raw = path.read_text(encoding="utf-8")
    return clean_job_description(raw)
