"""Prompts shared by every LLM provider."""

from __future__ import annotations

import json

from rezzy.models.resume import ResumeDocument

COVER_LETTER_SYSTEM = """\
You are an experienced resume cover letter writer. Respond ONLY with a valid \
JSON object for the cover letter, with exactly these keys:
{
  "greeting": "Salutation line, e.g. Dear Hiring Manager,",
  "companyStreetAddress": "Street address of the hiring company",
  "companyCity": "City of the hiring company",
  "companyState": "State or region of the hiring company",
  "companyZipCode": "Postal code of the hiring company",
  "letterBody": "The body of the cover letter, paragraphs separated by blank lines"
}"""

COVER_LETTER_INSTRUCTIONS = """\
Your task is to write a clear, tailored cover letter based on two inputs:
1. A JSON resume with the candidate's background: work experience, education, skills and achievements.
2. A job description with the role, responsibilities and required qualifications.

Instructions:
- Read the job description and identify the key responsibilities and qualifications.
- Find the most relevant experience, skills and accomplishments in the resume.
- Write a concise cover letter (no more than one page) that:
  - sounds natural, confident and professional, without stiff or cliched language;
  - shows genuine interest in the role and organization;
  - connects the candidate's experience to the job's goals with specific examples.
- Do not repeat the resume. Give context and connect past work to the new opportunity.

Tone: honest, human and articulate. Avoid phrases like "esteemed company" or \
"I am writing to express" unless they are truly warranted.

Important: if any information is missing, DO NOT MAKE IT UP. Use only the data in \
the resume and the job description. When the company address is unknown, put a \
bracketed placeholder such as [COMPANY ADDRESS], [CITY], [STATE] or [ZIP CODE] in \
the matching field."""

RESUME_PARSER_SYSTEM = """\
You are a resume parser. Extract information from the document and format it \
according to the JSON Resume schema below. Respond ONLY with a valid JSON object.

If some information is not available in the document, omit those fields.
DO NOT MAKE UP ANY INFORMATION.
Extract as much as possible; do not leave out any experience or skills.
Wrap the entire response in a "resume" object."""

RESUME_JSON_TEMPLATE = {
    "resume": {
        "basics": {
            "name": "Full name",
            "label": "Professional title/role",
            "email": "Email address",
            "phone": "Phone number",
            "url": "Personal website URL",
            "summary": "Professional summary or objective statement",
            "location": {"city": "City", "region": "State or region"},
            "profiles": [{"network": "e.g. LinkedIn", "username": "Username", "url": "Profile URL"}],
        },
        "work": [
            {
                "name": "Company name",
                "position": "Job title",
                "location": "City, State",
                "startDate": "YYYY-MM-DD",
                "endDate": "YYYY-MM-DD or 'Present'",
                "summary": "Brief description of role",
                "highlights": ["Key achievements or responsibilities"],
            }
        ],
        "education": [
            {
                "institution": "School or university name",
                "area": "Field of study",
                "studyType": "Degree type, e.g. Bachelor",
                "startDate": "YYYY-MM-DD",
                "endDate": "YYYY-MM-DD or 'Present'",
            }
        ],
        "certificates": [{"name": "Certificate name", "date": "YYYY-MM-DD", "issuer": "Issuer"}],
        "skills": [{"name": "Skill category", "keywords": ["Specific skills"]}],
        "interests": [{"name": "Area of expertise or interest", "keywords": ["Details"]}],
    }
}


def resume_parser_system_prompt() -> str:
    return f"{RESUME_PARSER_SYSTEM}\n\nSchema:\n{json.dumps(RESUME_JSON_TEMPLATE, indent=2)}"


def build_cover_letter_prompt(
    job_description: str,
    resume: ResumeDocument,
    prompt: str | None = None,
) -> str:
    """User message for cover letter generation."""
    parts = [COVER_LETTER_INSTRUCTIONS]
    if prompt:
        parts.append(f"Also: {prompt}")
    parts.extend([
        "My resume in JSON format:",
        json.dumps(resume.to_json_dict(), indent=2, ensure_ascii=False),
        "This is the job description:",
        job_description,
    ])
    return "\n\n".join(parts)
