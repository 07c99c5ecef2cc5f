"""Section splitting, vocabulary lookup, and line filters for resume text."""

import re
from typing import Iterable, Optional

# Skill vocabulary recognised by the extractor (healthcare + front office)
SKILL_VOCABULARY = [
    # Medical
    "patient care", "medical terminology", "hipaa", "ehr", "electronic health records",
    "vitals", "phlebotomy", "injection", "medication administration", "scheduling",
    "insurance", "billing", "coding", "cpt", "icd-10",
    # Nursing
    "nursing", "clinical", "assessment", "diagnosis", "treatment", "care plan",
    "medication management", "patient education", "discharge planning",
    # Customer service
    "customer service", "communication", "problem solving", "multitasking",
    "phone etiquette", "data entry", "appointment scheduling", "conflict resolution",
    # General
    "microsoft office", "excel", "word", "outlook", "typing", "organization",
    "teamwork", "leadership", "time management",
]

SKILLS_HEADINGS = ["skills", "technical skills", "competencies", "qualifications"]
EXPERIENCE_HEADINGS = ["experience", "work history", "employment", "professional experience"]
EDUCATION_HEADINGS = ["education", "academic", "qualifications"]
CERTIFICATION_HEADINGS = ["certifications", "certificates", "licenses", "licensure"]

JOB_TITLE_TERMS = [
    "nurse", "assistant", "manager", "coordinator", "specialist",
    "technician", "director", "supervisor",
]
DEGREE_TERMS = [
    "bachelor", "master", "doctorate", "phd", "associate", "degree", "diploma",
    "certificate", "rn", "bsn", "msn", "np",
]
CERTIFICATION_TERMS = [
    "certified", "license", "cpr", "bls", "acls", "nclex", "certification", "licensed",
]

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_PATTERN = re.compile(
    r"(\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}|\+\d{1,3}\s?\d{3}[-.\s]?\d{3}[-.\s]?\d{4})"
)
DATE_PATTERN = re.compile(
    r"\d{4}|\b(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\s+\d{4}",
    re.IGNORECASE,
)

MAX_EXPERIENCE_LINES = 5
MAX_EDUCATION_LINES = 3


def contains_term(text_lower: str, term: str) -> bool:
    """Check if a lowercase text contains a term.

    Terms of three characters or fewer need word boundaries ("rn" must not
    match inside "learn").
    """
    if len(term) <= 3:
        return re.search(rf"\b{re.escape(term)}\b", text_lower) is not None
    return term in text_lower


def split_lines(text: str) -> list[str]:
    """Split text into stripped, non-empty lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def extract_section(text: str, headings: Iterable[str]) -> Optional[str]:
    """Return the body following the first matching heading, up to the next blank line.

    Headings are tried in order. Returns None when no heading has a non-empty body.
    """
    for heading in headings:
        pattern = rf"^[ \t]*{re.escape(heading)}[ \t]*:?(.*?)(?:\n[ \t]*\n|\Z)"
        match = re.search(pattern, text, re.IGNORECASE | re.MULTILINE | re.DOTALL)
        if match and match.group(1).strip():
            return match.group(1)
    return None


def extract_skills(text: str, vocabulary: Iterable[str] = SKILL_VOCABULARY) -> list[str]:
    """Return vocabulary terms found in text, in vocabulary order."""
    text_lower = text.lower()
    return [skill for skill in vocabulary if contains_term(text_lower, skill)]


def lines_with_terms(text: str, terms: Iterable[str], limit: Optional[int] = None) -> list[str]:
    """Return lines containing any of the given terms, optionally capped."""
    terms = list(terms)
    found = [line for line in split_lines(text) if any(contains_term(line.lower(), t) for t in terms)]
    return found[:limit] if limit is not None else found


def extract_experience_lines(text: str, limit: int = MAX_EXPERIENCE_LINES) -> list[str]:
    """Return lines that look like job entries (title word or a date)."""
    lines = split_lines(text)
    found = []
    for i, line in enumerate(lines):
        line_lower = line.lower()
        if any(contains_term(line_lower, t) for t in JOB_TITLE_TERMS) or DATE_PATTERN.search(line):
            # Require a little context so a bare year does not count as an entry
            entry = " ".join(lines[i:i + 3])
            if len(entry) > 10:
                found.append(line)
    return found[:limit]


def extract_email(text: str) -> Optional[str]:
    match = EMAIL_PATTERN.search(text)
    return match.group(0) if match else None


def extract_phone(text: str) -> Optional[str]:
    match = PHONE_PATTERN.search(text)
    return match.group(0) if match else None


def guess_name(text: str) -> Optional[str]:
    """Heuristic: the first non-empty line, if it is short and not contact info."""
    lines = split_lines(text)
    if not lines:
        return None
    first = lines[0]
    if len(first) < 50 and "@" not in first and not re.search(r"\d{3}[-.\s]?\d{3}[-.\s]?\d{4}", first):
        return first
    return None
