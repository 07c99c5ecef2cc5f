"""PDF, DOCX, and text resume extraction."""

import logging
from pathlib import Path
from typing import Optional

from resume_screener.documents.models import ParsedDocument
from resume_screener.errors import DocumentError
from resume_screener.utils.text_processing import (
    CERTIFICATION_HEADINGS,
    CERTIFICATION_TERMS,
    DEGREE_TERMS,
    EDUCATION_HEADINGS,
    EXPERIENCE_HEADINGS,
    MAX_EDUCATION_LINES,
    SKILLS_HEADINGS,
    extract_email,
    extract_experience_lines,
    extract_phone,
    extract_section,
    extract_skills,
    guess_name,
    lines_with_terms,
)

logger = logging.getLogger("resume_screener.documents")

TEXT_SUFFIXES = (".txt", ".md", ".markdown")
SUPPORTED_SUFFIXES = (".pdf", ".docx") + TEXT_SUFFIXES


def parse_document(file_path: str, name_override: Optional[str] = None) -> ParsedDocument:
    """Parse a resume file (PDF, DOCX, TXT, or MD) into a ParsedDocument."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {file_path}")

    text = read_document_text(path)
    if not text.strip():
        raise DocumentError(f"Document is empty or unreadable: {path.name}")

    document = extract_document_data(text, source=path.name)
    if name_override:
        document = document.with_name(name_override)
    return document


def read_document_text(path: Path) -> str:
    """Return the raw text of a supported document."""
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return _extract_pdf_text(path)
    if suffix == ".docx":
        return _extract_docx_text(path)
    if suffix in TEXT_SUFFIXES:
        return path.read_text(encoding="utf-8")
    raise DocumentError(
        f"Unsupported document type: {suffix or '(none)'} (supported: {', '.join(SUPPORTED_SUFFIXES)})"
    )


def _extract_pdf_text(path: Path) -> str:
    """Extract text from a PDF file using PyPDF2."""
    from PyPDF2 import PdfReader
    from PyPDF2.errors import PdfReadError

    try:
        reader = PdfReader(str(path))
    except PdfReadError as e:
        raise DocumentError(f"Could not read PDF {path.name}: {e}") from e

    pages = []
    for page in reader.pages:
        text = page.extract_text()
        if text:
            pages.append(text)
    return "\n".join(pages)


def _extract_docx_text(path: Path) -> str:
    """Extract paragraph text from a DOCX file using python-docx."""
    import docx
    from docx.opc.exceptions import PackageNotFoundError

    try:
        doc = docx.Document(str(path))
    except PackageNotFoundError as e:
        raise DocumentError(f"Could not read DOCX {path.name}: {e}") from e
    return "\n".join(paragraph.text for paragraph in doc.paragraphs)


def extract_document_data(text: str, source: str = "") -> ParsedDocument:
    """Extract structured fields from raw text.

    Each category is searched within its section when a heading is found,
    otherwise across the whole text.
    """
    skills_text = extract_section(text, SKILLS_HEADINGS) or text
    experience_text = extract_section(text, EXPERIENCE_HEADINGS) or text
    education_text = extract_section(text, EDUCATION_HEADINGS) or text
    certifications_text = extract_section(text, CERTIFICATION_HEADINGS) or text

    document = ParsedDocument(
        text=text,
        name=guess_name(text),
        email=extract_email(text),
        phone=extract_phone(text),
        skills=extract_skills(skills_text),
        experience=extract_experience_lines(experience_text),
        education=lines_with_terms(education_text, DEGREE_TERMS, limit=MAX_EDUCATION_LINES),
        certifications=lines_with_terms(certifications_text, CERTIFICATION_TERMS),
        source=source,
    )

    logger.info(
        "Parsed %s: %d skills, %d experience lines, %d education lines, %d certification lines",
        source or "document",
        len(document.skills),
        len(document.experience),
        len(document.education),
        len(document.certifications),
    )

    return document
