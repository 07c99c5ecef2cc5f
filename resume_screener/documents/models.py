"""Parsed document data model."""

from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass(frozen=True)
class ParsedDocument:
    """Structured fields extracted from one resume. Immutable once built."""

    text: str = ""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    skills: tuple[str, ...] = field(default_factory=tuple)
    experience: tuple[str, ...] = field(default_factory=tuple)
    education: tuple[str, ...] = field(default_factory=tuple)
    certifications: tuple[str, ...] = field(default_factory=tuple)
    source: str = ""

    def __post_init__(self):
        # Accept lists from callers but store tuples
        for attr in ("skills", "experience", "education", "certifications"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))

    def lines(self, dimension: str) -> tuple[str, ...]:
        return getattr(self, dimension)

    def with_name(self, name: str) -> "ParsedDocument":
        return replace(self, name=name)

    @property
    def display_name(self) -> str:
        return self.name or self.source or "Unknown candidate"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "source": self.source,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "skills": list(self.skills),
            "experience": list(self.experience),
            "education": list(self.education),
            "certifications": list(self.certifications),
        }
