"""Match result data models."""

from dataclasses import dataclass, field
from typing import NamedTuple

from resume_screener.roles.registry import RoleCategory


class MatchCounts(NamedTuple):
    skills: int = 0
    experience: int = 0
    education: int = 0
    certifications: int = 0


@dataclass(frozen=True)
class RoleMatch:
    """Result of scoring one document against one role profile."""

    role: RoleCategory
    score: int
    matched_skills: tuple[str, ...] = field(default_factory=tuple)
    matched_experience: tuple[str, ...] = field(default_factory=tuple)
    matched_education: tuple[str, ...] = field(default_factory=tuple)
    matched_certifications: tuple[str, ...] = field(default_factory=tuple)
    reasoning: str = ""

    def matched(self, dimension: str) -> tuple[str, ...]:
        return getattr(self, f"matched_{dimension}")

    @property
    def counts(self) -> MatchCounts:
        return MatchCounts(
            skills=len(self.matched_skills),
            experience=len(self.matched_experience),
            education=len(self.matched_education),
            certifications=len(self.matched_certifications),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "role": self.role.value,
            "score": self.score,
            "matched_skills": list(self.matched_skills),
            "matched_experience": list(self.matched_experience),
            "matched_education": list(self.matched_education),
            "matched_certifications": list(self.matched_certifications),
            "reasoning": self.reasoning,
        }
