"""Per-role ranking of analyzed documents across a batch."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from resume_screener.documents.models import ParsedDocument
from resume_screener.matching.models import RoleMatch
from resume_screener.matching.reasoning import generate_comparative_reasoning
from resume_screener.roles.registry import RoleCategory

logger = logging.getLogger("resume_screener.matching.ranking")


@dataclass(frozen=True)
class DocumentAnalysis:
    """One analyzed document and its role matches (best first)."""

    document: ParsedDocument
    matches: tuple[RoleMatch, ...]

    def match_for(self, role: RoleCategory) -> RoleMatch:
        for match in self.matches:
            if match.role is role:
                return match
        raise KeyError(f"No match for role {role.value} in {self.document.display_name}")

    @property
    def best_match(self) -> Optional[RoleMatch]:
        return self.matches[0] if self.matches else None

    def to_dict(self) -> dict:
        return {
            "document": self.document.to_dict(),
            "matches": [m.to_dict() for m in self.matches],
        }


@dataclass(frozen=True)
class RankedCandidate:
    document: ParsedDocument
    match: RoleMatch


@dataclass(frozen=True)
class RoleSummary:
    """Best candidate for a role plus the comparative explanation."""

    role: RoleCategory
    best: RankedCandidate
    ranking: tuple[RankedCandidate, ...]
    reasoning: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "role": self.role.value,
            "best": {
                "source": self.best.document.source,
                "name": self.best.document.name,
                "email": self.best.document.email,
                "score": self.best.match.score,
            },
            "ranking": [
                {"source": c.document.source, "name": c.document.name, "score": c.match.score}
                for c in self.ranking
            ],
            "reasoning": list(self.reasoning),
        }


def rank_for_role(role: RoleCategory, analyses: Sequence[DocumentAnalysis]) -> list[RankedCandidate]:
    """Rank all documents for a role by score descending; ties keep input order."""
    ranked = [RankedCandidate(a.document, a.match_for(role)) for a in analyses]
    ranked.sort(key=lambda c: c.match.score, reverse=True)
    return ranked


def best_for_role(role: RoleCategory, analyses: Sequence[DocumentAnalysis]) -> Optional[RankedCandidate]:
    """Return the top candidate for a role, or None for an empty batch."""
    ranked = rank_for_role(role, analyses)
    return ranked[0] if ranked else None


def best_per_role(
    analyses: Sequence[DocumentAnalysis],
    roles: Sequence[RoleCategory] = tuple(RoleCategory),
) -> dict[RoleCategory, Optional[RankedCandidate]]:
    """Best candidate for each role, computed independently.

    One document may be the best for several roles.
    """
    return {role: best_for_role(role, analyses) for role in roles}


def comparative_summary(role: RoleCategory, analyses: Sequence[DocumentAnalysis]) -> Optional[RoleSummary]:
    """Rank a role and explain why the winner is the best candidate."""
    ranked = rank_for_role(role, analyses)
    if not ranked:
        return None

    best = ranked[0]
    scores = [c.match.score for c in ranked]
    reasoning = generate_comparative_reasoning(role, best.match, scores)

    logger.debug("Best for %s: %s (%d%%)", role.value, best.document.display_name, best.match.score)
    return RoleSummary(role=role, best=best, ranking=tuple(ranked), reasoning=tuple(reasoning))
