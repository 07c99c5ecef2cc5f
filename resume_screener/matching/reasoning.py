"""Templated explanations for role matches and batch rankings.

Everything here is a pure function of already-computed scores and match
counts; no scoring happens in this module.
"""

from typing import Sequence

from resume_screener.matching.models import MatchCounts, RoleMatch
from resume_screener.roles.registry import RoleCategory

EXCELLENT_THRESHOLD = 80
STRONG_THRESHOLD = 60
MODERATE_THRESHOLD = 40

SIGNIFICANT_MARGIN = 10
CLEAR_MARGIN = 5

EXPERIENCE_HIGHLIGHT_THRESHOLD = 3
MAX_EXPERIENCE_NAMED = 3
SKILLS_HIGHLIGHT_THRESHOLD = 5
MAX_SKILLS_NAMED = 5


def _plural(count: int, singular: str, plural: str = "") -> str:
    return singular if count == 1 else (plural or f"{singular}s")


def _matches(count: int) -> str:
    return f"{count} {_plural(count, 'match', 'matches')}"


def generate_reasoning(role: RoleCategory, score: float, counts: MatchCounts) -> str:
    """Explain a single role match: a score-band sentence plus per-dimension clauses.

    ``score`` is the weighted score before rounding, so 79.6 is still "strong".
    """
    parts = []

    if score >= EXCELLENT_THRESHOLD:
        parts.append(f"Excellent match for {role.value} role.")
    elif score >= STRONG_THRESHOLD:
        parts.append(f"Strong candidate for {role.value} position.")
    elif score >= MODERATE_THRESHOLD:
        parts.append(f"Moderate fit for {role.value} role.")
    else:
        parts.append(f"Limited alignment with {role.value} requirements.")

    if counts.experience > 0:
        parts.append(f"Relevant experience found ({_matches(counts.experience)}).")
    if counts.skills > 0:
        parts.append(f"Matching skills identified ({_matches(counts.skills)}).")
    if counts.education > 0:
        parts.append(f"Relevant education credentials present ({_matches(counts.education)}).")
    if counts.certifications > 0:
        parts.append(f"Applicable certifications detected ({_matches(counts.certifications)}).")

    return " ".join(parts)


def generate_comparative_reasoning(
    role: RoleCategory,
    winner: RoleMatch,
    scores: Sequence[int],
) -> list[str]:
    """Explain why the winning candidate is the best for a role.

    ``scores`` is every candidate's score for the role, sorted descending, so
    ``scores[0]`` is the winner and ``scores[1]`` the runner-up.
    """
    sentences = [_margin_statement(winner.score, scores)]

    experience = winner.matched_experience
    if len(experience) >= EXPERIENCE_HIGHLIGHT_THRESHOLD:
        named = ", ".join(experience[:MAX_EXPERIENCE_NAMED])
        sentences.append(
            f"Brings extensive relevant experience ({_matches(len(experience))}), including {named}."
        )
    elif experience:
        sentences.append(f"Has relevant experience as or in: {', '.join(experience)}.")

    skills = winner.matched_skills
    if len(skills) >= SKILLS_HIGHLIGHT_THRESHOLD:
        named = ", ".join(skills[:MAX_SKILLS_NAMED])
        sentences.append(f"Demonstrates a broad skill set ({len(skills)} matching skills), including {named}.")
    elif skills:
        sentences.append(f"Matching skills: {', '.join(skills)}.")

    certifications = winner.matched_certifications
    if certifications:
        count = len(certifications)
        sentences.append(
            f"Holds {count} relevant {_plural(count, 'certification')} ({', '.join(certifications)})."
        )

    education = winner.matched_education
    if education:
        sentences.append(
            f"Education aligns with {role.value} requirements ({_matches(len(education))})."
        )

    sentences.append(_overall_assessment(role, winner.score))
    return sentences


def _margin_statement(score: int, scores: Sequence[int]) -> str:
    total = max(len(scores), 1)
    if total > 1:
        runner_up = scores[1]
        margin = score - runner_up
        if margin >= SIGNIFICANT_MARGIN:
            return (
                f"Scored {score}%, significantly outperforming the next best candidate "
                f"({runner_up}%) by {margin}%."
            )
        if margin >= CLEAR_MARGIN:
            return f"Scored {score}%, {margin}% higher than the next best candidate ({runner_up}%)."
    return f"Achieved the top score of {score}% among {total} {_plural(total, 'candidate')}."


def _overall_assessment(role: RoleCategory, score: int) -> str:
    if score >= EXCELLENT_THRESHOLD:
        return f"Overall, an excellent fit for the {role.value} role."
    if score >= STRONG_THRESHOLD:
        return f"Overall, a strong fit for the {role.value} role."
    if score >= MODERATE_THRESHOLD:
        return f"Overall, a moderate fit for the {role.value} role."
    return f"Overall, the strongest available candidate, though alignment with {role.value} requirements is limited."
