"""Weighted keyword scoring of a document against role profiles."""

import logging
import math

from resume_screener.documents.models import ParsedDocument
from resume_screener.matching.models import MatchCounts, RoleMatch
from resume_screener.matching.reasoning import generate_reasoning
from resume_screener.roles.registry import DEFAULT_REGISTRY, DIMENSIONS, RoleProfile, RoleProfileRegistry

logger = logging.getLogger("resume_screener.matching.scorer")


def _match_dimension(keywords: tuple[str, ...], lines: list[str], text: str) -> list[str]:
    """Return keywords found in any extracted line or, failing that, anywhere in the text.

    The whole-text fallback compensates for unreliable section extraction, so a
    keyword can match from outside its nominal section.
    """
    matched = []
    for keyword in keywords:
        if any(keyword in line for line in lines) or keyword in text:
            matched.append(keyword)
    return matched


def score_role(document: ParsedDocument, profile: RoleProfile) -> RoleMatch:
    """Score a document against one role profile.

    Returns a RoleMatch whose score is an int in [0, 100].
    """
    text = document.text.lower()
    matched: dict[str, list[str]] = {}
    weighted = 0.0

    for dimension in DIMENSIONS:
        keywords = profile.keywords(dimension)
        try:
            lines = [line.lower() for line in document.lines(dimension)]
            matched[dimension] = _match_dimension(keywords, lines, text)
        except Exception:
            logger.exception(
                "Matching %s failed for %s / %s; counting as no matches",
                dimension, document.display_name, profile.role.value,
            )
            matched[dimension] = []

        dimension_score = len(matched[dimension]) / len(keywords)
        weighted += dimension_score * profile.weight(dimension)

    # The clamp is a no-op while weights sum to 1
    raw_score = min(100.0, weighted * 100)
    # Half-up rounding; bands in the reasoning use the unrounded value
    score = int(math.floor(raw_score + 0.5))

    counts = MatchCounts(*(len(matched[d]) for d in DIMENSIONS))
    return RoleMatch(
        role=profile.role,
        score=score,
        matched_skills=tuple(matched["skills"]),
        matched_experience=tuple(matched["experience"]),
        matched_education=tuple(matched["education"]),
        matched_certifications=tuple(matched["certifications"]),
        reasoning=generate_reasoning(profile.role, raw_score, counts),
    )


def match_document(
    document: ParsedDocument,
    registry: RoleProfileRegistry = DEFAULT_REGISTRY,
) -> list[RoleMatch]:
    """Score a document against every role, best first.

    Ties keep registry order.
    """
    matches = [score_role(document, profile) for profile in registry]
    matches.sort(key=lambda m: m.score, reverse=True)

    logger.debug(
        "Scored %s: %s",
        document.display_name,
        ", ".join(f"{m.role.value}={m.score}" for m in matches),
    )
    return matches
