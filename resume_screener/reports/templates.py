"""Plain-text report rendering for the CLI."""

from resume_screener.analysis import BatchResult
from resume_screener.matching.models import RoleMatch
from resume_screener.matching.ranking import DocumentAnalysis, RoleSummary
from resume_screener.roles.registry import DIMENSIONS, RoleProfileRegistry

RULE = "=" * 60


def render_batch_report(
    result: BatchResult,
    summaries: list[RoleSummary],
    top_skills: int = 5,
) -> str:
    """Render per-document matches, best candidates by role, and failures."""
    sections = []

    for i, analysis in enumerate(result.analyses, 1):
        sections.append(_render_document(analysis, i, top_skills))

    if summaries:
        lines = [RULE, "Best Candidates by Role", RULE]
        for summary in summaries:
            lines.append(_render_summary(summary))
        sections.append("\n".join(lines))

    if result.failures:
        lines = [RULE, result.failure_message()]
        for failure in result.failures:
            lines.append(f"  {failure.source}: {failure.error}")
        sections.append("\n".join(lines))

    if not sections:
        return "No documents analyzed."
    return "\n\n".join(sections)


def render_role_ranking(summary: RoleSummary) -> str:
    """Render the full ranked list for one role."""
    lines = [RULE, f"{summary.role.value} - ranked candidates", RULE]
    for i, candidate in enumerate(summary.ranking, 1):
        lines.append(f"  #{i} [{candidate.match.score:3d}%] {candidate.document.display_name}")
    lines.append("")
    lines.extend(f"  {sentence}" for sentence in summary.reasoning)
    return "\n".join(lines)


def render_registry(registry: RoleProfileRegistry) -> str:
    """Render roles with their dimension weights and keyword counts."""
    lines = []
    for profile in registry:
        lines.append(profile.role.value)
        for dimension in DIMENSIONS:
            lines.append(
                f"  {dimension:<15} weight {profile.weight(dimension):.2f}  "
                f"{len(profile.keywords(dimension))} keywords"
            )
    return "\n".join(lines)


def _render_document(analysis: DocumentAnalysis, index: int, top_skills: int) -> str:
    document = analysis.document
    header = f"#{index} {document.name or f'Resume {index}'}"
    if document.email:
        header += f" <{document.email}>"

    lines = [RULE, header, RULE]
    for match in analysis.matches:
        lines.append(_render_match(match, top_skills))
    return "\n".join(lines)


def _render_match(match: RoleMatch, top_skills: int) -> str:
    lines = [f"  {match.role.value:<20} {match.score:3d}%  {match.reasoning}"]
    if match.matched_experience:
        lines.append(f"      Experience: {', '.join(match.matched_experience)}")
    if match.matched_skills and top_skills:
        shown = match.matched_skills[:top_skills]
        extra = len(match.matched_skills) - len(shown)
        suffix = f" (+{extra} more)" if extra > 0 else ""
        lines.append(f"      Skills: {', '.join(shown)}{suffix}")
    if match.matched_education:
        lines.append(f"      Education: {', '.join(match.matched_education)}")
    if match.matched_certifications:
        lines.append(f"      Certifications: {', '.join(match.matched_certifications)}")
    return "\n".join(lines)


def _render_summary(summary: RoleSummary) -> str:
    best = summary.best
    lines = [f"{summary.role.value}: {best.document.display_name} ({best.match.score}%)"]
    lines.extend(f"  - {sentence}" for sentence in summary.reasoning)
    return "\n".join(lines)
