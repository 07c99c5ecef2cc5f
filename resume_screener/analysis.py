"""Batch analysis: extract, score, and rank a set of resume files."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from resume_screener.documents.extractor import parse_document
from resume_screener.documents.models import ParsedDocument
from resume_screener.errors import DocumentError
from resume_screener.matching.ranking import DocumentAnalysis, RoleSummary, comparative_summary
from resume_screener.matching.scorer import match_document
from resume_screener.roles.registry import DEFAULT_REGISTRY, RoleProfileRegistry

logger = logging.getLogger("resume_screener.analysis")


@dataclass(frozen=True)
class FailedDocument:
    source: str
    error: str


@dataclass
class BatchResult:
    """Outcome of analyzing a batch: successes in upload order plus failures."""

    analyses: list[DocumentAnalysis] = field(default_factory=list)
    failures: list[FailedDocument] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.analyses) + len(self.failures)

    @property
    def succeeded(self) -> int:
        return len(self.analyses)

    def failure_message(self) -> str:
        """Summary line for partial failures, empty when everything succeeded."""
        if not self.failures:
            return ""
        return (
            f"{len(self.failures)} file(s) failed to process. "
            f"{self.succeeded} successfully analyzed."
        )

    def summaries(self, registry: RoleProfileRegistry = DEFAULT_REGISTRY) -> list[RoleSummary]:
        """Comparative summary for every role that has at least one candidate."""
        summaries = []
        for role in registry.all_roles():
            summary = comparative_summary(role, self.analyses)
            if summary is not None:
                summaries.append(summary)
        return summaries

    def to_dict(self, registry: RoleProfileRegistry = DEFAULT_REGISTRY) -> dict:
        return {
            "attempted": self.attempted,
            "succeeded": self.succeeded,
            "documents": [a.to_dict() for a in self.analyses],
            "best_per_role": [s.to_dict() for s in self.summaries(registry)],
            "failures": [{"source": f.source, "error": f.error} for f in self.failures],
        }


def analyze_document(
    document: ParsedDocument,
    registry: RoleProfileRegistry = DEFAULT_REGISTRY,
) -> DocumentAnalysis:
    """Score an already-extracted document against every role."""
    return DocumentAnalysis(document=document, matches=tuple(match_document(document, registry)))


def _analyze_file(
    file_path: str,
    registry: RoleProfileRegistry,
    name_from_filename: bool,
) -> DocumentAnalysis:
    name_override = Path(file_path).stem if name_from_filename else None
    document = parse_document(file_path, name_override=name_override)
    return analyze_document(document, registry)


def analyze_files(
    file_paths: Sequence[str],
    registry: RoleProfileRegistry = DEFAULT_REGISTRY,
    workers: int = 1,
    name_from_filename: bool = True,
) -> BatchResult:
    """Analyze every file, continuing past per-file failures.

    Results keep the input order whether or not a worker pool is used.
    """
    result = BatchResult()
    if not file_paths:
        return result

    if workers > 1 and len(file_paths) > 1:
        logger.info("Analyzing %d documents with %d workers", len(file_paths), workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(_run_one, path, registry, name_from_filename) for path in file_paths]
            outcomes = [(path, future.result()) for path, future in zip(file_paths, futures)]
    else:
        logger.info("Analyzing %d documents", len(file_paths))
        outcomes = []
        for path in file_paths:
            outcomes.append((path, _run_one(path, registry, name_from_filename)))

    for path, outcome in outcomes:
        if isinstance(outcome, DocumentAnalysis):
            result.analyses.append(outcome)
        else:
            result.failures.append(FailedDocument(source=Path(path).name, error=outcome))

    logger.info(
        "Batch complete: %d attempted, %d succeeded, %d failed",
        result.attempted, result.succeeded, len(result.failures),
    )
    return result


def _run_one(path: str, registry: RoleProfileRegistry, name_from_filename: bool):
    try:
        return _analyze_file(path, registry, name_from_filename)
    except Exception as e:
        return _describe_failure(path, e)


def _describe_failure(path: str, error: BaseException) -> str:
    if isinstance(error, (DocumentError, FileNotFoundError)):
        logger.warning("Skipping %s: %s", path, error)
        return str(error)
    logger.error("Unexpected error analyzing %s", path, exc_info=error)
    return f"{type(error).__name__}: {error}"
