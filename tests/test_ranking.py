"""Tests for per-role ranking across a batch."""

import pytest

from resume_screener.analysis import analyze_document
from resume_screener.documents.models import ParsedDocument
from resume_screener.matching.ranking import (
    DocumentAnalysis,
    best_for_role,
    best_per_role,
    comparative_summary,
    rank_for_role,
)
from resume_screener.roles.registry import RoleCategory

NPS = RoleCategory.NPS


def make_analysis(source: str, text: str) -> DocumentAnalysis:
    return analyze_document(ParsedDocument(text=text, source=source))


@pytest.fixture
def tied_batch():
    return [
        make_analysis("first.txt", "Family nurse practitioner, MSN, primary care"),
        make_analysis("second.txt", "Call center agent"),
        make_analysis("third.txt", "Family nurse practitioner, MSN, primary care"),
    ]


class TestRankForRole:
    def test_sorted_descending(self, tied_batch):
        ranked = rank_for_role(NPS, tied_batch)
        scores = [c.match.score for c in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self, tied_batch):
        ranked = rank_for_role(NPS, tied_batch)
        assert ranked[0].match.score == ranked[1].match.score
        assert [c.document.source for c in ranked] == ["first.txt", "third.txt", "second.txt"]

    def test_empty_batch(self):
        assert rank_for_role(NPS, []) == []


class TestBestForRole:
    def test_first_of_tied_documents_wins(self, tied_batch):
        best = best_for_role(NPS, tied_batch)
        assert best.document.source == "first.txt"

    def test_empty_batch_returns_none(self):
        assert best_for_role(NPS, []) is None

    def test_zero_score_still_has_a_best(self):
        best = best_for_role(NPS, [make_analysis("blank.txt", "")])
        assert best is not None
        assert best.match.score == 0


class TestBestPerRole:
    def test_covers_every_role(self, tied_batch):
        result = best_per_role(tied_batch)
        assert set(result) == set(RoleCategory)

    def test_one_document_can_win_several_roles(self):
        strong = make_analysis(
            "strong.txt",
            "Customer service receptionist, certified medical assistant, "
            "nurse practitioner and registered nurse",
        )
        blank = make_analysis("blank.txt", "")
        result = best_per_role([blank, strong])
        assert all(best.document.source == "strong.txt" for best in result.values())

    def test_empty_batch(self):
        assert best_per_role([]) == {role: None for role in RoleCategory}


class TestComparativeSummary:
    def test_summary_for_winner(self, tied_batch):
        summary = comparative_summary(NPS, tied_batch)
        assert summary.best.document.source == "first.txt"
        assert len(summary.ranking) == 3
        assert summary.reasoning[-1].startswith("Overall")
        # tie at the top -> no margin claim
        assert summary.reasoning[0].startswith("Achieved the top score")

    def test_empty_batch(self):
        assert comparative_summary(NPS, []) is None

    def test_to_dict(self, tied_batch):
        data = comparative_summary(NPS, tied_batch).to_dict()
        assert data["role"] == "NPs"
        assert data["best"]["source"] == "first.txt"
        assert [r["source"] for r in data["ranking"]] == ["first.txt", "third.txt", "second.txt"]


class TestDocumentAnalysis:
    def test_match_for_missing_role(self):
        analysis = DocumentAnalysis(document=ParsedDocument(text=""), matches=())
        with pytest.raises(KeyError):
            analysis.match_for(NPS)
        assert analysis.best_match is None
