"""Tests for text processing utilities."""

from resume_screener.utils.text_processing import (
    contains_term,
    extract_email,
    extract_experience_lines,
    extract_phone,
    extract_section,
    extract_skills,
    guess_name,
    lines_with_terms,
    split_lines,
)


class TestContainsTerm:
    def test_short_terms_need_word_boundaries(self):
        assert not contains_term("eager to learn", "rn")
        assert contains_term("rn, bsn", "rn")

    def test_long_terms_are_substrings(self):
        assert contains_term("certified nursing assistant", "nursing")
        assert contains_term("phlebotomist with phlebotomy training", "phlebotomy")


class TestExtractSection:
    def test_body_up_to_blank_line(self):
        text = "Jane Doe\n\nSkills:\nTyping, Excel\nCRM\n\nEducation:\nHigh school diploma"
        assert extract_section(text, ["skills"]).strip() == "Typing, Excel\nCRM"

    def test_heading_with_inline_body(self):
        text = "Skills: typing, excel\n\nOther"
        assert extract_section(text, ["skills"]).strip() == "typing, excel"

    def test_headings_tried_in_order(self):
        text = "Technical Skills\nEHR, billing"
        assert extract_section(text, ["skills", "technical skills"]).strip() == "EHR, billing"

    def test_missing_heading(self):
        assert extract_section("No sections here", ["education"]) is None

    def test_empty_body_is_missing(self):
        assert extract_section("Education:\n\nSomething else", ["education"]) is None

    def test_heading_must_start_a_line(self):
        assert extract_section("Years of experience in billing", ["experience"]) is None


class TestExtractSkills:
    def test_vocabulary_order(self):
        text = "Time management, customer service and patient care"
        assert extract_skills(text) == ["patient care", "customer service", "time management"]

    def test_case_insensitive(self):
        assert "ehr" in extract_skills("Charting in the EHR daily")

    def test_empty_text(self):
        assert extract_skills("") == []


class TestLineFilters:
    def test_split_lines(self):
        assert split_lines("  a \n\n b\n") == ["a", "b"]

    def test_lines_with_terms_and_limit(self):
        text = "BSN, State University\nAssociate degree\nMaster of Science\nDiploma"
        assert lines_with_terms(text, ["bsn", "degree", "master", "diploma"], limit=3) == [
            "BSN, State University",
            "Associate degree",
            "Master of Science",
        ]

    def test_experience_by_title_or_date(self):
        text = "Charge Nurse, Mercy Hospital\nJan 2020 - Present, front desk\nVolunteer work"
        assert extract_experience_lines(text) == [
            "Charge Nurse, Mercy Hospital",
            "Jan 2020 - Present, front desk",
        ]

    def test_experience_needs_context(self):
        assert extract_experience_lines("2019") == []

    def test_experience_capped(self):
        text = "\n".join(f"Medical Assistant at Clinic {i}" for i in range(8))
        assert len(extract_experience_lines(text)) == 5


class TestContactFields:
    def test_email(self):
        assert extract_email("Contact: jane.doe+cv@example.org today") == "jane.doe+cv@example.org"
        assert extract_email("no email") is None

    def test_phone(self):
        assert extract_phone("Call (555) 123-4567") == "(555) 123-4567"
        assert extract_phone("Call 555.123.4567") == "555.123.4567"
        assert extract_phone("no phone") is None

    def test_name_from_first_line(self):
        assert guess_name("\n  Jane Doe  \njane@example.com") == "Jane Doe"

    def test_name_skips_contact_line(self):
        assert guess_name("jane@example.com\nJane Doe") is None
        assert guess_name("555-123-4567\nJane Doe") is None
        assert guess_name("") is None
