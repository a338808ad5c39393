"""Tests for rule-based resume field extraction."""

import pytest

from models.schemas import ExtractedField, ResumeFields
from services.field_extractor import FieldConfidence, FieldExtractor, extract_fields


SAMPLE_RESUME = """João Silva
Email: joao@example.com
Telefone: (11) 98765-4321

Experiência:
- Desenvolvedor .NET Senior (2020-2024)

Habilidades: C#, ASP.NET Core, SQL Server, Azure, Docker
"""


def test_extract_email():
    fields = extract_fields("Email: joao@example.com")
    assert fields.email.value == "joao@example.com"
    assert fields.email.confidence == 0.99


def test_extract_empty_text_gives_defaults():
    fields = extract_fields("")
    assert fields == ResumeFields()
    assert fields.name == ExtractedField(value="", confidence=0.0)
    assert fields.email.value == ""
    assert fields.phone.confidence == 0.0
    assert fields.skills == []


def test_extract_first_email_wins():
    fields = extract_fields("Contact a.b@first.co or other@second.com")
    assert fields.email.value == "a.b@first.co"


def test_extract_email_requires_tld():
    assert extract_fields("user@localhost").email.value == ""


def test_extract_phone_with_area_code():
    fields = extract_fields(SAMPLE_RESUME)
    assert fields.phone.value == "(11) 98765-4321"
    assert fields.phone.confidence == 0.85


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Phone 98765-4321", "98765-4321"),
        ("Phone 912345678", "912345678"),
        ("Phone 1234 5678", ""),
        ("No digits here", ""),
    ],
)
def test_extract_phone_variants(text, expected):
    assert extract_fields(text).phone.value == expected


def test_extract_name_from_first_line():
    fields = extract_fields(SAMPLE_RESUME)
    assert fields.name.value == "João Silva"
    assert fields.name.confidence == 0.75


def test_extract_name_skips_blank_lines():
    fields = extract_fields("\n   \n  Jane Doe  \nEngineer")
    assert fields.name.value == "Jane Doe"


def test_extract_name_rejects_long_first_line():
    long_line = "Summary of a very long career spanning many roles and companies"
    fields = extract_fields(f"{long_line}\nJane Doe")
    assert fields.name == ExtractedField()


@pytest.mark.parametrize(
    "first_line,expected",
    [
        ("A" * 49, "A" * 49),
        ("A" * 50, ""),
        (" " * 5 + "B" * 46, ""),
    ],
)
def test_extract_name_length_limit_counts_raw_line(first_line, expected):
    assert extract_fields(f"{first_line}\nJane Doe").name.value == expected


def test_extract_name_splits_on_newline_only():
    assert extract_fields("Doc\x0cMore\nEngineer").name.value == "Doc\x0cMore"


def test_extract_skills_in_vocabulary_order():
    fields = extract_fields(SAMPLE_RESUME)
    names = [s.name for s in fields.skills]
    assert names == ["C#", ".NET", "ASP.NET", "SQL", "Azure", "Docker"]
    assert all(s.confidence == 0.90 for s in fields.skills)


def test_extract_skills_case_insensitive():
    fields = extract_fields("worked with PYTHON, react and docker")
    assert [s.name for s in fields.skills] == ["Python", "Docker", "React"]


def test_custom_vocabulary_and_confidence():
    extractor = FieldExtractor(
        skills=["Go", "Rust", "go"],
        confidence=FieldConfidence(skill=0.5, email=0.9),
    )
    fields = extractor.extract("Rust and Go developer, dev@rust.org")
    assert [s.name for s in fields.skills] == ["Go", "Rust"]
    assert fields.skills[0].confidence == 0.5
    assert fields.email.confidence == 0.9


def test_empty_vocabulary_finds_no_skills():
    assert FieldExtractor(skills=[]).extract(SAMPLE_RESUME).skills == []


def test_confidence_out_of_range_rejected():
    with pytest.raises(ValueError):
        FieldConfidence(email=1.5)
