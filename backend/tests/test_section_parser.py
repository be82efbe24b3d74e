import pytest

from services.section_parser import (
    detect_sections,
    heading_sections,
    is_heading_like,
    match_heading,
)


SAMPLE_RESUME = """John Doe
john.doe@email.com | (555) 123-4567

Summary
Experienced software engineer with 5+ years building web applications.

Experience
Senior Software Engineer | TechCorp | 2021 - Present
• Built REST APIs serving 1M requests/day
• Led team of 5 engineers

Education
B.S. Computer Science | State University | 2019

Skills
Python, JavaScript, React, Docker, AWS, PostgreSQL, Git
"""


def test_detect_sections_in_document_order():
    assert detect_sections(SAMPLE_RESUME) == ["summary", "experience", "education", "skills"]


def test_detect_sections_unique():
    assert detect_sections("Skills\nPython\nSkills:\nGo") == ["skills"]


def test_detect_sections_empty():
    assert detect_sections("") == []


def test_heading_variants():
    assert match_heading("Work Experience") == "experience"
    assert match_heading("  PROFESSIONAL EXPERIENCE:  ") == "experience"
    assert match_heading("Technical Skills") == "skills"
    assert match_heading("About Me") == "summary"
    assert match_heading("Licenses & Certifications") == "certifications"


def test_compound_headings():
    text = (
        "Summary\nx\n"
        "Work Experience & Internships\nx\n"
        "Education and Certifications\nx\n"
        "Skills & Tools\nx"
    )
    assert detect_sections(text) == [
        "summary", "experience", "education", "certifications", "skills",
    ]


@pytest.mark.parametrize(
    "line, sections",
    [
        ("Soft Skills", ["skills"]),
        ("RELEVANT EXPERIENCE:", ["experience"]),
        ("Honors and Awards", ["achievements"]),
        ("Jane Doe", []),
    ],
)
def test_heading_sections(line, sections):
    assert heading_sections(line) == sections


def test_prose_is_not_a_heading():
    assert match_heading("I have experience with Python") is None
    assert heading_sections("I have experience with Python") == []
    assert heading_sections("Gained experience in 3 teams") == []
    assert heading_sections("Skills, tools and more") == []
    assert match_heading("") is None


def test_is_heading_like():
    assert is_heading_like("Work Experience & Internships")
    assert is_heading_like("Skills:")
    assert not is_heading_like("Built the billing service end to end for every region")
    assert not is_heading_like("• Led the team")
    assert not is_heading_like("")
