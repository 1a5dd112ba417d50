import pytest

from services.exceptions import InvalidResumeTextError
from services.section_parser import SECTION_PATTERNS, detect_sections, present_sections


SAMPLE_RESUME = """John Doe
john.doe@email.com | (555) 123-4567

Summary
Experienced software engineer building web applications.

Experience
Senior Software Engineer | TechCorp | 2021 - Present

Education
B.S. Computer Science | State University | 2019

Skills
Python, JavaScript, React, Docker, AWS, PostgreSQL, Git
"""


def test_detect_sections_sample():
    flags = detect_sections(SAMPLE_RESUME)
    assert flags.summary
    assert flags.experience
    assert flags.education
    assert flags.skills
    assert not flags.projects
    assert not flags.certifications
    assert not flags.awards
    assert not flags.languages
    assert not flags.references


def test_detect_sections_empty():
    flags = detect_sections("")
    assert flags.count_present() == 0


def test_detect_sections_synonyms():
    flags = detect_sections(
        "About me\nWork history\nAcademic background\nCore competencies\n"
        "Work samples\nLicenses\nHonors\nSpoken languages\nReferees"
    )
    assert flags.count_present() == 9


def test_detect_sections_case_insensitive():
    assert detect_sections("PROFESSIONAL EXPERIENCE").experience
    assert detect_sections("certifications:").certifications


def test_detect_sections_whole_words_only():
    flags = detect_sections("My skillset includes awardsmanship")
    assert not flags.skills
    assert not flags.awards


def test_detect_sections_matches_inside_prose():
    flags = detect_sections("I have experience leading teams at a university lab.")
    assert flags.experience
    assert flags.education


def test_every_section_has_synonyms():
    assert len(SECTION_PATTERNS) == 9
    assert all(3 <= len(patterns) <= 6 for patterns in SECTION_PATTERNS.values())


def test_present_sections_order():
    flags = detect_sections("References\nSkills\nSummary")
    assert present_sections(flags) == ["summary", "skills", "references"]


def test_detect_sections_rejects_non_string():
    with pytest.raises(InvalidResumeTextError):
        detect_sections(["Experience"])
