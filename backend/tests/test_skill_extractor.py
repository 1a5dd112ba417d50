"""Tests for vocabulary skill extraction."""

import pytest

from services.exceptions import InvalidResumeTextError
from services.skill_extractor import (
    SKILL_VOCABULARY,
    canonicalize_skill,
    extract_skills,
    has_any_skill,
    has_skill_containing,
)


def test_vocabulary_has_no_duplicates():
    assert len(SKILL_VOCABULARY) == len(set(SKILL_VOCABULARY))
    assert all(skill == skill.lower() for skill in SKILL_VOCABULARY)


def test_extract_skills_finds_python():
    skills = extract_skills("Experience with Python and Docker")
    assert "Python" in skills
    assert "Docker" in skills


def test_extract_skills_first_letter_only_capitalization():
    skills = extract_skills("Deployed on AWS and Google Cloud with CI/CD")
    assert "Aws" in skills
    assert "AWS" not in skills
    assert "Google cloud" in skills
    assert "Ci/cd" in skills


def test_extract_skills_matches_substrings():
    skills = extract_skills("Proficient in JavaScript")
    assert "Javascript" in skills
    assert "Java" in skills  # no word boundaries


def test_extract_skills_sorted_and_unique():
    skills = extract_skills("python PYTHON Python react React git")
    assert skills == sorted(set(skills))
    assert skills.count("Python") == 1


def test_extract_skills_multiword_soft_skills():
    skills = extract_skills("Strong problem solving and time management")
    assert "Problem solving" in skills
    assert "Time management" in skills


def test_extract_skills_empty():
    assert extract_skills("") == []


def test_extract_skills_subset_of_vocabulary():
    canonical = {canonicalize_skill(s) for s in SKILL_VOCABULARY}
    skills = extract_skills("Rust, Go, Kubernetes, Terraform, Jira, leadership, nonsense words")
    assert set(skills) <= canonical


def test_extract_skills_rejects_non_string():
    with pytest.raises(InvalidResumeTextError):
        extract_skills(42)


def test_canonicalize_skill():
    assert canonicalize_skill("c++") == "C++"
    assert canonicalize_skill("vs code") == "Vs code"
    assert canonicalize_skill("") == ""


def test_has_skill_containing():
    assert has_skill_containing(["Javascript"], "javascript", "python")
    assert not has_skill_containing(["Typescript", "Go"], "javascript", "python")


def test_has_any_skill_exact_names():
    assert has_any_skill(["Nodejs"], frozenset({"nodejs"}))
    assert not has_any_skill(["Gcp"], frozenset({"aws", "google cloud"}))
