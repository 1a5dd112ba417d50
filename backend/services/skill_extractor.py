"""Vocabulary-based skill extraction.

Each vocabulary entry is tested as a case-insensitive substring of the whole
resume. There is no word-boundary check, so "java" is reported for a resume
that only mentions "javascript" and "r" matches almost any text; callers
rely on this exact behavior for scoring.
"""

import logging

from services.exceptions import ensure_text

logger = logging.getLogger(__name__)

# Fixed skill vocabulary, all lowercase and without duplicates
SKILL_VOCABULARY: tuple[str, ...] = (
    # Programming languages
    "javascript", "typescript", "python", "java", "c++", "c#", "php", "ruby",
    "go", "rust", "swift", "kotlin", "scala", "perl", "r", "matlab", "sql",
    "html", "css", "sass", "less",
    # Frameworks & libraries
    "react", "angular", "vue", "nodejs", "express", "django", "flask",
    "spring", "rails", "laravel", "symfony", "jquery", "bootstrap",
    "tailwind", "material ui", "ant design",
    # Databases
    "mysql", "postgresql", "mongodb", "redis", "sqlite", "oracle",
    "sql server", "cassandra", "elasticsearch", "firebase", "supabase",
    # Cloud & DevOps
    "aws", "azure", "google cloud", "gcp", "docker", "kubernetes", "jenkins",
    "gitlab ci", "github actions", "terraform", "ansible", "nginx", "apache",
    # Tools
    "git", "github", "gitlab", "bitbucket", "jira", "slack", "trello",
    "vs code", "intellij", "figma", "sketch", "adobe", "photoshop",
    "illustrator",
    # Concepts
    "rest api", "graphql", "microservices", "serverless", "ci/cd", "agile",
    "scrum", "tdd", "bdd", "unit testing", "integration testing",
    "e2e testing",
    # Soft skills
    "leadership", "communication", "teamwork", "problem solving",
    "critical thinking", "project management", "time management",
    "collaboration", "adaptability",
)


def canonicalize_skill(skill: str) -> str:
    """Upper-case the first character only: "aws" -> "Aws", "ci/cd" -> "Ci/cd"."""
    return skill[:1].upper() + skill[1:]


def extract_skills(text: str) -> list[str]:
    """Return the sorted, canonicalized vocabulary entries found in text."""
    text_lower = ensure_text(text).lower()
    found = {canonicalize_skill(skill) for skill in SKILL_VOCABULARY if skill in text_lower}
    logger.debug("Matched %d vocabulary skills", len(found))
    return sorted(found)


def has_skill_containing(skills: list[str], *fragments: str) -> bool:
    """True if any skill name contains one of the lowercase fragments."""
    return any(fragment in skill.lower() for skill in skills for fragment in fragments)


def has_any_skill(skills: list[str], names: frozenset[str]) -> bool:
    """True if any skill name, lowercased, is one of names."""
    return any(skill.lower() in names for skill in skills)
