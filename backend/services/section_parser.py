"""Resume section detection."""

import re

from models.schemas.analysis import SectionFlags
from services.exceptions import ensure_text

# Section synonyms; any whole-word occurrence anywhere in the text counts,
# including inside running prose
SECTION_PATTERNS: dict[str, list[str]] = {
    "summary": ["summary", "objective", "profile", "about me", "professional summary"],
    "experience": [
        "experience", "work experience", "employment",
        "professional experience", "work history",
    ],
    "education": [
        "education", "academic", "university", "college", "degree",
        "academic background",
    ],
    "skills": ["skills", "technical skills", "competencies", "expertise", "abilities"],
    "projects": ["projects", "personal projects", "portfolio", "work samples"],
    "certifications": ["certifications", "certificates", "credentials", "licenses"],
    "awards": ["awards", "honors", "achievements", "recognition"],
    "languages": ["languages", "spoken languages", "language proficiency"],
    "references": ["references", "recommendations", "referees"],
}

# Compile all synonyms into a single regex per section
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(re.escape(p) for p in patterns)
    _COMPILED[section] = re.compile(rf"\b(?:{combined})\b", re.IGNORECASE)


def detect_sections(text: str) -> SectionFlags:
    """Flag which of the nine standard sections the resume mentions."""
    text = ensure_text(text)
    return SectionFlags(
        **{section: bool(pattern.search(text)) for section, pattern in _COMPILED.items()}
    )


def present_sections(flags: SectionFlags) -> list[str]:
    """Names of the sections flagged present, in canonical order."""
    return [name for name in SECTION_PATTERNS if getattr(flags, name)]
