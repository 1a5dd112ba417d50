"""Heuristic resume quality scoring.

overall = base content + contact + structure + content depth + extra sections,
with bucket maxima 20 + 20 + 30 + 20 + 10 = 100.

The structure/content/formatting sub-scores use separate formulas and are
reported as-is for display; they do not feed into ``overall``.
"""

from models.schemas.analysis import ContactInfo, QualityScore, SectionFlags

MAX_SCORE = 100

# Base content presence
BASE_CONTENT_MIN_LENGTH = 100
BASE_CONTENT_POINTS = 20

# Contact completeness (max 20)
CONTACT_FIELD_POINTS = 5

# Structure (max 30)
STRUCTURE_POINTS: dict[str, int] = {
    "summary": 5,
    "experience": 10,
    "education": 10,
    "skills": 5,
}

# Content depth (max 20)
LENGTH_THRESHOLDS = (500, 1000)
SKILL_COUNT_THRESHOLDS = (5, 10)
DEPTH_POINTS = 5

# Additional sections (max 10)
ADDITIONAL_SECTION_POINTS: dict[str, int] = {
    "projects": 3,
    "certifications": 3,
    "awards": 2,
    "languages": 2,
}

# Sub-score formulas
SECTION_SUBSCORE_POINTS = 10
CHARS_PER_CONTENT_POINT = 50
CONTENT_SUBSCORE_CAP = 40
SKILL_SUBSCORE_POINTS = 2
FORMATTING_SUBSCORE_CAP = 20


def _clamp(value: int) -> int:
    return min(MAX_SCORE, max(0, value))


def _contact_points(contact: ContactInfo) -> int:
    present = [
        contact.email,
        contact.phone,
        contact.name,
        contact.linkedin or contact.github,
    ]
    return CONTACT_FIELD_POINTS * sum(1 for value in present if value)


def _section_points(sections: SectionFlags, points: dict[str, int]) -> int:
    return sum(value for name, value in points.items() if getattr(sections, name))


def _depth_points(text_length: int, skill_count: int) -> int:
    score = sum(DEPTH_POINTS for threshold in LENGTH_THRESHOLDS if text_length > threshold)
    score += sum(DEPTH_POINTS for threshold in SKILL_COUNT_THRESHOLDS if skill_count >= threshold)
    return score


def compute_overall_score(
    text: str,
    contact: ContactInfo,
    sections: SectionFlags,
    skills: list[str],
) -> int:
    """Sum the five point buckets and cap the result at 100."""
    score = BASE_CONTENT_POINTS if len(text) > BASE_CONTENT_MIN_LENGTH else 0
    score += _contact_points(contact)
    score += _section_points(sections, STRUCTURE_POINTS)
    score += _depth_points(len(text), len(skills))
    score += _section_points(sections, ADDITIONAL_SECTION_POINTS)
    return _clamp(score)


def compute_sub_scores(text: str, sections: SectionFlags, skills: list[str]) -> dict[str, int]:
    """Display-only sub-scores: structure, content and formatting."""
    structure = sections.count_present() * SECTION_SUBSCORE_POINTS
    content = min(len(text) // CHARS_PER_CONTENT_POINT, CONTENT_SUBSCORE_CAP)
    formatting = min(len(skills) * SKILL_SUBSCORE_POINTS, FORMATTING_SUBSCORE_CAP)
    return {
        "structure": _clamp(structure),
        "content": _clamp(content),
        "formatting": _clamp(formatting),
    }


def compute_quality_score(
    text: str,
    contact: ContactInfo,
    sections: SectionFlags,
    skills: list[str],
) -> QualityScore:
    return QualityScore(
        overall=compute_overall_score(text, contact, sections, skills),
        **compute_sub_scores(text, sections, skills),
    )
