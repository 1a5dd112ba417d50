"""Resume quality analysis pipeline.

Pipeline:
1. Contact extraction (name, email, phone, profile links)
2. Skill extraction against the fixed vocabulary
3. Section detection
4. Quality scoring (overall + display sub-scores)
5. Recommendation generation
6. Persist one resume_analysis row per request (analyze only)

Steps 1-5 are pure; analyze_text can be called from anywhere without a
database. Persistence errors are logged and re-raised, never retried.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import settings
from models.schemas.analysis import (
    AnalysisRecord,
    AnalysisResult,
    ContactInfo,
    QualityScore,
    SectionFlags,
)
from models.tables import ResumeAnalysis
from services.contact_extractor import extract_contact_info
from services.exceptions import ensure_text
from services.quality_scorer import compute_quality_score
from services.recommendations import generate_recommendations
from services.section_parser import detect_sections, present_sections
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)


def analyze_text(text: str, name_policy: str | None = None) -> AnalysisResult:
    """Run the engine over raw resume text. Raises InvalidResumeTextError for non-str input."""
    text = ensure_text(text)
    policy = name_policy or settings.name_policy

    # --- Layer 1: Signals ---
    contact_info = extract_contact_info(text, name_policy=policy)
    skills = extract_skills(text)
    sections = detect_sections(text)

    # --- Layer 2: Score ---
    quality_score = compute_quality_score(text, contact_info, sections, skills)

    # --- Layer 3: Recommendations ---
    recommendations = generate_recommendations(
        contact_info, sections, skills, quality_score.overall
    )

    logger.debug(
        "Analyzed %d chars: score=%d sections=%s skills=%d",
        len(text), quality_score.overall, present_sections(sections), len(skills),
    )
    return AnalysisResult(
        contact_info=contact_info,
        sections=sections,
        skills=skills,
        quality_score=quality_score,
        recommendations=recommendations,
    )


def _to_record(row: ResumeAnalysis) -> AnalysisRecord:
    return AnalysisRecord(
        id=row.id,
        document_id=row.document_id,
        contact_info=ContactInfo(**row.contact_info),
        sections=SectionFlags(**row.sections_detected),
        skills=list(row.skills),
        quality_score=QualityScore(**row.quality_score),
        recommendations=list(row.recommendations),
        created_at=row.created_at,
    )


def analyze(
    db: Session, document_id: str, extracted_text: str, commit: bool = True
) -> AnalysisRecord:
    """Analyze a document's text and insert a new analysis record for it.

    With commit=False the row is only flushed, leaving the transaction open
    for the caller to commit together with its own changes.
    """
    result = analyze_text(extracted_text)

    row = ResumeAnalysis(
        document_id=document_id,
        contact_info=result.contact_info.model_dump(),
        sections_detected=result.sections.model_dump(),
        skills=result.skills,
        quality_score=result.quality_score.model_dump(),
        recommendations=result.recommendations,
    )
    try:
        db.add(row)
        if commit:
            db.commit()
            db.refresh(row)
        else:
            db.flush()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to store analysis for document %s: %s", document_id, e)
        raise

    logger.info(
        "Stored analysis %d for document %s (score %d)",
        row.id, document_id, result.quality_score.overall,
    )
    return _to_record(row)


def get_analysis(db: Session, document_id: str) -> AnalysisRecord | None:
    """Return the most recent analysis for a document, or None."""
    row = db.scalars(
        select(ResumeAnalysis)
        .where(ResumeAnalysis.document_id == document_id)
        .order_by(ResumeAnalysis.id.desc())
        .limit(1)
    ).first()
    return _to_record(row) if row else None
