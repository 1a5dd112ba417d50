"""Structured output of the resume quality engine."""

from datetime import datetime

from pydantic import BaseModel


class ContactInfo(BaseModel):
    """Contact details pulled from the resume text. Any field may be absent."""
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    github: str | None = None
    portfolio: str | None = None


class SectionFlags(BaseModel):
    """Presence of each conventional resume section."""
    summary: bool = False
    experience: bool = False
    education: bool = False
    skills: bool = False
    projects: bool = False
    certifications: bool = False
    awards: bool = False
    languages: bool = False
    references: bool = False

    def count_present(self) -> int:
        return sum(1 for present in self.model_dump().values() if present)


class QualityScore(BaseModel):
    """Composite quality score.

    ``overall`` is the bucketed completeness score; ``structure``, ``content``
    and ``formatting`` are display values derived with their own formulas and
    are not components of ``overall``.
    """
    overall: int = 0
    structure: int = 0
    content: int = 0
    formatting: int = 0


class AnalysisResult(BaseModel):
    """Everything the engine derives from one resume text."""
    contact_info: ContactInfo = ContactInfo()
    sections: SectionFlags = SectionFlags()
    skills: list[str] = []
    quality_score: QualityScore = QualityScore()
    recommendations: list[str] = []


class AnalysisRecord(AnalysisResult):
    """A persisted analysis, one per analysis request."""
    id: int
    document_id: str
    created_at: datetime
