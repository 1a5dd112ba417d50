from datetime import date, datetime

from pydantic import BaseModel

from models.schemas.analysis import AnalysisRecord, AnalysisResult

__all__ = [
    "AnalysisRecord",
    "AnalysisResult",
    "ApplicationResponse",
    "CoverLetterResponse",
    "DocumentResponse",
    "HealthResponse",
    "JobStatusResponse",
]


class HealthResponse(BaseModel):
    status: str = "ok"
    llm_configured: bool = False
    database_ok: bool = False


class DocumentResponse(BaseModel):
    id: str
    filename: str
    file_size: int = 0
    text_length: int = 0
    estimated_pages: int = 1
    analysis_status: str = "pending"
    analysis_completed_at: datetime | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class CoverLetterResponse(BaseModel):
    cover_letter: str


class JobStatusResponse(BaseModel):
    key: str
    label: str
    category: str | None = None
    description: str | None = None
    sort_order: int = 0
    hidden: bool = False

    model_config = {"from_attributes": True}


class ApplicationResponse(BaseModel):
    id: int
    title: str
    company: str
    status: str
    applied_date: date | None = None
    job_url: str | None = None
    description: str | None = None
    salary_min: int | None = None
    salary_max: int | None = None
    location: str | None = None
    notes: str | None = None
    document_id: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
