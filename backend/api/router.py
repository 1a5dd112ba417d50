import logging

from fastapi import APIRouter, Depends, File, HTTPException, Query, Request, Response, UploadFile
from fastapi.concurrency import run_in_threadpool
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.dependencies import get_db
from config import settings
from database import ping
from models.requests import (
    ApplicationCreate,
    ApplicationUpdate,
    CoverLetterRequest,
    QuickAnalyzeRequest,
)
from models.responses import (
    AnalysisRecord,
    AnalysisResult,
    ApplicationResponse,
    CoverLetterResponse,
    DocumentResponse,
    HealthResponse,
    JobStatusResponse,
)
from services import applications, cover_letter, documents, resume_analyzer
from services.exceptions import (
    ApplicationNotFoundError,
    DocumentNotFoundError,
    DocumentTextMissingError,
    InvalidApplicationError,
    JobStatusNotFoundError,
    LLMServiceError,
)

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

# Routes that only touch the database or the CPU-bound engine are plain
# functions; FastAPI runs them in its threadpool.


def _document_or_404(db: Session, document_id: str):
    try:
        return documents.get_document(db, document_id)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")


def _application_or_404(db: Session, application_id: int):
    try:
        return applications.get_application(db, application_id)
    except ApplicationNotFoundError:
        raise HTTPException(status_code=404, detail="Application not found")


@router.get("/health", response_model=HealthResponse)
def health(db: Session = Depends(get_db)):
    return HealthResponse(
        status="ok",
        llm_configured=bool(settings.ollama_api_key),
        database_ok=ping(db),
    )


@router.post("/documents", response_model=DocumentResponse, status_code=201)
@limiter.limit(settings.rate_limit)
async def upload_document(
    request: Request,
    resume_file: UploadFile = File(...),
    db: Session = Depends(get_db),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    # PDF parsing and the insert block; keep them off the event loop
    try:
        document = await run_in_threadpool(
            documents.create_document, db, resume_file.filename, content
        )
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to store document")
    except Exception as e:
        logger.warning("Could not parse PDF %s: %s", resume_file.filename, e)
        raise HTTPException(status_code=400, detail="Could not parse PDF file")

    return DocumentResponse.model_validate(document)


@router.get("/documents/{document_id}", response_model=DocumentResponse)
def get_document(document_id: str, db: Session = Depends(get_db)):
    return DocumentResponse.model_validate(_document_or_404(db, document_id))


@router.post("/documents/{document_id}/analysis", response_model=AnalysisRecord, status_code=201)
@limiter.limit(settings.rate_limit)
def analyze_document(request: Request, document_id: str, db: Session = Depends(get_db)):
    try:
        return documents.analyze_document(db, document_id)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    except DocumentTextMissingError:
        raise HTTPException(
            status_code=400,
            detail="Document text not found. Please process the document first.",
        )
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to store analysis")


@router.get("/documents/{document_id}/analysis", response_model=AnalysisRecord)
def get_document_analysis(document_id: str, db: Session = Depends(get_db)):
    _document_or_404(db, document_id)
    record = resume_analyzer.get_analysis(db, document_id)
    if record is None:
        raise HTTPException(status_code=404, detail="No analysis found for this document")
    return record


@router.post("/analyze/quick", response_model=AnalysisResult)
@limiter.limit(settings.rate_limit)
def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return resume_analyzer.analyze_text(body.resume_text)


@router.get("/job-statuses", response_model=list[JobStatusResponse])
def list_job_statuses(
    include_hidden: bool = Query(default=False),
    category: str | None = Query(default=None, max_length=50),
    db: Session = Depends(get_db),
):
    return applications.list_job_statuses(db, include_hidden=include_hidden, category=category)


@router.get("/job-statuses/{key}", response_model=JobStatusResponse)
def get_job_status(key: str, db: Session = Depends(get_db)):
    try:
        return applications.get_job_status(db, key)
    except JobStatusNotFoundError:
        raise HTTPException(status_code=404, detail="Job status not found")


@router.get("/applications", response_model=list[ApplicationResponse])
def list_applications(
    status: str | None = Query(default=None, max_length=50),
    db: Session = Depends(get_db),
):
    return applications.list_applications(db, status=status)


@router.post("/applications", response_model=ApplicationResponse, status_code=201)
@limiter.limit(settings.rate_limit)
def create_application(request: Request, body: ApplicationCreate, db: Session = Depends(get_db)):
    try:
        return applications.create_application(db, body)
    except InvalidApplicationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to store application")


@router.get("/applications/{application_id}", response_model=ApplicationResponse)
def get_application(application_id: int, db: Session = Depends(get_db)):
    return _application_or_404(db, application_id)


@router.patch("/applications/{application_id}", response_model=ApplicationResponse)
def update_application(
    application_id: int, body: ApplicationUpdate, db: Session = Depends(get_db)
):
    try:
        return applications.update_application(db, application_id, body)
    except ApplicationNotFoundError:
        raise HTTPException(status_code=404, detail="Application not found")
    except InvalidApplicationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to update application")


@router.delete("/applications/{application_id}", status_code=204)
def delete_application(application_id: int, db: Session = Depends(get_db)):
    _application_or_404(db, application_id)
    try:
        applications.delete_application(db, application_id)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to delete application")
    return Response(status_code=204)


@router.post("/cover-letter", response_model=CoverLetterResponse)
@limiter.limit(settings.rate_limit)
async def generate_cover_letter(request: Request, body: CoverLetterRequest):
    try:
        letter = await cover_letter.generate_cover_letter(
            body.resume_text,
            body.job_description,
            company_name=body.company_name,
            role_title=body.role_title,
        )
    except LLMServiceError as e:
        logger.error("Cover letter generation failed: %s", e)
        raise HTTPException(status_code=502, detail="AI service unavailable")
    return CoverLetterResponse(cover_letter=letter)
