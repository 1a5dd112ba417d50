"""Document intake and per-document analysis bookkeeping."""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.schemas.analysis import AnalysisRecord
from models.tables import Document
from services import pdf_parser, resume_analyzer
from services.exceptions import DocumentNotFoundError, DocumentTextMissingError

logger = logging.getLogger(__name__)


def create_document(db: Session, filename: str, content: bytes) -> Document:
    """Extract text from an uploaded PDF and store it as a new document.

    pdfplumber errors propagate so the caller can reject the upload.
    """
    text, pages = pdf_parser.extract_text_and_pages(content)
    document = Document(
        filename=filename,
        file_size=len(content),
        extracted_text=text,
        text_length=len(text),
        estimated_pages=pages,
    )
    try:
        db.add(document)
        db.commit()
        db.refresh(document)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to store document %s: %s", filename, e)
        raise
    logger.info("Stored document %s (%d chars, %d pages)", document.id, len(text), pages)
    return document


def get_document(db: Session, document_id: str) -> Document:
    document = db.get(Document, document_id)
    if document is None:
        raise DocumentNotFoundError(document_id)
    return document


def analyze_document(db: Session, document_id: str) -> AnalysisRecord:
    """Analyze a stored document's text and mark the document as analyzed.

    The analysis row and the status change are committed in one transaction.
    """
    document = get_document(db, document_id)
    if not document.extracted_text or not document.extracted_text.strip():
        raise DocumentTextMissingError(document_id)

    record = resume_analyzer.analyze(db, document.id, document.extracted_text, commit=False)

    document.analysis_status = "completed"
    document.analysis_completed_at = datetime.now(timezone.utc)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to store analysis for %s: %s", document_id, e)
        raise
    return record
