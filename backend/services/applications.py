"""Job application tracking and the job status catalogue."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.requests import ApplicationCreate, ApplicationUpdate
from models.tables import Document, JobApplication, JobStatusType
from services.exceptions import (
    ApplicationNotFoundError,
    DocumentNotFoundError,
    InvalidApplicationError,
    JobStatusNotFoundError,
)

logger = logging.getLogger(__name__)

# (key, label, category, description), in board order
DEFAULT_JOB_STATUSES = (
    ("saved", "Saved", "active", "Bookmarked, not applied yet"),
    ("applied", "Applied", "active", "Application submitted"),
    ("interview", "Interview", "active", "Interviewing with the company"),
    ("offer", "Offer", "success", "Offer received"),
    ("rejected", "Rejected", "closed", "Application declined"),
)

_REQUIRED_FIELDS = ("title", "company", "status")


def seed_job_statuses(db: Session) -> int:
    """Insert the default statuses that are missing. Returns how many were added."""
    existing = set(db.scalars(select(JobStatusType.key)))
    added = 0
    for order, (key, label, category, description) in enumerate(DEFAULT_JOB_STATUSES, start=1):
        if key in existing:
            continue
        db.add(JobStatusType(
            key=key, label=label, category=category,
            description=description, sort_order=order,
        ))
        added += 1
    if added:
        _commit(db, "seed job statuses")
        logger.info("Seeded %d job statuses", added)
    return added


def list_job_statuses(
    db: Session, include_hidden: bool = False, category: str | None = None
) -> list[JobStatusType]:
    query = select(JobStatusType)
    if not include_hidden:
        query = query.where(JobStatusType.hidden.is_(False))
    if category:
        query = query.where(JobStatusType.category == category)
    return list(db.scalars(query.order_by(JobStatusType.sort_order, JobStatusType.id)))


def get_job_status(db: Session, key: str) -> JobStatusType:
    status = db.scalars(select(JobStatusType).where(JobStatusType.key == key)).first()
    if status is None:
        raise JobStatusNotFoundError(key)
    return status


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to %s: %s", action, e)
        raise


def _check_references(db: Session, values: dict) -> None:
    """Validate the status key and the linked document of an application write."""
    for field in _REQUIRED_FIELDS:
        if field in values and values[field] is None:
            raise InvalidApplicationError(f"{field} cannot be empty")
    if "status" in values:
        try:
            get_job_status(db, values["status"])
        except JobStatusNotFoundError:
            raise InvalidApplicationError(f"unknown job status: {values['status']!r}")
    if values.get("document_id") and db.get(Document, values["document_id"]) is None:
        raise DocumentNotFoundError(values["document_id"])


def create_application(db: Session, data: ApplicationCreate) -> JobApplication:
    values = data.model_dump()
    _check_references(db, values)
    application = JobApplication(**values)
    db.add(application)
    _commit(db, f"store application at {data.company}")
    db.refresh(application)
    logger.info("Stored application %d (%s at %s)", application.id, data.title, data.company)
    return application


def list_applications(db: Session, status: str | None = None) -> list[JobApplication]:
    """Return applications newest first, optionally only those in one status."""
    query = select(JobApplication)
    if status:
        query = query.where(JobApplication.status == status)
    return list(db.scalars(
        query.order_by(JobApplication.created_at.desc(), JobApplication.id.desc())
    ))


def get_application(db: Session, application_id: int) -> JobApplication:
    application = db.get(JobApplication, application_id)
    if application is None:
        raise ApplicationNotFoundError(application_id)
    return application


def update_application(
    db: Session, application_id: int, data: ApplicationUpdate
) -> JobApplication:
    application = get_application(db, application_id)
    values = data.model_dump(exclude_unset=True)
    if not values:
        raise InvalidApplicationError("No fields to update")
    _check_references(db, values)

    salary_min = values.get("salary_min", application.salary_min)
    salary_max = values.get("salary_max", application.salary_max)
    if salary_min is not None and salary_max is not None and salary_min > salary_max:
        raise InvalidApplicationError("salary_min must not exceed salary_max")

    for field, value in values.items():
        setattr(application, field, value)
    _commit(db, f"update application {application_id}")
    db.refresh(application)
    return application


def delete_application(db: Session, application_id: int) -> None:
    application = get_application(db, application_id)
    db.delete(application)
    _commit(db, f"delete application {application_id}")
    logger.info("Deleted application %d", application_id)
