from datetime import date

from pydantic import BaseModel, Field, model_validator


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class CoverLetterRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., max_length=10000, description="Job description text")
    company_name: str | None = Field(None, max_length=200)
    role_title: str | None = Field(None, max_length=200)


class _SalaryRange(BaseModel):
    salary_min: int | None = Field(None, ge=0)
    salary_max: int | None = Field(None, ge=0)

    @model_validator(mode="after")
    def validate_salary_range(self):
        if (
            self.salary_min is not None
            and self.salary_max is not None
            and self.salary_min > self.salary_max
        ):
            raise ValueError("salary_min must not exceed salary_max")
        return self


class ApplicationCreate(_SalaryRange):
    title: str = Field(..., min_length=1, max_length=255, description="Job title")
    company: str = Field(..., min_length=1, max_length=255)
    status: str = Field("saved", max_length=50, description="Job status key")
    applied_date: date | None = None
    job_url: str | None = Field(None, max_length=500)
    description: str | None = Field(None, max_length=10000)
    location: str | None = Field(None, max_length=255)
    notes: str | None = Field(None, max_length=5000)
    document_id: str | None = Field(None, description="Resume document sent with the application")


class ApplicationUpdate(_SalaryRange):
    """Partial update; only the fields present in the body are written."""
    title: str | None = Field(None, min_length=1, max_length=255)
    company: str | None = Field(None, min_length=1, max_length=255)
    status: str | None = Field(None, max_length=50)
    applied_date: date | None = None
    job_url: str | None = Field(None, max_length=500)
    description: str | None = Field(None, max_length=10000)
    location: str | None = Field(None, max_length=255)
    notes: str | None = Field(None, max_length=5000)
    document_id: str | None = None
