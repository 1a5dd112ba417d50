"""Pydantic contracts shared by the engine, persistence and API layers."""

from models.schemas.analysis import (
    AnalysisRecord,
    AnalysisResult,
    ContactInfo,
    QualityScore,
    SectionFlags,
)

__all__ = [
    "AnalysisRecord",
    "AnalysisResult",
    "ContactInfo",
    "QualityScore",
    "SectionFlags",
]
