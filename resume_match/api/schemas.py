"""
Request and response models for the resume API.
"""

from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime


class ResumeIngestRequest(BaseModel):
    text: str
    name: Optional[str] = None
    email: Optional[str] = None
    file_name: Optional[str] = None

    @field_validator('name', 'email', 'file_name')
    @classmethod
    def blank_to_none(cls, v):
        if v is None:
            return v
        return v.strip() or None


class ResumeIngestResponse(BaseModel):
    success: bool
    id: str
    snippet: str


class ResumeSummary(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    file_name: Optional[str] = None
    created_at: Optional[datetime] = None


class ResumeDetailResponse(ResumeSummary):
    text: str


class ResumeListResponse(BaseModel):
    resumes: List[ResumeSummary]


class SearchRequest(BaseModel):
    # Left unvalidated here so empty queries and bad counts surface as 400s from the service
    query: str = ""
    top_k: Optional[int] = None


class SearchResult(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    file_name: Optional[str] = None
    score: float
    snippet: str


class HealthResponse(BaseModel):
    status: str
    version: str
    store_health: bool
    resume_count: int
    embed_provider: str
    embed_dimension: int


class ErrorResponse(BaseModel):
    detail: str
