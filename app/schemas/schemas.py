"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Request fields are deliberately Optional: required-field and enum checks
live in the services so that every caller (HTTP or not) gets the same
ValidationError and the API answers 400 rather than FastAPI's 422.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

from app.services.record_merge import (
    ApplicationRecord, CanonicalApplication, CanonicalJob, JobRecord,
)


class DocumentResponse(BaseModel):
    """Base for stored records: MongoDB "_id" plus timestamps."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    createdAt: datetime
    updatedAt: datetime


# ============================================================
# USER SCHEMAS
# ============================================================

class UserUpsert(BaseModel):
    externalId: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = Field(None, description="student, employer or recruiter")

class UserResponse(DocumentResponse):
    externalId: Optional[str] = None
    name: str
    email: Optional[str] = None
    role: str
    companyId: Optional[str] = None


# ============================================================
# COMPANY SCHEMAS
# ============================================================

class CompanyCreate(BaseModel):
    name: Optional[str] = None
    about: Optional[str] = None

class CompanyUpdate(BaseModel):
    name: Optional[str] = None
    about: Optional[str] = None

class CompanyResponse(DocumentResponse):
    name: str
    about: str


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(BaseModel):
    companyId: Optional[str] = None
    company: Optional[str] = Field(None, description="Company name, used when companyId is absent")
    recruiterId: Optional[str] = None
    title: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = Field(None, description="Full-time, Internship, Part-time or Contract")
    description: Optional[str] = None
    salary_range: Optional[str] = None
    requirements: Optional[str] = None

class JobUpdate(BaseModel):
    title: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None

class JobResponse(DocumentResponse):
    companyId: str
    companyName: Optional[str] = None
    recruiterId: Optional[str] = None
    title: str
    location: str
    type: str
    description: str
    salary_range: Optional[str] = None
    requirements: Optional[str] = None
    is_active: bool = True


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class StatusUpdate(BaseModel):
    status: Optional[str] = None

class ApplicationResponse(DocumentResponse):
    jobId: str
    student: str
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None
    status: str


# ============================================================
# FOLLOW REQUEST SCHEMAS
# ============================================================

class FollowRequestCreate(BaseModel):
    student: Optional[str] = None
    companyId: Optional[str] = None

class FollowRequestResponse(DocumentResponse):
    student: str
    companyId: str
    status: str


# ============================================================
# RECORD MERGE SCHEMAS
# ============================================================

class ApplicationMergeRequest(BaseModel):
    records: List[ApplicationRecord] = []

class JobMergeRequest(BaseModel):
    records: List[JobRecord] = []

class ApplicationMergeResponse(BaseModel):
    records: List[CanonicalApplication]

class JobMergeResponse(BaseModel):
    records: List[CanonicalJob]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    detail: str

class HealthResponse(BaseModel):
    status: str
    mongodb: str
