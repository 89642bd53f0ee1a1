"""
Document models - the shape of every record stored in MongoDB.

These play the role of a schema layer in front of the collections: a
document is built (and validated) here before it is written, so a bad enum
value or an empty required field never reaches the database.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from app.core.exceptions import ValidationError


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    employer = "employer"


class JobType(str, Enum):
    full_time = "Full-time"
    internship = "Internship"
    part_time = "Part-time"
    contract = "Contract"


class ApplicationStatus(str, Enum):
    submitted = "submitted"
    accepted = "accepted"
    rejected = "rejected"


class FollowRequestStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Required string fields must carry at least one character
RequiredStr = pydantic.constr(min_length=1)


# ============================================================
# DOCUMENTS
# ============================================================

class TimestampedDocument(BaseModel):
    model_config = ConfigDict(use_enum_values=True, extra="forbid")

    createdAt: datetime = Field(default_factory=utcnow)
    updatedAt: datetime = Field(default_factory=utcnow)


class UserDocument(TimestampedDocument):
    externalId: Optional[str] = None
    name: RequiredStr
    email: Optional[str] = None
    password: Optional[str] = None
    role: UserRole
    companyId: Optional[str] = None


class CompanyDocument(TimestampedDocument):
    name: RequiredStr
    about: RequiredStr


class JobDocument(TimestampedDocument):
    companyId: RequiredStr
    recruiterId: Optional[str] = None
    title: RequiredStr
    location: RequiredStr
    type: JobType
    description: RequiredStr
    salary_range: Optional[str] = None
    requirements: Optional[str] = None
    is_active: bool = True


class ApplicationDocument(TimestampedDocument):
    jobId: RequiredStr
    student: RequiredStr
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None
    status: ApplicationStatus = ApplicationStatus.submitted


class FollowRequestDocument(TimestampedDocument):
    student: RequiredStr
    companyId: RequiredStr
    status: FollowRequestStatus = FollowRequestStatus.pending


DocumentT = TypeVar("DocumentT", bound=TimestampedDocument)


def describe_errors(exc) -> str:
    """
    Flatten pydantic errors into one readable line, e.g. 'type: Input should be ...'.

    Accepts pydantic and FastAPI request validation errors; the "body"
    location prefix of the latter is dropped.
    """
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body") or "document"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


def build_document(model: Type[DocumentT], data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate data against a document model and return the dict to insert.

    Raises:
        ValidationError if any field is missing or invalid
    """
    try:
        document = model.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError(f"Validation failed: {describe_errors(exc)}") from exc
    return document.model_dump()


def validate_changes(model: Type[DocumentT], current: Dict[str, Any], changes: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a partial update by re-validating the whole record with the
    changes applied. Returns only the changed fields, normalized.
    """
    merged = {k: v for k, v in current.items() if k in model.model_fields}
    merged.update(changes)
    validated = build_document(model, merged)
    return {key: validated[key] for key in changes}
