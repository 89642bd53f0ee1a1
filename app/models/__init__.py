"""
Models module - document models for the MongoDB collections.
"""
from app.models.documents import (
    ApplicationDocument,
    ApplicationStatus,
    CompanyDocument,
    FollowRequestDocument,
    FollowRequestStatus,
    JobDocument,
    JobType,
    UserDocument,
    UserRole,
    build_document,
    validate_changes,
)

__all__ = [
    "ApplicationDocument",
    "ApplicationStatus",
    "CompanyDocument",
    "FollowRequestDocument",
    "FollowRequestStatus",
    "JobDocument",
    "JobType",
    "UserDocument",
    "UserRole",
    "build_document",
    "validate_changes",
]
