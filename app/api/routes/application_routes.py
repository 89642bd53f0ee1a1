"""
Application Routes

GET /applications - List applications, filter by jobId / student / jobIds (comma-separated)
GET /applications/{application_id} - Get one application
POST /applications - Apply (multipart: jobId, studentId, cover_letter, resume file)
PUT /applications/{application_id} - Update status
DELETE /applications/{application_id} - Delete application
POST /applications/merge - Normalize and merge primary/legacy application records
"""

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from typing import List, Optional

from app.api.deps import get_application_service
from app.services.application_service import ApplicationService, ResumeUpload
from app.services.record_merge import merge_applications
from app.schemas.schemas import (
    ApplicationResponse, ApplicationMergeRequest, ApplicationMergeResponse,
    MessageResponse, StatusUpdate
)

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.get("", response_model=List[ApplicationResponse])
def list_applications(
    jobId: Optional[str] = Query(None),
    student: Optional[str] = Query(None),
    jobIds: Optional[str] = Query(None, description="Comma-separated job ids"),
    applications: ApplicationService = Depends(get_application_service)
):
    return applications.list_applications(job_id=jobId, student=student, job_ids=jobIds)


@router.post("/merge", response_model=ApplicationMergeResponse)
def merge_application_records(data: ApplicationMergeRequest):
    """
    Merge application rows from this API ("primary") and the legacy store
    ("legacy"). Primary rows win when ids collide.
    """
    return ApplicationMergeResponse(records=merge_applications(data.records))


@router.get("/{application_id}", response_model=ApplicationResponse)
def get_application(application_id: str, applications: ApplicationService = Depends(get_application_service)):
    return applications.get_application(application_id)


@router.post("", response_model=ApplicationResponse, status_code=201)
def create_application(
    jobId: Optional[str] = Form(None),
    studentId: Optional[str] = Form(None),
    cover_letter: Optional[str] = Form(None),
    resume: Optional[UploadFile] = File(None),
    applications: ApplicationService = Depends(get_application_service)
):
    """
    Apply to a job. A student can apply to each job once; a second attempt
    returns 409. The optional resume is stored and exposed as resume_url.
    """
    upload = None
    if resume is not None and resume.filename:
        upload = ResumeUpload(filename=resume.filename, content=resume.file.read())
    return applications.create_application(jobId, studentId, cover_letter, upload)


@router.put("/{application_id}", response_model=ApplicationResponse)
def update_application(
    application_id: str,
    data: StatusUpdate,
    applications: ApplicationService = Depends(get_application_service)
):
    """Update status: submitted, accepted or rejected."""
    return applications.update_status(application_id, data.status)


@router.delete("/{application_id}", response_model=MessageResponse)
def delete_application(application_id: str, applications: ApplicationService = Depends(get_application_service)):
    applications.delete_application(application_id)
    return MessageResponse(message="Application deleted successfully")
