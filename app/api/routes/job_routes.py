"""
Job Routes

GET /jobs - List jobs, filter by companyId / recruiterId
GET /jobs/{job_id} - Get job details (with companyName)
POST /jobs - Create job (companyId, or company name to find/create)
PUT /jobs/{job_id} - Update title/location/type/description
DELETE /jobs/{job_id} - Delete job (applications are left in place)
POST /jobs/merge - Normalize and merge primary/legacy job records
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from app.api.deps import get_job_service
from app.services.job_service import JobService
from app.services.record_merge import merge_jobs
from app.schemas.schemas import (
    JobCreate, JobUpdate, JobResponse, JobMergeRequest, JobMergeResponse, MessageResponse
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=List[JobResponse])
def list_jobs(
    companyId: Optional[str] = Query(None),
    recruiterId: Optional[str] = Query(None),
    jobs: JobService = Depends(get_job_service)
):
    """List jobs, newest first, each with its company's name attached."""
    return jobs.list_jobs(company_id=companyId, recruiter_id=recruiterId)


@router.post("/merge", response_model=JobMergeResponse)
def merge_job_records(data: JobMergeRequest):
    """
    Merge job rows from this API ("primary") and the legacy store ("legacy").
    Primary rows win when ids collide.
    """
    return JobMergeResponse(records=merge_jobs(data.records))


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: str, jobs: JobService = Depends(get_job_service)):
    return jobs.get_job(job_id)


@router.post("", response_model=JobResponse, status_code=201)
def create_job(job: JobCreate, jobs: JobService = Depends(get_job_service)):
    """
    Create a new job posting.

    If companyId is missing, the company is looked up by name and created
    when it does not exist yet.
    """
    return jobs.create_job(job.model_dump())


@router.put("/{job_id}", response_model=JobResponse)
def update_job(job_id: str, update: JobUpdate, jobs: JobService = Depends(get_job_service)):
    return jobs.update_job(job_id, update.model_dump(exclude_unset=True))


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(job_id: str, jobs: JobService = Depends(get_job_service)):
    jobs.delete_job(job_id)
    return MessageResponse(message="Job deleted successfully")
