"""
Application Service - students applying to jobs.

One application per (jobId, student). New applications always start as
"submitted"; afterwards only the status can change.
"""

import logging
from typing import List, NamedTuple, Optional

from pymongo.database import Database

from app.core.config import Settings
from app.core.exceptions import ValidationError
from app.models.documents import ApplicationDocument, ApplicationStatus, build_document
from app.services.duplicate_policy import ensure_absent, insert_unique
from app.services.mongo_service import MongoService
from app.utils.file_upload import discard_resume, store_resume, validate_resume

log = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Application already exists"


class ResumeUpload(NamedTuple):
    filename: Optional[str]
    content: bytes


def parse_job_ids(job_ids: Optional[str]) -> List[str]:
    """Split a comma-separated jobIds parameter, dropping blanks."""
    if not job_ids:
        return []
    return [part.strip() for part in job_ids.split(",") if part.strip()]


class ApplicationService(MongoService):
    collection_name = "applications"
    entity_name = "Application"

    def __init__(self, db: Database, settings: Settings):
        super().__init__(db)
        self.settings = settings

    def list_applications(
        self,
        job_id: Optional[str] = None,
        student: Optional[str] = None,
        job_ids: Optional[str] = None,
    ) -> List[dict]:
        """
        Applications newest first.

        job_ids is comma-separated and, when it has any entries, replaces
        the single job_id filter.
        """
        query = {}
        if job_id:
            query["jobId"] = job_id
        if student:
            query["student"] = student
        ids = parse_job_ids(job_ids)
        if ids:
            query["jobId"] = {"$in": ids}
        return self._list(query)

    def get_application(self, application_id: str) -> dict:
        return self._get_or_404(application_id)

    def create_application(
        self,
        job_id: Optional[str],
        student_id: Optional[str],
        cover_letter: Optional[str] = None,
        resume: Optional[ResumeUpload] = None,
    ) -> dict:
        """
        Apply a student to a job, optionally with a resume file.

        Raises:
            ValidationError if jobId/studentId are missing or the resume is rejected
            ConflictError if the student already applied to this job
        """
        if not job_id or not student_id:
            raise ValidationError("jobId and studentId are required")

        natural_key = {"jobId": job_id, "student": student_id}
        ensure_absent(self.collection, natural_key, DUPLICATE_MESSAGE)

        resume_path = None
        resume_url = None
        if resume is not None:
            validate_resume(resume.filename, resume.content, self.settings.max_resume_size_bytes)
            resume_path, resume_url = store_resume(self.settings.upload_dir, resume.filename, resume.content)

        try:
            document = build_document(ApplicationDocument, {
                **natural_key,
                "cover_letter": cover_letter or None,
                "resume_url": resume_url,
                "status": ApplicationStatus.submitted,
            })
            document["_id"] = insert_unique(self.collection, document, DUPLICATE_MESSAGE)
        except Exception:
            # no application references the file if the insert failed for any reason
            if resume_path:
                discard_resume(resume_path)
            raise

        log.info("Student %s applied to job %s (%s)", student_id, job_id, document["_id"])
        document["_id"] = str(document["_id"])
        return document

    def update_status(self, application_id: str, status: Optional[str]) -> dict:
        """
        Raises:
            ValidationError if status is not submitted/accepted/rejected
            NotFoundError if the application does not exist
        """
        valid = [s.value for s in ApplicationStatus]
        if status not in valid:
            raise ValidationError("Valid status is required")
        return self._set_fields(application_id, {"status": status})

    def delete_application(self, application_id: str):
        self._delete(application_id)
        log.info("Deleted application %s", application_id)
