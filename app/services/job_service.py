"""
Job Service - CRUD for the jobs collection.

Jobs returned by this service carry a read-time "companyName" joined from
the companies collection. The join is best-effort: a dangling or malformed
companyId gives companyName = None rather than an error.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from app.core.exceptions import ValidationError
from app.models.documents import JobDocument, build_document, validate_changes
from app.services.company_service import CompanyService
from app.services.mongo_service import MongoService, parse_object_id

log = logging.getLogger(__name__)

# Fields a client may change after creation
UPDATABLE_FIELDS = ("title", "location", "type", "description")


class JobService(MongoService):
    collection_name = "jobs"
    entity_name = "Job"

    def __init__(self, db, companies: Optional[CompanyService] = None):
        super().__init__(db)
        self.companies = companies or CompanyService(db)

    # --------------------------------------------------------
    # Company name join
    # --------------------------------------------------------

    def _company_names(self, company_ids: Iterable[Any]) -> Dict[str, str]:
        oids = {parse_object_id(cid) for cid in company_ids}
        oids.discard(None)
        if not oids:
            return {}
        cursor = self.companies.collection.find(
            {"_id": {"$in": list(oids)}}, projection={"name": 1}
        )
        return {str(doc["_id"]): doc.get("name") for doc in cursor}

    def _with_company_names(self, jobs: List[dict]) -> List[dict]:
        names = self._company_names(job.get("companyId") for job in jobs)
        for job in jobs:
            job["companyName"] = names.get(str(job.get("companyId")))
        return jobs

    # --------------------------------------------------------
    # Queries
    # --------------------------------------------------------

    def list_jobs(self, company_id: Optional[str] = None, recruiter_id: Optional[str] = None) -> List[dict]:
        """Jobs newest first, optionally filtered by company and/or recruiter."""
        query = {}
        if company_id:
            query["companyId"] = company_id
        if recruiter_id:
            query["recruiterId"] = recruiter_id
        return self._with_company_names(self._list(query))

    def get_job(self, job_id: str) -> dict:
        return self._with_company_names([self._get_or_404(job_id)])[0]

    # --------------------------------------------------------
    # Writes
    # --------------------------------------------------------

    def resolve_company_id(self, company_id: Optional[str] = None, company_name: Optional[str] = None) -> str:
        """
        Decide which company a new job belongs to.

        An explicit companyId is used as-is, without checking it exists.
        Otherwise the company is looked up by exact name and created if missing.

        Raises:
            ValidationError if neither is supplied
        """
        if company_id:
            return company_id
        if company_name:
            return self.companies.find_or_create_by_name(company_name)["_id"]
        raise ValidationError("companyId or company name is required")

    def create_job(self, data: Dict[str, Any]) -> dict:
        """
        Create a job from a request payload.

        The job fields are validated before the company is resolved, so a
        rejected job never leaves a new company behind.
        """
        fields = {
            "recruiterId": data.get("recruiterId") or None,
            "title": data.get("title"),
            "location": data.get("location"),
            "type": data.get("type"),
            "description": data.get("description"),
            "salary_range": data.get("salary_range") or None,
            "requirements": data.get("requirements") or None,
            "is_active": True,
        }
        missing = [name for name in UPDATABLE_FIELDS if not fields[name]]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        # companyId placeholder only to check the remaining fields
        build_document(JobDocument, {**fields, "companyId": "pending"})

        fields["companyId"] = self.resolve_company_id(data.get("companyId"), data.get("company"))
        job = self._insert(build_document(JobDocument, fields))
        log.info("Created job %s (%s) for company %s", job["_id"], job["title"], job["companyId"])
        return self._with_company_names([job])[0]

    def update_job(self, job_id: str, changes: Dict[str, Any]) -> dict:
        """Partial update limited to title, location, type and description."""
        changes = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS and v is not None}
        current = self._get_or_404(job_id)
        if not changes:
            return self._with_company_names([current])[0]
        changes = validate_changes(JobDocument, current, changes)
        return self._with_company_names([self._set_fields(job_id, changes)])[0]

    def delete_job(self, job_id: str):
        self._delete(job_id)
        log.info("Deleted job %s", job_id)
