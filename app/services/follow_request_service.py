"""
Follow Request Service - students following companies.

Mirrors ApplicationService: one request per (student, companyId), new
requests start as "pending", only the status is mutable.
"""

import logging
from typing import List, Optional

from app.core.exceptions import ValidationError
from app.models.documents import FollowRequestDocument, FollowRequestStatus, build_document
from app.services.duplicate_policy import ensure_absent, insert_unique
from app.services.mongo_service import MongoService

log = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Follow request already exists"


class FollowRequestService(MongoService):
    collection_name = "follow_requests"
    entity_name = "Follow request"

    def list_follow_requests(self, student: Optional[str] = None, company_id: Optional[str] = None) -> List[dict]:
        query = {}
        if student:
            query["student"] = student
        if company_id:
            query["companyId"] = company_id
        return self._list(query)

    def get_follow_request(self, request_id: str) -> dict:
        return self._get_or_404(request_id)

    def create_follow_request(self, student: Optional[str], company_id: Optional[str]) -> dict:
        """
        Raises:
            ValidationError if student or companyId is missing
            ConflictError if the student already follows (or asked to follow) the company
        """
        if not student or not company_id:
            raise ValidationError("Student and company ID are required")

        natural_key = {"student": student, "companyId": company_id}
        ensure_absent(self.collection, natural_key, DUPLICATE_MESSAGE)

        document = build_document(FollowRequestDocument, {
            **natural_key,
            "status": FollowRequestStatus.pending,
        })
        document["_id"] = str(insert_unique(self.collection, document, DUPLICATE_MESSAGE))
        log.info("Student %s requested to follow company %s", student, company_id)
        return document

    def update_status(self, request_id: str, status: Optional[str]) -> dict:
        valid = [s.value for s in FollowRequestStatus]
        if status not in valid:
            raise ValidationError("Valid status is required")
        return self._set_fields(request_id, {"status": status})

    def delete_follow_request(self, request_id: str):
        self._delete(request_id)
        log.info("Deleted follow request %s", request_id)
