"""
Company Service - CRUD for the companies collection.

Deleting a company does not touch the jobs or follow requests that
reference it.
"""

import logging
from typing import List, Optional

from app.models.documents import CompanyDocument, build_document, validate_changes
from app.services.mongo_service import MongoService, serialize_doc

log = logging.getLogger(__name__)

PLACEHOLDER_ABOUT = "Company added via job posting"


class CompanyService(MongoService):
    collection_name = "companies"
    entity_name = "Company"

    def list_companies(self) -> List[dict]:
        """All companies, newest first."""
        return self._list({})

    def get_company(self, company_id: str) -> dict:
        return self._get_or_404(company_id)

    def create_company(self, name: Optional[str], about: Optional[str]) -> dict:
        """
        Create a company.

        Raises:
            ValidationError if name or about is missing or empty
        """
        document = build_document(CompanyDocument, {"name": name, "about": about})
        company = self._insert(document)
        log.info("Created company %s (%s)", company["_id"], company["name"])
        return company

    def update_company(self, company_id: str, name: Optional[str] = None, about: Optional[str] = None) -> dict:
        """Partial update; fields left as None are untouched."""
        changes = {k: v for k, v in {"name": name, "about": about}.items() if v is not None}
        current = self._get_or_404(company_id)
        if not changes:
            return current
        changes = validate_changes(CompanyDocument, current, changes)
        return self._set_fields(company_id, changes)

    def delete_company(self, company_id: str):
        self._delete(company_id)
        log.info("Deleted company %s", company_id)

    def find_by_name(self, name: str) -> Optional[dict]:
        doc = self.collection.find_one({"name": name})
        return serialize_doc(doc)

    def find_or_create_by_name(self, name: str) -> dict:
        """
        Exact-name lookup; creates the company with a placeholder "about"
        when none matches.
        """
        existing = self.find_by_name(name)
        if existing is not None:
            return existing
        return self.create_company(name, PLACEHOLDER_ABOUT)
