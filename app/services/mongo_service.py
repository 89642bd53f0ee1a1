"""
MongoDB Service - shared plumbing for the per-entity services.

Every entity service is a MongoService bound to one collection of an
explicitly passed database handle:

    companies = CompanyService(db)
    companies.get_company(company_id)

Records leave the services as plain dicts with "_id" converted to a string.
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from app.core.exceptions import NotFoundError
from app.db.mongodb import COLLECTIONS
from app.models.documents import utcnow


# Ties on createdAt (same millisecond) fall back to insertion order
NEWEST_FIRST = [("createdAt", -1), ("_id", -1)]


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs) -> List[dict]:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Parse a 24-char hex id; anything else yields None."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


# ============================================================
# BASE SERVICE
# ============================================================

class MongoService:
    """
    Base for entity services.

    Subclasses set collection_name (a key of COLLECTIONS) and entity_name,
    which is used in NotFound messages.
    """

    collection_name: str = ""
    entity_name: str = "Record"

    def __init__(self, db: Database):
        self.db = db
        self.collection: Collection = db[COLLECTIONS[self.collection_name]]

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.entity_name} not found")

    def _find_raw(self, record_id: str) -> Optional[dict]:
        oid = parse_object_id(record_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def _get_or_404(self, record_id: str) -> dict:
        doc = self._find_raw(record_id)
        if doc is None:
            raise self._not_found()
        return serialize_doc(doc)

    def _list(self, query: Dict[str, Any]) -> List[dict]:
        return serialize_docs(self.collection.find(query).sort(NEWEST_FIRST))

    def _insert(self, document: Dict[str, Any]) -> dict:
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return serialize_doc(document)

    def _set_fields(self, record_id: str, changes: Dict[str, Any]) -> dict:
        """Apply $set to one record and return it after the update."""
        oid = parse_object_id(record_id)
        if oid is None:
            raise self._not_found()
        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": {**changes, "updatedAt": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise self._not_found()
        return serialize_doc(doc)

    def _delete(self, record_id: str):
        oid = parse_object_id(record_id)
        if oid is None:
            raise self._not_found()
        result = self.collection.delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise self._not_found()
