"""
Duplicate-Prevention Policy - at most one record per natural key.

Used by applications (jobId, student) and follow requests (student, companyId).
ensure_absent() is only a fast path that gives a friendly error; the unique
index created in init_mongo_indexes is what holds under concurrent creates,
and insert_unique() turns its violation into the same ConflictError.
"""

import logging
from typing import Any, Dict

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError

log = logging.getLogger(__name__)


def ensure_absent(collection: Collection, natural_key: Dict[str, Any], message: str):
    """Raise ConflictError if a record matching natural_key exists."""
    if collection.find_one(natural_key, projection={"_id": 1}) is not None:
        log.info("Duplicate %s rejected: %s", collection.name, natural_key)
        raise ConflictError(message)


def insert_unique(collection: Collection, document: Dict[str, Any], message: str) -> Any:
    """
    Insert a document guarded by a unique index.

    Returns:
        The inserted _id

    Raises:
        ConflictError if the unique index rejects the write
    """
    try:
        return collection.insert_one(document).inserted_id
    except DuplicateKeyError as exc:
        log.info("Unique index rejected %s insert: %s", collection.name, exc.details)
        raise ConflictError(message) from exc
