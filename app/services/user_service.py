"""
User Service - mirror of accounts held by the external auth provider.

Users are keyed by the provider's id (externalId) and written with a single
atomic upsert, so repeating the same call is harmless.
"""

import logging
from typing import Optional

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError, ValidationError
from app.models.documents import UserDocument, build_document, utcnow
from app.services.mongo_service import MongoService, serialize_doc

log = logging.getLogger(__name__)

# Frontend role names that differ from the stored enum
ROLE_ALIASES = {"recruiter": "employer"}


def normalize_role(role: str) -> str:
    return ROLE_ALIASES.get(role, role)


class UserService(MongoService):
    collection_name = "users"
    entity_name = "User"

    def upsert_user(
        self,
        external_id: Optional[str],
        name: Optional[str],
        role: Optional[str],
        email: Optional[str] = None,
    ) -> dict:
        """
        Create or update the user with this externalId.

        Existing users get name/email/role overwritten; new users also get
        password and companyId defaulted to None.

        Raises:
            ValidationError if externalId, name or role is missing, or the
            role is neither student nor employer (after "recruiter" mapping)
        """
        if not external_id or not name or not role:
            raise ValidationError("externalId, name and role are required")

        document = build_document(UserDocument, {
            "externalId": external_id,
            "name": name,
            "email": email or None,
            "role": normalize_role(role),
        })
        now = utcnow()
        try:
            user = self.collection.find_one_and_update(
                {"externalId": external_id},
                {
                    "$set": {
                        "externalId": external_id,
                        "name": document["name"],
                        "email": document["email"],
                        "role": document["role"],
                        "updatedAt": now,
                    },
                    "$setOnInsert": {
                        "password": None,
                        "companyId": None,
                        "createdAt": now,
                    },
                },
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as exc:
            # Two first-time upserts raced on the unique externalId index
            raise ConflictError("User is being created concurrently, retry the request") from exc

        log.info("Upserted user %s (%s)", external_id, document["role"])
        return serialize_doc(user)
