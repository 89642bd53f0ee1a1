"""
User Routes

POST /users - Create or update the user mirrored from the auth provider
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_user_service
from app.services.user_service import UserService
from app.schemas.schemas import UserUpsert, UserResponse

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse)
def upsert_user(data: UserUpsert, users: UserService = Depends(get_user_service)):
    """
    Upsert by externalId. Role "recruiter" is stored as "employer".
    Calling again with the same externalId updates the same record.
    """
    return users.upsert_user(data.externalId, data.name, data.role, email=data.email)
