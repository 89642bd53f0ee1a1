"""
Follow Request Routes

GET /follow-requests - List follow requests, filter by student / companyId
GET /follow-requests/{request_id} - Get one follow request
POST /follow-requests - Request to follow a company
PUT /follow-requests/{request_id} - Update status
DELETE /follow-requests/{request_id} - Delete follow request
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from app.api.deps import get_follow_request_service
from app.services.follow_request_service import FollowRequestService
from app.schemas.schemas import (
    FollowRequestCreate, FollowRequestResponse, MessageResponse, StatusUpdate
)

router = APIRouter(prefix="/follow-requests", tags=["Follow Requests"])


@router.get("", response_model=List[FollowRequestResponse])
def list_follow_requests(
    student: Optional[str] = Query(None),
    companyId: Optional[str] = Query(None),
    follow_requests: FollowRequestService = Depends(get_follow_request_service)
):
    return follow_requests.list_follow_requests(student=student, company_id=companyId)


@router.get("/{request_id}", response_model=FollowRequestResponse)
def get_follow_request(request_id: str, follow_requests: FollowRequestService = Depends(get_follow_request_service)):
    return follow_requests.get_follow_request(request_id)


@router.post("", response_model=FollowRequestResponse, status_code=201)
def create_follow_request(
    data: FollowRequestCreate,
    follow_requests: FollowRequestService = Depends(get_follow_request_service)
):
    """One request per student and company; a repeat returns 409."""
    return follow_requests.create_follow_request(data.student, data.companyId)


@router.put("/{request_id}", response_model=FollowRequestResponse)
def update_follow_request(
    request_id: str,
    data: StatusUpdate,
    follow_requests: FollowRequestService = Depends(get_follow_request_service)
):
    """Update status: pending, accepted or rejected."""
    return follow_requests.update_status(request_id, data.status)


@router.delete("/{request_id}", response_model=MessageResponse)
def delete_follow_request(request_id: str, follow_requests: FollowRequestService = Depends(get_follow_request_service)):
    follow_requests.delete_follow_request(request_id)
    return MessageResponse(message="Follow request deleted successfully")
