"""
Route dependencies - build services around the request's database handle.

Usage:
    @router.get("")
    def list_companies(companies: CompanyService = Depends(get_company_service)):
        ...
"""

from fastapi import Depends, Request
from pymongo.database import Database

from app.core.config import Settings
from app.db.mongodb import get_mongo_db
from app.services.application_service import ApplicationService
from app.services.company_service import CompanyService
from app.services.follow_request_service import FollowRequestService
from app.services.job_service import JobService
from app.services.user_service import UserService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_company_service(db: Database = Depends(get_mongo_db)) -> CompanyService:
    return CompanyService(db)


def get_job_service(db: Database = Depends(get_mongo_db)) -> JobService:
    return JobService(db)


def get_application_service(
    db: Database = Depends(get_mongo_db),
    settings: Settings = Depends(get_app_settings),
) -> ApplicationService:
    return ApplicationService(db, settings)


def get_follow_request_service(db: Database = Depends(get_mongo_db)) -> FollowRequestService:
    return FollowRequestService(db)


def get_user_service(db: Database = Depends(get_mongo_db)) -> UserService:
    return UserService(db)
