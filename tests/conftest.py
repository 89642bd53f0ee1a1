"""
pytest fixtures: an in-memory mongomock database and a TestClient bound to it.
"""
import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.mongodb import init_mongo_indexes
from app.main import create_app
from app.services.company_service import CompanyService
from app.services.job_service import JobService


@pytest.fixture
def settings(tmp_path):
    return Settings(
        mongodb_db="jobportal_test",
        upload_dir=str(tmp_path / "uploads"),
        max_resume_size_mb=1,
        seed_demo_data=False,
    )


@pytest.fixture
def db():
    database = mongomock.MongoClient()["jobportal_test"]
    init_mongo_indexes(database)
    return database


@pytest.fixture
def client(settings, db):
    app = create_app(settings, mongo_db=db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def company(db):
    return CompanyService(db).create_company("Acme", "Rockets and anvils")


@pytest.fixture
def job(db, company):
    return JobService(db).create_job({
        "companyId": company["_id"],
        "title": "Backend Engineer",
        "location": "Remote",
        "type": "Full-time",
        "description": "Build APIs",
    })
