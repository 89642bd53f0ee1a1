"""
MongoDB Connection Utility

MongoDB stores every entity of the job board:
- users
- companies
- jobs
- applications
- follow_requests

The database handle is created once at startup and kept on app.state;
routes receive it through the get_mongo_db dependency and pass it to the
services explicitly.
"""
import logging

from fastapi import Request
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.config import Settings

log = logging.getLogger(__name__)


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "companies": "companies",
    "jobs": "jobs",
    "applications": "applications",
    "follow_requests": "follow_requests",
}


def create_mongo_client(settings: Settings) -> MongoClient:
    """Create a MongoDB client (connection pooling handled internally by pymongo)."""
    return MongoClient(settings.mongodb_uri)


def get_mongo_db(request: Request) -> Database:
    """
    Dependency for FastAPI route injection.
    Usage:
        @router.get("/companies")
        def list_companies(db: Database = Depends(get_mongo_db)):
            ...
    """
    return request.app.state.mongo_db


def check_mongo_connection(db: Database) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        # ping command checks connection
        db.command("ping")
        return True
    except PyMongoError as e:
        log.warning("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Database):
    """
    Create indexes. Call this once during app startup; create_index is a
    no-op for indexes that already exist.

    The unique indexes are what actually prevents duplicate applications,
    follow requests and users; the services only pre-check for a nicer error.
    """
    applications = db[COLLECTIONS["applications"]]
    applications.create_index("jobId")
    applications.create_index("student")
    applications.create_index(
        [("jobId", ASCENDING), ("student", ASCENDING)],
        unique=True,
        name="uniq_job_student",
    )

    follow_requests = db[COLLECTIONS["follow_requests"]]
    follow_requests.create_index("student")
    follow_requests.create_index("companyId")
    follow_requests.create_index(
        [("student", ASCENDING), ("companyId", ASCENDING)],
        unique=True,
        name="uniq_student_company",
    )

    users = db[COLLECTIONS["users"]]
    # sparse: users without an externalId are not constrained
    users.create_index("externalId", unique=True, sparse=True, name="uniq_external_id")
    users.create_index([("name", ASCENDING), ("role", ASCENDING)])

    jobs = db[COLLECTIONS["jobs"]]
    jobs.create_index([("companyId", ASCENDING), ("createdAt", DESCENDING)])
    jobs.create_index("recruiterId")

    log.info("MongoDB indexes created successfully")
