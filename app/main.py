"""
Job Board Platform - Main Application

FastAPI backend with:
- MongoDB for users, companies, jobs, applications and follow requests
- Resume uploads stored on disk and served from /uploads
- Demo data seeded into an empty database on startup

Run: uvicorn app.main:app --reload
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app import __version__
from app.api.routes import api_router
from app.core.config import Settings, get_settings
from app.core.exceptions import ServiceError
from app.db.demo_data import init_demo_data
from app.db.mongodb import check_mongo_connection, create_mongo_client, init_mongo_indexes
from app.models.documents import describe_errors
from app.schemas.schemas import ErrorResponse, HealthResponse
from app.utils.file_upload import UPLOADS_URL_PREFIX

log = logging.getLogger(__name__)


ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": f"Validation failed: {describe_errors(exc)}"})

    @app.exception_handler(PyMongoError)
    async def database_error_handler(request: Request, exc: PyMongoError):
        log.exception("Database error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Database operation failed"})


def create_app(settings: Optional[Settings] = None, mongo_db: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: configuration, defaults to get_settings()
        mongo_db: database handle to use instead of connecting to settings.mongodb_uri
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Job Board Platform",
        description="""
        Recruiters post jobs, students apply and follow companies.

        ## Resources
        - **Companies**: CRUD
        - **Jobs**: CRUD, company name attached on read, company created from name on demand
        - **Applications**: one per student and job, optional resume upload
        - **Follow Requests**: one per student and company
        - **Users**: upsert by external auth id
        """,
        version=__version__,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.settings = settings
    app.state.mongo_db = mongo_db
    app.state.mongo_client = None

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api", responses=ERROR_RESPONSES)

    # Serve uploaded resumes at the path stored in resume_url
    os.makedirs(settings.upload_dir, exist_ok=True)
    app.mount(UPLOADS_URL_PREFIX, StaticFiles(directory=settings.upload_dir), name="uploads")

    @app.on_event("startup")
    async def startup_event():
        """Connect to MongoDB, create indexes and seed demo data."""
        if app.state.mongo_db is None:
            app.state.mongo_client = create_mongo_client(settings)
            app.state.mongo_db = app.state.mongo_client[settings.mongodb_db]

        db = app.state.mongo_db
        try:
            init_mongo_indexes(db)
        except PyMongoError as e:
            log.warning("MongoDB index initialization failed: %s", e)

        if settings.seed_demo_data:
            try:
                init_demo_data(db)
            except PyMongoError as e:
                log.warning("Demo data initialization failed: %s", e)

    @app.on_event("shutdown")
    async def shutdown_event():
        if app.state.mongo_client is not None:
            app.state.mongo_client.close()

    @app.get("/api/health", response_model=HealthResponse, tags=["Health"])
    def health_check():
        """Health check with MongoDB reachability."""
        connected = check_mongo_connection(app.state.mongo_db)
        return HealthResponse(
            status="ok",
            mongodb="connected" if connected else "disconnected"
        )

    return app


logging.basicConfig(level=get_settings().log_level)

app = create_app()
