"""
Demo data seeding.

Runs on every startup. It only writes into empty collections, so running it
against a populated database changes nothing:
- no companies -> three demo companies with one job each
- companies but no jobs -> one demo job for each of the first three companies
"""
import logging

from pymongo.database import Database

from app.db.mongodb import COLLECTIONS
from app.models.documents import CompanyDocument, JobDocument, build_document

log = logging.getLogger(__name__)

DEMO_COMPANIES = [
    {"name": "Acme Corp", "about": "Building reliable products for everyone."},
    {"name": "Bright Future Labs", "about": "Research-driven innovation."},
    {"name": "GreenTech", "about": "Sustainable energy solutions."},
]

DEMO_JOBS = [
    {
        "title": "Frontend Engineer",
        "location": "Remote",
        "type": "Full-time",
        "description": "Work on modern React apps and component libraries.",
    },
    {
        "title": "Research Intern",
        "location": "New York",
        "type": "Internship",
        "description": "Assist with applied research and prototypes.",
    },
    {
        "title": "Sustainability Engineer",
        "location": "San Francisco",
        "type": "Full-time",
        "description": "Build tools to monitor and optimize energy usage.",
    },
]

FALLBACK_DESCRIPTION = "Demo job seeded on startup."


def init_demo_data(db: Database) -> dict:
    """
    Seed demo companies/jobs into an empty database.

    Returns:
        Counts of inserted documents, e.g. {"companies": 3, "jobs": 3}
    """
    companies = db[COLLECTIONS["companies"]]
    jobs = db[COLLECTIONS["jobs"]]
    inserted = {"companies": 0, "jobs": 0}

    if companies.count_documents({}) == 0:
        result = companies.insert_many(
            [build_document(CompanyDocument, company) for company in DEMO_COMPANIES]
        )
        inserted["companies"] = len(result.inserted_ids)
        log.info("Demo companies initialized")

        demo_jobs = [
            build_document(JobDocument, {**job, "companyId": str(company_id)})
            for company_id, job in zip(result.inserted_ids, DEMO_JOBS)
        ]
        inserted["jobs"] = len(jobs.insert_many(demo_jobs).inserted_ids)
        log.info("Demo jobs initialized")
        return inserted

    if jobs.count_documents({}) == 0:
        existing = list(companies.find({}, projection={"_id": 1}).limit(len(DEMO_JOBS)))
        demo_jobs = []
        for i, company in enumerate(existing):
            template = DEMO_JOBS[i % len(DEMO_JOBS)]
            demo_jobs.append(build_document(JobDocument, {
                "companyId": str(company["_id"]),
                "title": template["title"],
                "location": template["location"],
                "type": template["type"],
                "description": FALLBACK_DESCRIPTION,
            }))
        if demo_jobs:
            inserted["jobs"] = len(jobs.insert_many(demo_jobs).inserted_ids)
            log.info("Demo jobs initialized for existing companies")

    return inserted
