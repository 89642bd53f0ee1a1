"""
Tests for startup demo data seeding
"""

from app.db.demo_data import FALLBACK_DESCRIPTION, init_demo_data
from app.services.company_service import CompanyService


class TestInitDemoData:

    def test_seeds_empty_database(self, db):
        inserted = init_demo_data(db)

        assert inserted == {"companies": 3, "jobs": 3}
        names = sorted(c["name"] for c in db.companies.find())
        assert names == ["Acme Corp", "Bright Future Labs", "GreenTech"]
        acme = db.companies.find_one({"name": "Acme Corp"})
        job = db.jobs.find_one({"companyId": str(acme["_id"])})
        assert job["title"] == "Frontend Engineer"
        assert job["is_active"] is True

    def test_second_run_changes_nothing(self, db):
        init_demo_data(db)

        inserted = init_demo_data(db)

        assert inserted == {"companies": 0, "jobs": 0}
        assert db.companies.count_documents({}) == 3
        assert db.jobs.count_documents({}) == 3

    def test_jobs_for_existing_companies(self, db):
        service = CompanyService(db)
        for name in ["One", "Two", "Three", "Four"]:
            service.create_company(name, "about")

        inserted = init_demo_data(db)

        assert inserted == {"companies": 0, "jobs": 3}
        titles = sorted(j["title"] for j in db.jobs.find())
        assert titles == ["Frontend Engineer", "Research Intern", "Sustainability Engineer"]
        assert all(j["description"] == FALLBACK_DESCRIPTION for j in db.jobs.find())
        assert len({j["companyId"] for j in db.jobs.find()}) == 3

    def test_leaves_populated_database_alone(self, db, company, job):
        inserted = init_demo_data(db)

        assert inserted == {"companies": 0, "jobs": 0}
        assert db.jobs.count_documents({}) == 1
