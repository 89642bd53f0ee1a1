"""
HTTP tests through FastAPI's TestClient
"""

import os

from app.main import create_app


def create_company(client, name="Acme", about="x"):
    resp = client.post("/api/companies", json={"name": name, "about": about})
    assert resp.status_code == 201
    return resp.json()


def create_job(client, **fields):
    payload = {"title": "Engineer", "location": "Remote", "type": "Full-time", "description": "Build"}
    payload.update(fields)
    return client.post("/api/jobs", json=payload)


class TestCompanyEndpoints:

    def test_create_then_get(self, client):
        created = create_company(client)

        resp = client.get(f"/api/companies/{created['_id']}")

        assert resp.status_code == 200
        assert resp.json()["name"] == "Acme"
        assert resp.json()["about"] == "x"

    def test_create_missing_about_is_400(self, client):
        resp = client.post("/api/companies", json={"name": "Acme"})
        assert resp.status_code == 400
        assert "detail" in resp.json()

    def test_update_list_delete(self, client):
        created = create_company(client)

        resp = client.put(f"/api/companies/{created['_id']}", json={"about": "Updated"})
        assert resp.status_code == 200
        assert resp.json()["about"] == "Updated"

        assert [c["_id"] for c in client.get("/api/companies").json()] == [created["_id"]]

        resp = client.delete(f"/api/companies/{created['_id']}")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Company deleted successfully"}
        assert client.get(f"/api/companies/{created['_id']}").status_code == 404

    def test_malformed_body_is_400(self, client):
        resp = client.post("/api/companies", content=b"not json", headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert resp.json()["detail"].startswith("Validation failed: ")

    def test_invalid_field_is_named_without_body_prefix(self, client):
        resp = client.post("/api/jobs/merge", json={"records": "not a list"})
        assert resp.status_code == 400
        assert resp.json()["detail"].startswith("Validation failed: records: ")


class TestJobEndpoints:

    def test_create_without_company_is_400(self, client):
        resp = create_job(client)
        assert resp.status_code == 400

    def test_create_with_company_name(self, client):
        resp = create_job(client, company="Initech")

        assert resp.status_code == 201
        body = resp.json()
        assert body["companyName"] == "Initech"

        listed = client.get("/api/jobs", params={"companyId": body["companyId"]}).json()
        assert [j["_id"] for j in listed] == [body["_id"]]

    def test_invalid_type_is_400(self, client):
        company = create_company(client)
        resp = create_job(client, companyId=company["_id"], type="Gig")
        assert resp.status_code == 400

    def test_update_and_delete(self, client):
        company = create_company(client)
        job = create_job(client, companyId=company["_id"], recruiterId="r1").json()

        resp = client.put(f"/api/jobs/{job['_id']}", json={"title": "Lead"})
        assert resp.status_code == 200
        assert resp.json()["title"] == "Lead"
        assert resp.json()["location"] == "Remote"

        assert client.get("/api/jobs", params={"recruiterId": "r1"}).json()[0]["title"] == "Lead"
        assert client.delete(f"/api/jobs/{job['_id']}").status_code == 200

    def test_delete_unknown_job_is_404(self, client):
        assert client.delete("/api/jobs/64b7f0c2a1b2c3d4e5f60718").status_code == 404
        assert client.delete("/api/jobs/nope").status_code == 404

    def test_merge_records(self, client):
        resp = client.post("/api/jobs/merge", json={"records": [
            {"kind": "legacy", "id": "l1", "title": "Ops", "company_name": "Initech"},
        ]})
        assert resp.status_code == 200
        assert resp.json()["records"][0]["company"] == "Initech"


class TestApplicationEndpoints:

    def test_duplicate_application_is_409(self, client):
        form = {"jobId": "job-1", "studentId": "student-1", "cover_letter": "Hi"}

        first = client.post("/api/applications", data=form)
        second = client.post("/api/applications", data=form)

        assert first.status_code == 201
        assert first.json()["status"] == "submitted"
        assert second.status_code == 409
        assert len(client.get("/api/applications", params={"student": "student-1"}).json()) == 1

    def test_missing_student_is_400(self, client):
        assert client.post("/api/applications", data={"jobId": "job-1"}).status_code == 400

    def test_resume_upload_is_served(self, client, settings):
        resp = client.post(
            "/api/applications",
            data={"jobId": "job-1", "studentId": "student-1"},
            files={"resume": ("cv.pdf", b"%PDF-1.4 resume", "application/pdf")},
        )

        assert resp.status_code == 201
        resume_url = resp.json()["resume_url"]
        assert os.path.exists(os.path.join(settings.upload_dir, resume_url.rsplit("/", 1)[1]))

        served = client.get(resume_url)
        assert served.status_code == 200
        assert served.content == b"%PDF-1.4 resume"

    def test_oversized_resume_is_413(self, client, settings):
        resp = client.post(
            "/api/applications",
            data={"jobId": "job-1", "studentId": "student-1"},
            files={"resume": ("cv.txt", b"x" * (settings.max_resume_size_bytes + 1), "text/plain")},
        )
        assert resp.status_code == 413

    def test_list_by_job_ids_and_status_update(self, client):
        a = client.post("/api/applications", data={"jobId": "job-a", "studentId": "s1"}).json()
        client.post("/api/applications", data={"jobId": "job-b", "studentId": "s1"})
        client.post("/api/applications", data={"jobId": "job-c", "studentId": "s2"})

        listed = client.get("/api/applications", params={"jobIds": "job-a,job-c"}).json()
        assert {x["jobId"] for x in listed} == {"job-a", "job-c"}

        assert client.put(f"/api/applications/{a['_id']}", json={"status": "maybe"}).status_code == 400
        resp = client.put(f"/api/applications/{a['_id']}", json={"status": "rejected"})
        assert resp.status_code == 200
        assert client.get(f"/api/applications/{a['_id']}").json()["status"] == "rejected"

        assert client.delete(f"/api/applications/{a['_id']}").status_code == 200
        assert client.delete(f"/api/applications/{a['_id']}").status_code == 404

    def test_merge_records(self, client):
        resp = client.post("/api/applications/merge", json={"records": [
            {"kind": "primary", "_id": "x", "jobId": "j", "student": "s", "status": "accepted"},
            {"kind": "legacy", "id": "x", "job_id": "j", "student_id": "s", "status": "submitted"},
        ]})
        assert resp.status_code == 200
        records = resp.json()["records"]
        assert len(records) == 1
        assert records[0]["source"] == "primary"


class TestFollowRequestEndpoints:

    def test_lifecycle(self, client):
        body = {"student": "s1", "companyId": "c1"}

        first = client.post("/api/follow-requests", json=body)
        second = client.post("/api/follow-requests", json=body)

        assert first.status_code == 201
        assert first.json()["status"] == "pending"
        assert second.status_code == 409

        request_id = first.json()["_id"]
        assert client.put(f"/api/follow-requests/{request_id}", json={"status": "accepted"}).json()["status"] == "accepted"
        assert client.put(f"/api/follow-requests/{request_id}", json={"status": "submitted"}).status_code == 400
        assert client.get("/api/follow-requests", params={"companyId": "c1"}).json()[0]["status"] == "accepted"
        assert client.delete(f"/api/follow-requests/{request_id}").status_code == 200
        assert client.get(f"/api/follow-requests/{request_id}").status_code == 404


class TestUserEndpoints:

    def test_upsert_maps_recruiter(self, client):
        body = {"externalId": "ext-1", "name": "Rita", "role": "recruiter"}

        first = client.post("/api/users", json=body)
        second = client.post("/api/users", json={**body, "name": "Rita R."})

        assert first.status_code == 200
        assert first.json()["role"] == "employer"
        assert second.json()["_id"] == first.json()["_id"]
        assert second.json()["name"] == "Rita R."

    def test_missing_role_is_400(self, client):
        assert client.post("/api/users", json={"externalId": "ext-1", "name": "Rita"}).status_code == 400


class TestAppFactory:

    def test_debug_follows_settings(self, settings, db):
        assert create_app(settings, mongo_db=db).debug is False
        assert create_app(settings.model_copy(update={"debug": True}), mongo_db=db).debug is True

    def test_error_responses_documented(self, client):
        schema = client.get("/openapi.json").json()
        responses = schema["paths"]["/api/companies/{company_id}"]["get"]["responses"]

        assert responses["404"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
