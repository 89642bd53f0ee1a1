"""
Tests for primary/legacy record normalization
"""

from typing import List

import pytest
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.services.record_merge import (
    ApplicationRecord, JobRecord, merge_applications, merge_jobs,
)

applications_adapter = TypeAdapter(List[ApplicationRecord])
jobs_adapter = TypeAdapter(List[JobRecord])


class TestMergeApplications:

    def test_normalizes_both_kinds(self):
        records = applications_adapter.validate_python([
            {"kind": "primary", "_id": "p1", "jobId": "j1", "student": "s1",
             "status": "submitted", "resume_url": "/uploads/cv.pdf",
             "createdAt": "2024-03-01T10:00:00Z"},
            {"kind": "legacy", "id": "l1", "job_id": "j2", "student_id": "s1",
             "status": "accepted", "job_title": "Analyst",
             "created_at": "2024-02-01T10:00:00Z"},
        ])

        merged = merge_applications(records)

        assert [(m.id, m.source) for m in merged] == [("p1", "primary"), ("l1", "legacy")]
        assert merged[0].job_id == "j1"
        assert merged[0].resume_url == "/uploads/cv.pdf"
        assert merged[1].student == "s1"
        assert merged[1].job_title == "Analyst"
        assert merged[1].resume_url is None

    def test_primary_wins_on_id_collision(self):
        records = applications_adapter.validate_python([
            {"kind": "legacy", "id": "x", "job_id": "j", "student_id": "s", "status": "submitted"},
            {"kind": "primary", "_id": "x", "jobId": "j", "student": "s", "status": "accepted"},
        ])

        merged = merge_applications(records)

        assert len(merged) == 1
        assert merged[0].source == "primary"
        assert merged[0].status == "accepted"

    def test_records_without_timestamp_sort_last(self):
        records = applications_adapter.validate_python([
            {"kind": "legacy", "id": "old", "job_id": "j", "student_id": "s", "status": "submitted"},
            {"kind": "primary", "_id": "new", "jobId": "j", "student": "s", "status": "submitted",
             "createdAt": "2024-01-01T00:00:00"},
        ])

        assert [m.id for m in merge_applications(records)] == ["new", "old"]

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            applications_adapter.validate_python([{"kind": "other", "id": "x"}])


class TestMergeJobs:

    def test_company_falls_back_to_id(self):
        records = jobs_adapter.validate_python([
            {"kind": "primary", "_id": "p1", "title": "Dev", "companyId": "c1", "companyName": None,
             "type": "Full-time", "createdAt": "2024-03-01T00:00:00Z"},
            {"kind": "legacy", "id": "l1", "title": "Ops", "company_name": "Initech",
             "job_type": "Contract", "is_active": False, "created_at": "2024-04-01T00:00:00Z"},
        ])

        merged = merge_jobs(records)

        assert [m.id for m in merged] == ["l1", "p1"]
        assert merged[0].company == "Initech"
        assert merged[0].is_active is False
        assert merged[1].company == "c1"
        assert merged[1].job_type == "Full-time"
