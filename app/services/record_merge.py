"""
Record Merge - normalize records coming from two backing stores.

Clients still hold rows from the older hosted store ("legacy", snake_case
with "id") next to records from this API ("primary", camelCase with "_id").
Each row is tagged with its kind, parsed into the matching model and
converted to one canonical shape. When both stores know the same id the
primary record wins.
"""

from datetime import datetime, timezone
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================================
# APPLICATIONS
# ============================================================

class PrimaryApplicationRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["primary"]
    id: str = Field(alias="_id")
    jobId: str
    student: str
    status: str
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None
    createdAt: Optional[datetime] = None


class LegacyApplicationRecord(BaseModel):
    kind: Literal["legacy"]
    id: str
    job_id: str
    student_id: str
    status: str
    cover_letter: Optional[str] = None
    created_at: Optional[datetime] = None
    job_title: Optional[str] = None


ApplicationRecord = Annotated[
    Union[PrimaryApplicationRecord, LegacyApplicationRecord],
    Field(discriminator="kind"),
]


class CanonicalApplication(BaseModel):
    id: str
    source: Literal["primary", "legacy"]
    job_id: str
    student: str
    status: str
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None
    job_title: Optional[str] = None
    created_at: Optional[datetime] = None


# ============================================================
# JOBS
# ============================================================

class PrimaryJobRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["primary"]
    id: str = Field(alias="_id")
    title: str
    companyId: Optional[str] = None
    companyName: Optional[str] = None
    recruiterId: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    salary_range: Optional[str] = None
    is_active: bool = True
    createdAt: Optional[datetime] = None


class LegacyJobRecord(BaseModel):
    kind: Literal["legacy"]
    id: str
    title: str
    company_name: Optional[str] = None
    recruiter_id: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    salary_range: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None


JobRecord = Annotated[
    Union[PrimaryJobRecord, LegacyJobRecord],
    Field(discriminator="kind"),
]


class CanonicalJob(BaseModel):
    id: str
    source: Literal["primary", "legacy"]
    title: str
    company: Optional[str] = None
    recruiter_id: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    salary_range: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None


# ============================================================
# NORMALIZATION
# ============================================================

def application_to_canonical(record: Union[PrimaryApplicationRecord, LegacyApplicationRecord]) -> CanonicalApplication:
    if isinstance(record, PrimaryApplicationRecord):
        return CanonicalApplication(
            id=record.id,
            source="primary",
            job_id=record.jobId,
            student=record.student,
            status=record.status,
            cover_letter=record.cover_letter,
            resume_url=record.resume_url,
            created_at=record.createdAt,
        )
    return CanonicalApplication(
        id=record.id,
        source="legacy",
        job_id=record.job_id,
        student=record.student_id,
        status=record.status,
        cover_letter=record.cover_letter,
        job_title=record.job_title,
        created_at=record.created_at,
    )


def job_to_canonical(record: Union[PrimaryJobRecord, LegacyJobRecord]) -> CanonicalJob:
    if isinstance(record, PrimaryJobRecord):
        return CanonicalJob(
            id=record.id,
            source="primary",
            title=record.title,
            # fall back to the raw id when the company could not be joined
            company=record.companyName or record.companyId,
            recruiter_id=record.recruiterId,
            location=record.location,
            job_type=record.type,
            salary_range=record.salary_range,
            is_active=record.is_active,
            created_at=record.createdAt,
        )
    return CanonicalJob(
        id=record.id,
        source="legacy",
        title=record.title,
        company=record.company_name,
        recruiter_id=record.recruiter_id,
        location=record.location,
        job_type=record.job_type,
        salary_range=record.salary_range,
        is_active=record.is_active,
        created_at=record.created_at,
    )


def _newest_first_key(record):
    created = record.created_at
    if created is None:
        # records without a timestamp sort last
        return (False, 0.0)
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return (True, created.timestamp())


def merge_records(canonical: List) -> List:
    """
    Deduplicate canonical records by id, keeping the primary one on a
    collision, and order the result newest first.
    """
    by_id: Dict[str, object] = {}
    for record in canonical:
        kept = by_id.get(record.id)
        if kept is None or (kept.source == "legacy" and record.source == "primary"):
            by_id[record.id] = record
    return sorted(by_id.values(), key=_newest_first_key, reverse=True)


def merge_applications(records: List[Union[PrimaryApplicationRecord, LegacyApplicationRecord]]) -> List[CanonicalApplication]:
    return merge_records([application_to_canonical(r) for r in records])


def merge_jobs(records: List[Union[PrimaryJobRecord, LegacyJobRecord]]) -> List[CanonicalJob]:
    return merge_records([job_to_canonical(r) for r in records])
