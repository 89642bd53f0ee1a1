"""
Company Routes

GET /companies - List companies (newest first)
GET /companies/{company_id} - Get one company
POST /companies - Create company
PUT /companies/{company_id} - Update name/about
DELETE /companies/{company_id} - Delete company (jobs are left in place)
"""

from fastapi import APIRouter, Depends
from typing import List

from app.api.deps import get_company_service
from app.services.company_service import CompanyService
from app.schemas.schemas import (
    CompanyCreate, CompanyUpdate, CompanyResponse, MessageResponse
)

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get("", response_model=List[CompanyResponse])
def list_companies(companies: CompanyService = Depends(get_company_service)):
    return companies.list_companies()


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(company_id: str, companies: CompanyService = Depends(get_company_service)):
    return companies.get_company(company_id)


@router.post("", response_model=CompanyResponse, status_code=201)
def create_company(data: CompanyCreate, companies: CompanyService = Depends(get_company_service)):
    """Create a company. Both name and about are required."""
    return companies.create_company(data.name, data.about)


@router.put("/{company_id}", response_model=CompanyResponse)
def update_company(
    company_id: str,
    data: CompanyUpdate,
    companies: CompanyService = Depends(get_company_service)
):
    """Update company. Only provided fields are changed."""
    return companies.update_company(company_id, name=data.name, about=data.about)


@router.delete("/{company_id}", response_model=MessageResponse)
def delete_company(company_id: str, companies: CompanyService = Depends(get_company_service)):
    companies.delete_company(company_id)
    return MessageResponse(message="Company deleted successfully")
