"""Company endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.marketplace.api.dependencies import CompanyServiceDep
from src.marketplace.schemas.company import CompanyCreate, CompanyRead

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post(
    "",
    response_model=CompanyRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register company",
    description="Register a company. Its id is derived from the name (lower-cased, no whitespace).",
    responses={
        201: {"description": "Company created"},
        400: {"description": "Company email or name already taken"},
    },
)
async def create_company(request: CompanyCreate, service: CompanyServiceDep) -> CompanyRead:
    """Register a company."""
    try:
        company = await service.create(
            name=request.name,
            email=request.email,
            image=request.image or "",
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return CompanyRead.model_validate(company)
