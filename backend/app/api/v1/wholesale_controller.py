"""
Wholesale Controller
====================
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.domain.models.identity import Identity
from app.domain.models.user import UserRole
from app.domain.models.wholesale import WholesaleType
from app.application.dto.wholesale_dto import WholesaleCreateRequest, WholesaleResponse
from app.application.services.wholesale_service import WholesaleService
from app.api.v1.dependencies import get_wholesale_service, require_roles

router = APIRouter(tags=["wholesale"])


@router.post(
    "",
    response_model=WholesaleResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a wholesale entry",
    description="""
    The item list matching ``type`` is required. Pallet totals and the
    mixed flag are computed from the pallet lines.
    """,
)
def add_wholesale(
    request: WholesaleCreateRequest,
    _: Identity = Depends(require_roles(UserRole.ADMIN)),
    service: WholesaleService = Depends(get_wholesale_service),
) -> WholesaleResponse:
    return WholesaleResponse.from_entity(service.add(request.to_domain()))


@router.get("", response_model=List[WholesaleResponse], summary="List wholesale entries")
def list_wholesales(
    wholesale_type: Optional[WholesaleType] = Query(None, alias="type"),
    service: WholesaleService = Depends(get_wholesale_service),
) -> List[WholesaleResponse]:
    return [WholesaleResponse.from_entity(item) for item in service.list_all(wholesale_type)]


@router.get("/{wholesale_id}", response_model=WholesaleResponse, summary="Get a wholesale entry")
def get_wholesale(
    wholesale_id: str,
    service: WholesaleService = Depends(get_wholesale_service),
) -> WholesaleResponse:
    return WholesaleResponse.from_entity(service.get(wholesale_id))
