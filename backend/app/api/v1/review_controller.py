"""
Review Controller
=================
"""
from fastapi import APIRouter, Depends, status

from app.domain.models.identity import Identity
from app.domain.models.user import UserRole
from app.application.dto.review_dto import ReviewCreateRequest, ReviewResponse
from app.application.services.review_service import ReviewService
from app.api.v1.dependencies import get_review_service, require_roles

router = APIRouter(tags=["reviews"])


@router.post(
    "",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Review a product from a delivered order",
)
def create_review(
    request: ReviewCreateRequest,
    identity: Identity = Depends(require_roles(UserRole.CUSTOMER)),
    service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    review = service.create(
        identity,
        order_id=request.order_id,
        product_id=request.product_id,
        rating=request.rating,
        comment=request.comment,
    )
    return ReviewResponse.from_entity(review)
