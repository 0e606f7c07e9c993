"""
Review DTO
==========
"""
from datetime import datetime

from pydantic import ConfigDict, Field

from app.domain.models.review import Review, ReviewStatus
from app.application.dto.common_dto import ApiModel


class ReviewCreateRequest(ApiModel):
    order_id: str
    product_id: str
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "orderId": "66f1c0a2e4b0a1b2c3d4e5f6",
                "productId": "66f1c0a2e4b0a1b2c3d4e5a1",
                "rating": 5,
                "comment": "Arrived fresh and well packed",
            }
        }
    )


class ReviewResponse(ApiModel):
    id: str
    user_id: str
    order_id: str
    product_id: str
    rating: int
    comment: str
    status: ReviewStatus
    created_at: datetime

    @classmethod
    def from_entity(cls, review: Review) -> "ReviewResponse":
        return cls(
            id=review.id,
            user_id=review.user_id,
            order_id=review.order_id,
            product_id=review.product_id,
            rating=review.rating,
            comment=review.comment,
            status=review.status,
            created_at=review.created_at,
        )
