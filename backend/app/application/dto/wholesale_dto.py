"""
Wholesale DTO
=============

Request items mirror the stored layout. Pallet ``totalCases`` and
``isMixed`` are derived server-side and therefore not accepted on input.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.domain.models.wholesale import CaseItem, Pallet, PalletLine, Wholesale, WholesaleType
from app.application.dto.common_dto import ApiModel


class CaseItemSchema(ApiModel):
    product_id: str
    case_quantity: int = Field(..., ge=1)
    units_per_case: int = Field(..., ge=1)
    base_case_price: float = Field(..., ge=0)
    selling_case_price: float = Field(..., ge=0)
    discount_percent: Optional[float] = Field(None, ge=0, le=100)
    is_active: bool = True


class PalletLineSchema(ApiModel):
    product_id: str
    case_quantity: int = Field(..., ge=1)


class PalletRequest(ApiModel):
    pallet_name: str
    items: List[PalletLineSchema]
    pallet_price: float = Field(..., ge=0)
    estimated_weight: Optional[float] = None
    is_active: bool = True


class FastMovingItemSchema(ApiModel):
    product_id: str


class WholesaleCreateRequest(ApiModel):
    type: WholesaleType
    case_items: List[CaseItemSchema] = Field(default_factory=list)
    pallet_items: List[PalletRequest] = Field(default_factory=list)
    fast_moving_items: List[FastMovingItemSchema] = Field(default_factory=list)
    is_active: bool = True

    def to_domain(self) -> Wholesale:
        return Wholesale(
            type=self.type,
            case_items=[CaseItem(**item.model_dump()) for item in self.case_items],
            pallet_items=[
                Pallet(
                    pallet_name=pallet.pallet_name,
                    items=[PalletLine(**line.model_dump()) for line in pallet.items],
                    pallet_price=pallet.pallet_price,
                    estimated_weight=pallet.estimated_weight,
                    is_active=pallet.is_active,
                )
                for pallet in self.pallet_items
            ],
            fast_moving_items=[item.product_id for item in self.fast_moving_items],
            is_active=self.is_active,
        )


class PalletResponse(PalletRequest):
    total_cases: int
    is_mixed: bool


class WholesaleResponse(ApiModel):
    id: str
    type: WholesaleType
    case_items: List[CaseItemSchema]
    pallet_items: List[PalletResponse]
    fast_moving_items: List[FastMovingItemSchema]
    is_active: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, wholesale: Wholesale) -> "WholesaleResponse":
        return cls(
            id=wholesale.id,
            type=wholesale.type,
            case_items=[CaseItemSchema(**vars(item)) for item in wholesale.case_items],
            pallet_items=[
                PalletResponse(
                    pallet_name=pallet.pallet_name,
                    items=[PalletLineSchema(**vars(line)) for line in pallet.items],
                    pallet_price=pallet.pallet_price,
                    estimated_weight=pallet.estimated_weight,
                    is_active=pallet.is_active,
                    total_cases=pallet.total_cases,
                    is_mixed=pallet.is_mixed,
                )
                for pallet in wholesale.pallet_items
            ],
            fast_moving_items=[FastMovingItemSchema(product_id=product_id) for product_id in wholesale.fast_moving_items],
            is_active=wholesale.is_active,
            created_at=wholesale.created_at,
        )
