"""
Wholesale Model
===============

Wholesale catalog entries: single cases, mixed pallets or fast-moving picks.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from app.utils.datetime_utils import now


class WholesaleType(str, Enum):
    CASE = "case"
    PALLET = "pallet"
    FAST_MOVING = "fastMoving"


@dataclass
class CaseItem:
    product_id: str
    case_quantity: int
    units_per_case: int
    base_case_price: float
    selling_case_price: float
    discount_percent: Optional[float] = None
    is_active: bool = True


@dataclass
class PalletLine:
    product_id: str
    case_quantity: int


@dataclass
class Pallet:
    pallet_name: str
    items: List[PalletLine]
    pallet_price: float
    total_cases: int = 0
    estimated_weight: Optional[float] = None
    is_mixed: bool = False
    is_active: bool = True

    def recompute(self) -> None:
        """Derive totals from the pallet lines."""
        self.total_cases = sum(line.case_quantity for line in self.items)
        self.is_mixed = len({line.product_id for line in self.items}) > 1


@dataclass
class Wholesale:
    type: WholesaleType
    case_items: List[CaseItem] = field(default_factory=list)
    pallet_items: List[Pallet] = field(default_factory=list)
    fast_moving_items: List[str] = field(default_factory=list)
    is_active: bool = True
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def product_ids(self) -> List[str]:
        """Every product referenced by this entry, in order of appearance."""
        ids = [item.product_id for item in self.case_items]
        for pallet in self.pallet_items:
            ids.extend(line.product_id for line in pallet.items)
        ids.extend(self.fast_moving_items)
        return ids
