"""
Common DTO
==========

Shared pydantic base and pagination models. JSON field names are camelCase,
matching the stored documents; snake_case names are accepted on input too.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.domain.models.product import Product
from app.utils.pagination import PageMeta


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageMetaResponse(ApiModel):
    page: int
    limit: int
    total: int
    total_page: int

    @classmethod
    def from_meta(cls, meta: PageMeta) -> "PageMetaResponse":
        return cls(page=meta.page, limit=meta.limit, total=meta.total, total_page=meta.total_page)


class ProductSummaryResponse(ApiModel):
    id: str
    name: str
    price: float
    image: Optional[str] = None

    @classmethod
    def from_entity(cls, product: Product) -> "ProductSummaryResponse":
        return cls(**product.summary())


class MessageResponse(ApiModel):
    success: bool = True
    message: str
