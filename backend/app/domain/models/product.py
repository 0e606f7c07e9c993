"""
Catalog Models
==============

Read-only views of products and categories owned by the catalog.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Product:
    id: str
    name: str
    price: float
    image: Optional[str] = None
    supplier_id: Optional[str] = None
    category_id: Optional[str] = None

    def summary(self) -> dict:
        return {"id": self.id, "name": self.name, "price": self.price, "image": self.image}


@dataclass
class Category:
    id: str
    name: str
    region: Optional[str] = None
