from __future__ import annotations
from typing import List, Protocol
from tagcontent.domain.entities.localized_text import Ingredient, ProductDescription


class ProductContentPort(Protocol):
    def ingredients_for(self, product_id: int) -> List[Ingredient]: ...
    def ingredients_for_sku(self, sku: str) -> List[Ingredient]: ...
    def descriptions_for(self, product_id: int) -> List[ProductDescription]: ...
