# tagcontent/database/repos/content_repo.py
from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from tagcontent.database.core.transaction import transactional
from tagcontent.database.models.content import ProductDescriptionRow, ProductIngredient
from tagcontent.database.repos._mapping import text_to_json, to_domain_description, to_domain_ingredient
from tagcontent.domain.entities.localized_text import Ingredient, ProductDescription


class SqlProductContentRepo:
    """ProductContentPort: ingredients (by product or SKU) and typed descriptions."""

    def __init__(self, db: Session) -> None:
        self.db = db

    # ---------- reads ----------

    def ingredients_for(self, product_id: int) -> List[Ingredient]:
        stmt = (
            select(ProductIngredient)
            .where(ProductIngredient.product_id == product_id)
            .order_by(ProductIngredient.sort_order, ProductIngredient.date_created)
        )
        return [to_domain_ingredient(r) for r in self.db.execute(stmt).scalars()]

    def ingredients_for_sku(self, sku: str) -> List[Ingredient]:
        stmt = (
            select(ProductIngredient)
            .where(ProductIngredient.sku == sku, ProductIngredient.product_id.is_(None))
            .order_by(ProductIngredient.sort_order, ProductIngredient.date_created)
        )
        return [to_domain_ingredient(r) for r in self.db.execute(stmt).scalars()]

    def descriptions_for(self, product_id: int) -> List[ProductDescription]:
        stmt = (
            select(ProductDescriptionRow)
            .where(ProductDescriptionRow.product_id == product_id)
            .order_by(ProductDescriptionRow.sort_order, ProductDescriptionRow.date_created)
        )
        return [to_domain_description(r) for r in self.db.execute(stmt).scalars()]

    # ---------- writes (admin side) ----------

    def replace_ingredients(
        self,
        ingredients: Sequence[Ingredient],
        *,
        product_id: Optional[int] = None,
        sku: Optional[str] = None,
    ) -> int:
        if product_id is None and not sku:
            raise ValueError("product_id or sku is required")
        owner = (
            ProductIngredient.product_id == product_id
            if product_id is not None
            else (ProductIngredient.sku == sku) & ProductIngredient.product_id.is_(None)
        )
        with transactional(self.db):
            self.db.execute(delete(ProductIngredient).where(owner))
            for i, ing in enumerate(ingredients):
                self.db.add(
                    ProductIngredient(
                        product_id=product_id,
                        sku=sku if product_id is None else None,
                        sort_order=i,
                        name=text_to_json(ing.name),
                        description=text_to_json(ing.description),
                    )
                )
            self.db.flush()
        return len(ingredients)

    def replace_descriptions(self, product_id: int, descriptions: Sequence[ProductDescription]) -> int:
        with transactional(self.db):
            self.db.execute(delete(ProductDescriptionRow).where(ProductDescriptionRow.product_id == product_id))
            for i, d in enumerate(descriptions):
                self.db.add(
                    ProductDescriptionRow(
                        product_id=product_id,
                        description_type=d.description_type,
                        sort_order=i,
                        title=text_to_json(d.title),
                        content=text_to_json(d.content),
                    )
                )
            self.db.flush()
        return len(descriptions)
