from __future__ import annotations
from typing import List

from pydantic import BaseModel


class IngredientRead(BaseModel):
    name: str
    description: str = ""
    language: str


class IngredientList(BaseModel):
    product_id: int
    language: str
    items: List[IngredientRead]


class DescriptionRead(BaseModel):
    type: str
    title: str
    content: str = ""
    language: str


class DescriptionList(BaseModel):
    product_id: int
    language: str
    items: List[DescriptionRead]
