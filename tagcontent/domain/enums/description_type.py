# tagcontent/domain/enums/description_type.py
from __future__ import annotations

from enum import StrEnum

GENERIC_DESCRIPTION_TITLE = "Product Description"


class DescriptionType(StrEnum):
    usage = "usage"
    ingredients = "ingredients"
    care = "care"
    shipping = "shipping"
    warranty = "warranty"
    features = "features"
    custom = "custom"

    @property
    def default_title(self) -> str:
        return _TITLES.get(self, GENERIC_DESCRIPTION_TITLE)


_TITLES = {
    DescriptionType.usage: "Usage Instructions",
    DescriptionType.ingredients: "Ingredients",
    DescriptionType.care: "Care Instructions",
    DescriptionType.shipping: "Shipping Information",
    DescriptionType.warranty: "Warranty",
    DescriptionType.features: "Features",
}


def default_title_for(description_type: str) -> str:
    try:
        return DescriptionType(description_type).default_title
    except ValueError:
        return GENERIC_DESCRIPTION_TITLE
