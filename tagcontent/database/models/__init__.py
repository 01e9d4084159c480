# tagcontent/database/models/__init__.py

from tagcontent.database.core.main import Base
from tagcontent.database.models.options import Option
from tagcontent.database.models.media import ProductMedia, Attachment
from tagcontent.database.models.content import ProductIngredient, ProductDescriptionRow

__all__ = [
    "Base",
    "Option",
    "ProductMedia",
    "Attachment",
    "ProductIngredient",
    "ProductDescriptionRow",
]
