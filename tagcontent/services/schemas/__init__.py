from tagcontent.services.schemas.tags import (
    TagRead,
    TagCreate,
    TagUpdate,
)
from tagcontent.services.schemas.media import (
    MediaSizeRead,
    ValidationRead,
    ResolvedMediaRead,
)
from tagcontent.services.schemas.text import (
    IngredientRead,
    IngredientList,
    DescriptionRead,
    DescriptionList,
)

__all__ = [
    "TagRead",
    "TagCreate",
    "TagUpdate",
    "MediaSizeRead",
    "ValidationRead",
    "ResolvedMediaRead",
    "IngredientRead",
    "IngredientList",
    "DescriptionRead",
    "DescriptionList",
]
