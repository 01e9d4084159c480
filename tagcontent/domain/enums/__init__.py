from tagcontent.domain.enums.media_type import MediaType
from tagcontent.domain.enums.tag_category import TagCategory
from tagcontent.domain.enums.source_kind import SourceKind
from tagcontent.domain.enums.description_type import DescriptionType, default_title_for
__all__ = [
    "MediaType",
    "TagCategory",
    "SourceKind",
    "DescriptionType",
    "default_title_for",
]
