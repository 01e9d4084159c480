# tagcontent/domain/errors.py
"""
Error taxonomy for tag management and content resolution.

Write-path errors (TagValidationError, ProtectedTag, TagNotFound on update or
delete) reject the write and leave storage untouched. Read-path errors
(MediaNotFound and subclasses, TextNotFound) describe expected steady-state
conditions, e.g. media deleted after it was assigned; callers on rendering
paths treat them as "not found".
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class ContentError(Exception):
    code = "CONTENT_ERROR"

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


# ---------- tags ----------

class TagNotFound(ContentError):
    code = "TAG_NOT_FOUND"

    def __init__(self, tag_key: str):
        super().__init__(f"Tag '{tag_key}' not found", details={"tag_key": tag_key})


class TagValidationError(ContentError, ValueError):
    code = "TAG_INVALID"


class DuplicateKey(TagValidationError):
    code = "TAG_DUPLICATE_KEY"

    def __init__(self, tag_key: str):
        super().__init__("A tag with this key already exists", details={"tag_key": tag_key})


class InvalidKey(TagValidationError):
    code = "TAG_INVALID_KEY"

    def __init__(self, tag_key: Any):
        super().__init__(
            "Tag key can only contain lowercase letters, numbers, and underscores",
            details={"tag_key": tag_key},
        )


class InvalidMediaType(TagValidationError):
    code = "TAG_INVALID_MEDIA_TYPE"

    def __init__(self, media_type: Any):
        super().__init__(f"Invalid media type: {media_type}", details={"media_type": media_type})


class InvalidCategory(TagValidationError):
    code = "TAG_INVALID_CATEGORY"

    def __init__(self, category: Any):
        super().__init__(f"Invalid tag category: {category}", details={"category": category})


class InvalidTag(TagValidationError):
    code = "TAG_INVALID_DATA"


class ProtectedTag(ContentError):
    code = "TAG_PROTECTED"

    def __init__(self, tag_key: str):
        super().__init__("Default tags cannot be deleted", details={"tag_key": tag_key})


# ---------- resolution ----------

class MediaNotFound(ContentError):
    code = "MEDIA_NOT_FOUND"

    def __init__(self, product_id: Any, tag_key: str, message: Optional[str] = None, **details: Any):
        super().__init__(
            message or f"No media for tag '{tag_key}' on product {product_id}",
            details={"product_id": product_id, "tag_key": tag_key, **details},
        )


class AttachmentMissing(MediaNotFound):
    code = "ATTACHMENT_MISSING"

    def __init__(self, product_id: Any, tag_key: str, attachment_id: Any):
        super().__init__(
            product_id,
            tag_key,
            f"Attachment {attachment_id} no longer exists",
            attachment_id=attachment_id,
        )


class PositionOutOfRange(MediaNotFound):
    code = "POSITION_OUT_OF_RANGE"

    def __init__(self, product_id: Any, tag_key: str, position: int):
        super().__init__(
            product_id,
            tag_key,
            f"Product {product_id} has no image at position {position}",
            position=position,
        )


class TextNotFound(ContentError):
    code = "TEXT_NOT_FOUND"

    def __init__(self, language: str):
        super().__init__("No text available", details={"language": language})


class ProviderUnavailable(ContentError):
    code = "PROVIDER_UNAVAILABLE"
