# tagcontent/services/resolution/type_validator.py
from __future__ import annotations

from typing import Iterable, Optional

from tagcontent.domain.entities.resolved_media import ValidationResult
from tagcontent.domain.enums import MediaType
from tagcontent.domain.policies.media_classifier import DEFAULT_VIDEO_HOSTS, classify
from tagcontent.services.registry.tag_registry import TagRegistry

MATCH_MESSAGE = "Media type matches tag expectations."
TAG_NOT_FOUND_MESSAGE = "Tag not found."


class TypeValidator:
    """Checks a piece of media against the type its tag expects. Never raises on mismatch."""

    def __init__(self, registry: Optional[TagRegistry] = None, *, video_hosts: Iterable[str] = DEFAULT_VIDEO_HOSTS):
        self.registry = registry
        self.video_hosts = tuple(video_hosts)

    def classify(self, url: str, mime_hint: Optional[str] = None) -> MediaType:
        return classify(url, mime_hint, video_hosts=self.video_hosts)

    def validate(
        self,
        tag_key: str,
        url: str,
        mime_hint: Optional[str] = None,
        expected_type: Optional[MediaType] = None,
    ) -> ValidationResult:
        if expected_type is None:
            expected_type = self.registry.expected_media_type(tag_key) if self.registry else None
            if expected_type is None:
                return ValidationResult(ok=False, message=TAG_NOT_FOUND_MESSAGE)

        actual = self.classify(url, mime_hint)
        if actual == expected_type:
            return ValidationResult(ok=True, message=MATCH_MESSAGE)
        return ValidationResult(
            ok=False,
            message=f"Expected {MediaType(expected_type).label} but got {actual.label}. This may not display correctly.",
        )
