# tagcontent/services/resolution/media_resolver.py
from __future__ import annotations

from dataclasses import replace
from typing import Optional, Tuple

from tagcontent.common.cache.ttl_cache import TTLCache
from tagcontent.common.logging import get_logger
from tagcontent.domain.entities.media_source import (
    MediaAssignment,
    PlatformImageSource,
    UploadSource,
    UrlSource,
)
from tagcontent.domain.entities.product import PlatformImage, ProductRef
from tagcontent.domain.entities.resolved_media import MediaSize, ResolvedMedia, ValidationResult
from tagcontent.domain.entities.tag import Tag
from tagcontent.domain.enums import SourceKind
from tagcontent.domain.errors import AttachmentMissing, MediaNotFound, PositionOutOfRange, TagNotFound
from tagcontent.domain.policies.image_sizes import FULL, sizes_from_widths, with_full_size
from tagcontent.domain.policies.media_classifier import guess_mime_type, url_basename
from tagcontent.domain.ports.attachments import AttachmentStorePort
from tagcontent.domain.ports.media_assignments import MediaAssignmentPort
from tagcontent.domain.ports.product_images import ProductImagePort
from tagcontent.services.registry.tag_registry import TagRegistry
from tagcontent.services.resolution.type_validator import TypeValidator

logger = get_logger(__name__)

FALLBACK_OK = ValidationResult(ok=True, message="Using product image as fallback.")


class MediaResolver:
    """
    Turns (product, tag) into a ResolvedMedia:

        tag lookup -> assignment lookup -> dispatch on source kind -> type check

    Only the primary-image tag has a fallback: with no assignment, the
    product's platform image at position 0 is used. Every other tag without
    an assignment raises MediaNotFound.
    """

    def __init__(
        self,
        registry: TagRegistry,
        assignments: MediaAssignmentPort,
        attachments: AttachmentStorePort,
        images: ProductImagePort,
        validator: Optional[TypeValidator] = None,
        *,
        primary_image_tag: str = "hero_image",
        cache: Optional[TTLCache] = None,
    ) -> None:
        self.registry = registry
        self.assignments = assignments
        self.attachments = attachments
        self.images = images
        self.validator = validator or TypeValidator(registry)
        self.primary_image_tag = primary_image_tag
        self.cache = cache

    def resolve(self, product: ProductRef, tag_key: str) -> ResolvedMedia:
        if self.cache is None:
            return self._resolve(product, tag_key)
        # titles and alt text use the product name; product_id stays first for invalidate(product_id)
        key = (product.product_id, "media", tag_key, product.name)
        return self.cache.get_or_set(key, lambda: self._resolve(product, tag_key))

    # ---------------- internals ----------------

    def _resolve(self, product: ProductRef, tag_key: str) -> ResolvedMedia:
        tag = self.registry.get_tag(tag_key)
        if tag is None:
            raise TagNotFound(tag_key)

        assignment = self.assignments.get_assignment(product.product_id, tag_key)
        if assignment is None:
            return self._fallback(product, tag)

        media, mime_hint = self._dispatch(product, tag, assignment)
        validation = self.validator.validate(tag.key, media.url, mime_hint, expected_type=tag.expected_media_type)
        if not validation.ok:
            logger.debug("Type mismatch for %s on product %s: %s", tag.key, product.product_id, validation.message)
        return _with_validation(media, validation)

    def _dispatch(self, product: ProductRef, tag: Tag, assignment: MediaAssignment) -> Tuple[ResolvedMedia, Optional[str]]:
        """Returns the descriptor and the MIME hint to validate with (only uploads carry a real one)."""
        source = assignment.source
        if isinstance(source, UploadSource):
            return self._from_upload(product, tag, source)
        if isinstance(source, UrlSource):
            return self._from_url(product, tag, source), None
        if isinstance(source, PlatformImageSource):
            return self._from_platform(product, tag, source), None
        raise MediaNotFound(product.product_id, tag.key, f"Unsupported media source {type(source).__name__}")

    def _from_upload(self, product: ProductRef, tag: Tag, source: UploadSource) -> Tuple[ResolvedMedia, Optional[str]]:
        info = self.attachments.resolve_attachment(source.attachment_id)
        if info is None:
            logger.debug("Attachment %s for %s is gone", source.attachment_id, tag.key)
            raise AttachmentMissing(product.product_id, tag.key, source.attachment_id)
        hint = info.mime_type or None
        media = self._describe(
            product,
            tag,
            url=info.url,
            title=info.title or url_basename(info.url),
            alt=info.alt or info.title or "",
            mime_type=hint or guess_mime_type(info.url),
            mime_hint=hint,
            sizes=with_full_size(info.sizes, info.url),
            source_kind=SourceKind.upload,
        )
        return media, hint

    def _from_url(self, product: ProductRef, tag: Tag, source: UrlSource) -> ResolvedMedia:
        title = url_basename(source.url)
        return self._describe(
            product,
            tag,
            url=source.url,
            title=title,
            alt=title,
            mime_type=guess_mime_type(source.url),
            sizes={FULL: MediaSize(url=source.url)},
            source_kind=SourceKind.url,
        )

    def _from_platform(self, product: ProductRef, tag: Tag, source: PlatformImageSource) -> ResolvedMedia:
        image = self.images.get_image_at(product, source.position)
        if image is None:
            raise PositionOutOfRange(product.product_id, tag.key, source.position)
        return self._describe_platform(
            product,
            tag,
            image,
            title=f"{product.display_name} - Image {source.position + 1}",
            source_kind=SourceKind.platform_image,
        )

    def _fallback(self, product: ProductRef, tag: Tag) -> ResolvedMedia:
        if tag.key != self.primary_image_tag:
            raise MediaNotFound(product.product_id, tag.key)
        image = self.images.get_image_at(product, 0)
        if image is None:
            raise MediaNotFound(product.product_id, tag.key, f"No media or product image for '{tag.key}' on product {product.product_id}")
        media = self._describe_platform(
            product,
            tag,
            image,
            title=f"{product.display_name} - {tag.key} (fallback)",
            source_kind=SourceKind.fallback_platform,
        )
        return _with_validation(media, FALLBACK_OK, is_fallback=True)

    def _describe_platform(
        self, product: ProductRef, tag: Tag, image: PlatformImage, *, title: str, source_kind: SourceKind
    ) -> ResolvedMedia:
        sizes = sizes_from_widths(image.available_sizes)
        if FULL not in sizes:
            sizes[FULL] = MediaSize(url=image.url, width=image.width or 0, height=image.height or 0)
        return self._describe(
            product,
            tag,
            url=image.url,
            title=title,
            alt=image.alt or product.display_name,
            mime_type=guess_mime_type(image.url),
            sizes=sizes,
            source_kind=source_kind,
        )

    def _describe(self, product: ProductRef, tag: Tag, *, mime_hint: Optional[str] = None, **fields) -> ResolvedMedia:
        # guessed MIME types are display-only; classification uses the URL unless the store gave a real type
        return ResolvedMedia(
            coarse_type=self.validator.classify(fields["url"], mime_hint),
            validation=ValidationResult(ok=True),
            tag_key=tag.key,
            product_id=product.product_id,
            **fields,
        )


def _with_validation(media: ResolvedMedia, validation: ValidationResult, *, is_fallback: bool = False) -> ResolvedMedia:
    return replace(media, validation=validation, is_fallback=is_fallback)
