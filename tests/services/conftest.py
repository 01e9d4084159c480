# tests/services/conftest.py
from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from tagcontent.common.cache.ttl_cache import TTLCache
from tagcontent.domain.entities.product import PlatformImage
from tagcontent.services.api.app import create_app
from tagcontent.services.api.deps import get_cache, get_facade, get_tag_registry
from tagcontent.services.registry.tag_registry import TagRegistry
from tagcontent.services.resolution.facade import ResolutionFacade
from tagcontent.services.resolution.media_resolver import MediaResolver
from tagcontent.services.resolution.text_resolver import TextResolver
from tagcontent.services.resolution.type_validator import TypeValidator
from tagcontent.services.storage.memory import (
    InMemoryAssignments,
    InMemoryAttachments,
    InMemoryProductContent,
    InMemoryTagStorage,
    RecordingRegistrar,
    StaticProductImages,
)


@pytest.fixture()
def tag_storage() -> InMemoryTagStorage:
    return InMemoryTagStorage()


@pytest.fixture()
def registry(tag_storage) -> TagRegistry:
    return TagRegistry(tag_storage)


@pytest.fixture()
def assignments() -> InMemoryAssignments:
    return InMemoryAssignments()


@pytest.fixture()
def attachments() -> InMemoryAttachments:
    return InMemoryAttachments()


@pytest.fixture()
def images() -> StaticProductImages:
    return StaticProductImages(
        {
            42: [
                PlatformImage(
                    url="https://cdn/42-main.jpg",
                    alt="Main",
                    available_sizes={
                        160: "https://cdn/42-main-160.jpg",
                        400: "https://cdn/42-main-400.jpg",
                        800: "https://cdn/42-main-800.jpg",
                        1500: "https://cdn/42-main-1500.jpg",
                    },
                ),
                PlatformImage(url="https://cdn/42-gallery-1.png"),
            ]
        }
    )


@pytest.fixture()
def content() -> InMemoryProductContent:
    return InMemoryProductContent()


@pytest.fixture()
def registrar() -> RecordingRegistrar:
    return RecordingRegistrar()


@pytest.fixture()
def cache() -> TTLCache:
    return TTLCache(ttl=300, max_size=100)


@pytest.fixture()
def media_resolver(registry, assignments, attachments, images) -> MediaResolver:
    return MediaResolver(registry, assignments, attachments, images, TypeValidator(registry))


@pytest.fixture()
def text_resolver(registrar) -> TextResolver:
    return TextResolver("en", [registrar])


@pytest.fixture()
def facade(media_resolver, text_resolver, content) -> ResolutionFacade:
    return ResolutionFacade(media_resolver, text_resolver, content=content)


@pytest.fixture()
def api_client(tag_storage, facade, cache):
    """
    A TestClient wired to the in-memory storage and facade of this test,
    so assignments made through the fixtures are visible to the API. Each
    request gets its own registry sharing the test cache, as the app does.
    """
    app = create_app()
    app.dependency_overrides[get_tag_registry] = lambda: TagRegistry(tag_storage, cache=cache)
    app.dependency_overrides[get_facade] = lambda: facade
    app.dependency_overrides[get_cache] = lambda: cache

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
