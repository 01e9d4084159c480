import httpx
import pytest

from tagcontent.common.settings import PlatformConfig
from tagcontent.domain.entities.product import ProductRef
from tagcontent.domain.errors import ProviderUnavailable
from tagcontent.services.platform.ecwid_images import EcwidImageProvider, image_at, image_from_data

CURRENT = {
    "id": 42,
    "media": {
        "images": [
            {
                "id": "1",
                "image160pxUrl": "https://img/a-160.jpg",
                "image800pxUrl": "https://img/a-800.jpg",
                "imageOriginalUrl": "https://img/a.jpg",
                "alt": "Front",
            },
            {"id": "2", "image400pxUrl": "https://img/b-400.jpg"},
        ]
    },
}

LEGACY = {
    "id": 7,
    "thumbnailUrl": "https://img/main-t.jpg",
    "imageUrl": "https://img/main.jpg",
    "galleryImages": [{"url": "https://img/g1.jpg", "thumbnailUrl": "https://img/g1-t.jpg"}],
}


def _provider(handler, **cfg):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return EcwidImageProvider(PlatformConfig(store_id="1003", token="secret", **cfg), client=client)


def test_current_media_images():
    first = image_at(CURRENT, 0)
    assert first.url == "https://img/a-800.jpg"
    assert first.alt == "Front"
    assert first.available_sizes == {
        160: "https://img/a-160.jpg",
        800: "https://img/a-800.jpg",
        2000: "https://img/a.jpg",
    }
    # no preferred width: the widest one is used
    assert image_at(CURRENT, 1).url == "https://img/b-400.jpg"
    assert image_at(CURRENT, 2) is None
    assert image_at(CURRENT, -1) is None


def test_legacy_fields_and_gallery():
    main = image_at(LEGACY, 0)
    assert main.url == "https://img/main.jpg"
    assert main.available_sizes[160] == "https://img/main-t.jpg"

    g = image_at(LEGACY, 1)
    assert g.url == "https://img/g1.jpg"
    assert image_at(LEGACY, 2) is None


def test_legacy_without_main_image():
    assert image_at({"smallThumbnailUrl": "https://img/s.jpg"}, 0) is None


def test_image_without_any_url():
    assert image_from_data({"alt": "nothing"}) is None


def test_null_entries_in_media_images():
    assert image_at({"media": {"images": [None, {"url": "https://img/x.jpg"}]}}, 0) is None
    assert image_at({"media": {"images": [None, {"url": "https://img/x.jpg"}]}}, 1).url == "https://img/x.jpg"


def test_provider_fetches_product_with_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json=CURRENT)

    provider = _provider(handler, api_base="https://ecwid.test/api/v3/")
    img = provider.get_image_at(ProductRef(42), 0)

    assert img.url == "https://img/a-800.jpg"
    assert seen["url"] == "https://ecwid.test/api/v3/1003/products/42"
    assert seen["auth"] == "Bearer secret"


def test_provider_missing_product():
    provider = _provider(lambda request: httpx.Response(404, json={"errorMessage": "not found"}))
    assert provider.fetch_product(42) is None
    assert provider.get_image_at(ProductRef(42), 0) is None


def _server_error(request: httpx.Request) -> httpx.Response:
    return httpx.Response(500, text="oops")


def _refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("refused", request=request)


def _not_json(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text="<html>maintenance</html>")


@pytest.mark.parametrize("handler", [_server_error, _refused, _not_json])
def test_provider_failures_raise_unavailable(handler):
    provider = _provider(handler)
    with pytest.raises(ProviderUnavailable) as ei:
        provider.get_image_at(ProductRef(42), 0)
    assert ei.value.details == {"product_id": 42}
    assert ei.value.to_dict()["code"] == "PROVIDER_UNAVAILABLE"


def test_provider_non_object_payload():
    provider = _provider(lambda request: httpx.Response(200, json=[CURRENT]))
    assert provider.get_image_at(ProductRef(42), 0) is None
