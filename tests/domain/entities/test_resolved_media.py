import pytest

from tagcontent.domain.entities.product import PlatformImage, ProductRef
from tagcontent.domain.entities.resolved_media import MediaSize, ResolvedMedia, ValidationResult
from tagcontent.domain.enums import MediaType, SourceKind


def _media(sizes):
    return ResolvedMedia(
        url="https://cdn/a.jpg",
        title="a.jpg",
        alt="",
        mime_type="image/jpeg",
        coarse_type=MediaType.image,
        source_kind=SourceKind.url,
        validation=ValidationResult(ok=True),
        sizes=sizes,
    )


SIZES = {
    "thumbnail": MediaSize("https://cdn/t.jpg", 160),
    "large": MediaSize("https://cdn/l.jpg", 800),
    "original": MediaSize("https://cdn/o.jpg", 2000),
}


@pytest.mark.parametrize(
    "size,expected",
    [
        ("thumbnail", "https://cdn/t.jpg"),
        ("large", "https://cdn/l.jpg"),
        ("full", "https://cdn/o.jpg"),
        ("medium", "https://cdn/l.jpg"),
        ("bogus", "https://cdn/a.jpg"),
    ],
)
def test_url_for_size_fallback_chain(size, expected):
    assert _media(SIZES).url_for_size(size) == expected


def test_url_for_size_without_sizes_returns_url():
    assert _media({}).url_for_size("thumbnail") == "https://cdn/a.jpg"


def test_thumbnail_falls_back_to_smallest():
    m = _media({"large": MediaSize("https://cdn/l.jpg", 800), "extra-large": MediaSize("https://cdn/xl.jpg", 1500)})
    assert m.url_for_size("thumbnail") == "https://cdn/l.jpg"
    assert m.url_for_size("large") == "https://cdn/l.jpg"


def test_as_dict_uses_plain_values():
    d = _media({}).as_dict()
    assert d["coarse_type"] == "image"
    assert d["source_kind"] == "url"
    assert d["validation"] == {"ok": True, "message": ""}


def test_product_ref_requires_positive_id():
    with pytest.raises(ValueError):
        ProductRef(0)
    assert ProductRef(5).display_name == "Product"
    assert ProductRef(5, name="Soap").display_name == "Soap"


def test_platform_image_largest():
    img = PlatformImage("https://cdn/x.jpg", available_sizes={160: "s", 800: "l"})
    assert img.largest() == (800, "l")
    assert PlatformImage("https://cdn/x.jpg").largest() is None
