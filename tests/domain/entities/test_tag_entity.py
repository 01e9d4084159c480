import pytest

from tagcontent.domain.entities.tag import Tag
from tagcontent.domain.enums import MediaType, TagCategory
from tagcontent.domain.errors import InvalidCategory, InvalidKey, InvalidMediaType, InvalidTag


def test_tag_coerces_strings_and_cleans_text():
    t = Tag("size_chart", "  Size\x00 Chart ", "image", "  Sizing\n info ", "reference")
    assert t.label == "Size Chart"
    assert t.description == "Sizing\n info"
    assert t.expected_media_type is MediaType.image
    assert t.category is TagCategory.reference


@pytest.mark.parametrize("key", ["Size", "size-chart", "", "size chart"])
def test_tag_rejects_bad_keys(key):
    with pytest.raises(InvalidKey):
        Tag(key, "Label")


def test_tag_rejects_unknown_type_and_category():
    with pytest.raises(InvalidMediaType):
        Tag("x", "X", expected_media_type="hologram")
    with pytest.raises(InvalidCategory):
        Tag("x", "X", category="misc")


def test_tag_requires_label():
    with pytest.raises(InvalidTag):
        Tag("x", "   ")


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        Tag("BAD", "x")


def test_with_changes_never_touches_key():
    t = Tag("demo_video", "Demo", MediaType.video)
    t2 = t.with_changes(label="Demo Clip", expected_media_type="audio")
    assert t2.key == "demo_video"
    assert t2.label == "Demo Clip"
    assert t2.expected_media_type is MediaType.audio
    # original untouched
    assert t.label == "Demo"


def test_record_roundtrip_fields():
    t = Tag("user_manual", "User Manual", MediaType.document, "PDF", TagCategory.reference)
    rec = t.to_record()
    assert rec == {
        "name": "User Manual",
        "label": "User Manual",
        "description": "PDF",
        "category": "reference",
        "expectedMediaType": "document",
    }
    assert Tag.from_record("user_manual", rec) == t


def test_from_record_tolerates_legacy_and_junk():
    t = Tag.from_record("old_tag", {"name": "Old", "expected_media_type": "video", "category": "weird"})
    assert t.label == "Old"
    assert t.expected_media_type is MediaType.video
    assert t.category is TagCategory.other

    bare = Tag.from_record("bare", {})
    assert bare.label == "bare"
    assert bare.expected_media_type is MediaType.image
