from tagcontent.domain.enums import MediaType
from tagcontent.services.resolution.type_validator import MATCH_MESSAGE, TAG_NOT_FOUND_MESSAGE, TypeValidator


def test_match_with_explicit_type():
    res = TypeValidator().validate("product_video", "https://cdn/clip.mov", None, MediaType.video)
    assert res.ok is True
    assert res.message == MATCH_MESSAGE


def test_mismatch_names_both_labels():
    res = TypeValidator().validate("size_chart", "https://cdn/chart.pdf", None, MediaType.image)
    assert res.ok is False
    assert res.message == "Expected Image but got Document. This may not display correctly."


def test_expected_type_looked_up_in_registry(registry):
    v = TypeValidator(registry)
    assert v.validate("demo_video", "https://youtu.be/abc").ok is True
    assert v.validate("user_manual", "https://cdn/manual.jpg").ok is False


def test_unknown_tag_without_expected_type(registry):
    res = TypeValidator(registry).validate("nope", "https://cdn/a.jpg")
    assert res.ok is False
    assert res.message == TAG_NOT_FOUND_MESSAGE
    assert TypeValidator().validate("nope", "https://cdn/a.jpg").message == TAG_NOT_FOUND_MESSAGE


def test_configured_video_hosts():
    v = TypeValidator(video_hosts=["videos.example.com"])
    assert v.classify("https://videos.example.com/v/1") is MediaType.video
    assert v.classify("https://youtu.be/abc") is MediaType.image
