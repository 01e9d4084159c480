import pytest

from tagcontent.domain.enums import MediaType
from tagcontent.domain.policies.tag_defaults import (
    DEFAULT_TAGS,
    backfill_expected_types,
    default_records,
    guess_media_type_from_tag,
    is_default_tag,
)


def test_default_set_covers_every_media_type():
    assert set(DEFAULT_TAGS) == {
        "hero_image",
        "ingredients_image",
        "size_chart",
        "demo_video",
        "user_manual",
        "audio_sample",
    }
    assert {t.expected_media_type for t in DEFAULT_TAGS.values()} == set(MediaType)
    assert is_default_tag("hero_image")
    assert not is_default_tag("custom_tag")


def test_default_records_carry_expected_type():
    recs = default_records()
    assert recs["demo_video"]["expectedMediaType"] == "video"
    assert recs["hero_image"]["label"] == "Hero Image"


@pytest.mark.parametrize(
    "key,record,expected",
    [
        ("promo_video", {}, MediaType.video),
        ("promo", {"label": "Promo Video"}, MediaType.video),
        ("promo", {"description": "a short video"}, MediaType.video),
        ("jingle", {"label": "Audio jingle"}, MediaType.audio),
        ("sound_bite", {}, MediaType.audio),
        ("care_manual", {}, MediaType.document),
        ("manual_pdf", {}, MediaType.document),
        ("datasheet", {"label": "Data Document"}, MediaType.document),
        ("datasheet", {"description": "See the manual"}, MediaType.document),
        ("lifestyle", {"label": "Lifestyle"}, MediaType.image),
    ],
)
def test_guess_media_type_from_tag(key, record, expected):
    assert guess_media_type_from_tag(key, record) == expected


def test_video_keywords_beat_audio():
    assert guess_media_type_from_tag("video_with_audio", {}) == MediaType.video


def test_backfill_migrates_legacy_field_and_guesses_missing():
    records = {
        "old_clip": {"label": "Clip", "expected_media_type": "video"},
        "howto_manual": {"label": "How-to"},
        "hero_image": {"label": "Hero", "expectedMediaType": "image"},
    }
    out, changed = backfill_expected_types(records)

    assert changed == ["old_clip", "howto_manual"]
    assert out["old_clip"]["expectedMediaType"] == "video"
    assert "expected_media_type" not in out["old_clip"]
    assert out["howto_manual"]["expectedMediaType"] == "document"
    assert out["hero_image"] == records["hero_image"]
    # input untouched
    assert "expectedMediaType" not in records["old_clip"]


def test_backfill_never_overwrites_present_type():
    records = {"demo_video": {"label": "Demo Video", "expectedMediaType": "image"}}
    out, changed = backfill_expected_types(records)
    assert changed == []
    assert out["demo_video"]["expectedMediaType"] == "image"
