import hashlib

import pytest

from tagcontent.common.naming.slugger import is_valid_tag_key, slugify, string_name, tag_key_from_label


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Exterior Color", "exterior-color"),
        ("  Funny__Name!! ", "funny-name"),
        ("Éxämple", "example"),
        ("!!!", ""),
    ],
)
def test_slugify_examples(text, expected):
    assert slugify(text) == expected


def test_slugify_truncates_without_trailing_separator():
    assert slugify("aaaa bbbb", max_len=5) == "aaaa"


def test_tag_key_from_label_uses_underscores():
    assert tag_key_from_label("Hero Image") == "hero_image"
    assert is_valid_tag_key(tag_key_from_label("Size Chart (EU)"))


@pytest.mark.parametrize("key", ["hero_image", "a1", "x_2_y"])
def test_valid_tag_keys(key):
    assert is_valid_tag_key(key)


@pytest.mark.parametrize("key", ["Hero", "hero-image", "", "héro", None, 12])
def test_invalid_tag_keys(key):
    assert not is_valid_tag_key(key)


def test_string_name_is_prefix_and_md5():
    digest = hashlib.md5("Aqua".encode("utf-8")).hexdigest()
    assert string_name("ingredient_name", "Aqua") == f"ingredient_name_{digest}"
