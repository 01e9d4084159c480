from http import HTTPStatus


def test_healthz(api_client):
    r = api_client.get("/healthz")
    assert r.status_code == HTTPStatus.OK
    body = r.json()
    assert body["ok"] is True
    assert body["primary_image_tag"] == "hero_image"
    assert body["default_language"] == "en"


def test_list_default_tags(api_client):
    r = api_client.get("/api/media-tags")
    assert r.status_code == HTTPStatus.OK
    by_key = {t["key"]: t for t in r.json()}
    assert "hero_image" in by_key
    assert by_key["demo_video"]["expected_media_type"] == "video"
    assert by_key["demo_video"]["expected_media_type_label"] == "Video"
    assert by_key["hero_image"]["is_default"] is True


def test_list_by_category(api_client):
    r = api_client.get("/api/media-tags/category/reference")
    assert r.status_code == HTTPStatus.OK
    assert {t["category"] for t in r.json()} == {"reference"}

    bad = api_client.get("/api/media-tags/category/bogus")
    assert bad.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
    assert bad.json()["detail"]["code"] == "TAG_INVALID_CATEGORY"


def test_create_update_delete_tag(api_client, cache):
    cache.set(("stale",), 1)

    r = api_client.post(
        "/api/media-tags",
        json={"key": "promo_banner", "label": "Promo Banner", "category": "media"},
    )
    assert r.status_code == HTTPStatus.CREATED
    body = r.json()
    assert body["expected_media_type"] == "image"
    assert body["is_default"] is False
    assert len(cache) == 0

    r = api_client.put("/api/media-tags/promo_banner", json={"expected_media_type": "video"})
    assert r.status_code == HTTPStatus.OK
    assert r.json()["expected_media_type"] == "video"
    assert r.json()["label"] == "Promo Banner"

    assert api_client.get("/api/media-tags/promo_banner").status_code == HTTPStatus.OK
    assert api_client.delete("/api/media-tags/promo_banner").status_code == HTTPStatus.NO_CONTENT
    assert api_client.get("/api/media-tags/promo_banner").status_code == HTTPStatus.NOT_FOUND


def test_create_rejections(api_client):
    dup = api_client.post("/api/media-tags", json={"key": "hero_image", "label": "Again"})
    assert dup.status_code == HTTPStatus.CONFLICT
    assert dup.json()["detail"]["code"] == "TAG_DUPLICATE_KEY"

    bad_key = api_client.post("/api/media-tags", json={"key": "Bad Key", "label": "Bad"})
    assert bad_key.status_code == HTTPStatus.UNPROCESSABLE_ENTITY

    bad_type = api_client.post(
        "/api/media-tags", json={"key": "x", "label": "X", "expected_media_type": "hologram"}
    )
    assert bad_type.status_code == HTTPStatus.UNPROCESSABLE_ENTITY


def test_default_tags_are_protected(api_client):
    r = api_client.delete("/api/media-tags/hero_image")
    assert r.status_code == HTTPStatus.FORBIDDEN
    assert r.json()["detail"]["code"] == "TAG_PROTECTED"
    assert api_client.get("/api/media-tags/hero_image").status_code == HTTPStatus.OK


def test_missing_tag_writes(api_client):
    assert api_client.delete("/api/media-tags/nope").status_code == HTTPStatus.NOT_FOUND
    r = api_client.put("/api/media-tags/nope", json={"label": "Nope"})
    assert r.status_code == HTTPStatus.NOT_FOUND
    assert r.json()["detail"]["code"] == "TAG_NOT_FOUND"
