from http import HTTPStatus

from tagcontent.domain.entities.localized_text import Ingredient, LocalizedTextEntry, ProductDescription
from tagcontent.domain.entities.media_source import UrlSource


def test_single_media_with_size_and_name(api_client):
    r = api_client.get(
        "/api/products/42/media/hero_image",
        params={"size": "thumbnail", "name": "Lavender Soap"},
    )
    assert r.status_code == HTTPStatus.OK
    body = r.json()
    assert body["source_kind"] == "fallback_platform"
    assert body["is_fallback"] is True
    assert body["title"] == "Lavender Soap - hero_image (fallback)"
    assert body["size_url"] == "https://cdn/42-main-160.jpg"
    assert body["validation"]["ok"] is True
    assert body["sizes"]["full"]["width"] == 1500


def test_all_media_for_product(api_client, assignments):
    assignments.assign(42, "size_chart", UrlSource("https://cdn/chart.pdf"))

    r = api_client.get("/api/products/42/media")
    assert r.status_code == HTTPStatus.OK
    body = r.json()
    assert set(body) == {"hero_image", "size_chart"}
    assert body["size_chart"]["coarse_type"] == "document"
    assert body["size_chart"]["validation"]["ok"] is False
    assert body["size_chart"]["size_url"] is None


def test_media_errors(api_client):
    missing = api_client.get("/api/products/42/media/size_chart")
    assert missing.status_code == HTTPStatus.NOT_FOUND
    assert missing.json()["detail"]["code"] == "MEDIA_NOT_FOUND"

    unknown = api_client.get("/api/products/42/media/not_a_tag")
    assert unknown.status_code == HTTPStatus.NOT_FOUND
    assert unknown.json()["detail"]["code"] == "TAG_NOT_FOUND"

    assert api_client.get("/api/products/0/media").status_code == HTTPStatus.UNPROCESSABLE_ENTITY


def test_ingredients_by_language(api_client, content):
    content.set_ingredients(
        42,
        [
            Ingredient(LocalizedTextEntry("Aqua", {"nl": "Water"}), LocalizedTextEntry("Solvent")),
            Ingredient(LocalizedTextEntry("Glycerin")),
        ],
    )
    r = api_client.get("/api/products/42/ingredients", params={"lang": "nl_NL"})
    assert r.status_code == HTTPStatus.OK
    body = r.json()
    assert body["product_id"] == 42
    assert body["language"] == "nl"
    assert [i["name"] for i in body["items"]] == ["Water", "Glycerin"]


def test_ingredients_from_sku(api_client, content):
    content.set_sku_ingredients("SOAP-1", [Ingredient(LocalizedTextEntry("Aqua"))])
    r = api_client.get("/api/products/42/ingredients", params={"sku": "SOAP-1"})
    assert [i["name"] for i in r.json()["items"]] == ["Aqua"]
    assert r.json()["language"] == "en"


def test_descriptions(api_client, content):
    content.set_descriptions(
        42, [ProductDescription("care", content=LocalizedTextEntry("Keep dry", {"de": "Trocken lagern"}))]
    )
    r = api_client.get("/api/products/42/descriptions", params={"lang": "de"})
    assert r.status_code == HTTPStatus.OK
    assert r.json()["items"] == [
        {"type": "care", "title": "Care Instructions", "content": "Trocken lagern", "language": "de"}
    ]

    one = api_client.get("/api/products/42/descriptions/care")
    assert one.status_code == HTTPStatus.OK
    assert one.json()["content"] == "Keep dry"

    assert api_client.get("/api/products/42/descriptions/warranty").status_code == HTTPStatus.NOT_FOUND
