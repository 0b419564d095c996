"""Catalog HTTP client tests."""

import httpx
import pytest

from catalog.client import ApiError, CatalogClient


def test_client_category_lifecycle(api):
    """Test the category helpers against the running app."""
    created = api.categories.create({"name": "Music", "description": "Instruments"})
    assert created["name"] == "Music"

    fetched = api.categories.get_by_id(created["_id"])
    assert fetched == created

    updated = api.categories.update(created["_id"], {"description": "Instruments and audio"})
    assert updated["description"] == "Instruments and audio"

    page = api.categories.get_all(search="music")
    assert page["pagination"]["totalCount"] == 1

    deleted = api.categories.delete(created["_id"])
    assert deleted["message"] == "Category deleted successfully"
    assert api.categories.get_all()["data"] == []


def test_client_product_helpers(api, category):
    """Test the product helpers, including the category filter."""
    created = api.products.create(
        {"name": "Guitar", "price": 350, "quantity": 1, "categoryId": category["_id"]}
    )
    assert created["categoryId"]["_id"] == category["_id"]

    page = api.products.get_all(page=1, limit=5, category_id=category["_id"])
    assert [p["name"] for p in page["data"]] == ["Guitar"]
    assert page["pagination"]["pageSize"] == 5

    api.products.delete(created["_id"], hard=True)
    with pytest.raises(ApiError) as exc_info:
        api.products.get_by_id(created["_id"])
    assert exc_info.value.status == 404
    assert exc_info.value.message == "Product not found"


def test_client_raises_api_error_with_body(api, category):
    """Test that error bodies are exposed on ApiError."""
    with pytest.raises(ApiError) as exc_info:
        api.categories.create({"name": "Electronics"})
    assert exc_info.value.status == 409
    assert exc_info.value.data == {"message": "Category name already exists"}

    with pytest.raises(ApiError) as exc_info:
        api.products.create({"name": "", "price": 1})
    assert exc_info.value.status == 400
    assert exc_info.value.data["errors"]


def test_client_omits_unset_params():
    """Test that unset query parameters are not sent."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json={"data": [], "pagination": {}})

    http = httpx.Client(base_url="http://catalog.test", transport=httpx.MockTransport(handler))
    with CatalogClient(http_client=http) as client:
        client.categories.get_all(limit=20, search="")
        client.categories.delete("b" * 32, hard=False)
        client.categories.delete("b" * 32)

    assert dict(seen[0].params) == {"limit": "20"}
    assert dict(seen[1].params) == {"hard": "false"}
    assert dict(seen[2].params) == {}


def test_client_falls_back_to_reason_phrase():
    """Test the error message when the body is not JSON."""
    transport = httpx.MockTransport(lambda request: httpx.Response(502, text="upstream down"))
    http = httpx.Client(base_url="http://catalog.test", transport=transport)
    client = CatalogClient(http_client=http)

    with pytest.raises(ApiError) as exc_info:
        client.get("/categories")
    assert exc_info.value.status == 502
    assert exc_info.value.message == "Bad Gateway"
    assert exc_info.value.data == {}
