"""HTTP client for the catalog API.

A thin wrapper over ``httpx.Client`` that decodes JSON bodies and raises
``ApiError`` for non-2xx responses. Resource helpers mirror the endpoints:

    with CatalogClient("http://localhost:8000") as client:
        page = client.products.get_all(search="phone")
        client.products.delete(page["data"][0]["_id"], hard=True)
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status: int, message: str, data: Any = None):
        super().__init__(message)
        self.status = status
        self.message = message
        self.data = data

    def __repr__(self) -> str:
        return f"ApiError(status={self.status}, message={self.message!r})"


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop unset parameters and render booleans the way the API parses them."""
    cleaned = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        cleaned[key] = str(value).lower() if isinstance(value, bool) else value
    return cleaned


class CatalogClient:
    """Client for the catalog REST API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = http_client is None
        self.http = http_client or httpx.Client(base_url=base_url, timeout=timeout)
        self.categories = CategoryResource(self)
        self.products = ProductResource(self)

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.http.close()

    def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        response = self.http.request(method, endpoint, params=_clean_params(params), json=json)
        return self._handle_response(response)

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, data: Any = None) -> Any:
        return self.request("POST", endpoint, json=data)

    def put(self, endpoint: str, data: Any = None) -> Any:
        return self.request("PUT", endpoint, json=data)

    def delete(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("DELETE", endpoint, params=params)

    @staticmethod
    def _handle_response(response: httpx.Response) -> Any:
        if response.is_success:
            return response.json()

        try:
            data = response.json()
        except ValueError:
            data = {}
        message = data.get("message") if isinstance(data, dict) else None
        logger.debug(f"{response.request.method} {response.request.url} -> {response.status_code}")
        raise ApiError(response.status_code, message or response.reason_phrase, data)


class _Resource:
    """Endpoints for one resource: ``/<plural>`` and ``/<singular>/{id}``."""

    singular: str
    plural: str

    def __init__(self, client: CatalogClient):
        self.client = client

    def get_all(
        self,
        page: int | None = None,
        limit: int | None = None,
        search: str | None = None,
        **filters: Any,
    ) -> dict[str, Any]:
        """Get one page of records, optionally filtered by a search term."""
        params = {"page": page, "limit": limit, "search": search or None, **filters}
        return self.client.get(f"/{self.plural}", params)

    def get_by_id(self, record_id: str) -> dict[str, Any]:
        return self.client.get(f"/{self.singular}/{record_id}")

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return self.client.post(f"/{self.singular}", data)

    def update(self, record_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self.client.put(f"/{self.singular}/{record_id}", data)

    def delete(self, record_id: str, hard: bool | None = None) -> dict[str, Any]:
        """Delete a record; soft unless ``hard`` is true."""
        return self.client.delete(f"/{self.singular}/{record_id}", {"hard": hard})


class CategoryResource(_Resource):
    singular = "category"
    plural = "categories"


class ProductResource(_Resource):
    singular = "product"
    plural = "products"

    def get_all(
        self,
        page: int | None = None,
        limit: int | None = None,
        search: str | None = None,
        category_id: str | None = None,
    ) -> dict[str, Any]:
        return super().get_all(page=page, limit=limit, search=search, categoryId=category_id)
