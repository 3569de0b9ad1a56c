"""HTTP product repository: forwards every operation to a remote catalog API."""

from typing import Any, Dict, List, Optional
import httpx
from pydantic import ValidationError
from framework.config import settings
from framework.exceptions.handler import RepositoryTransportError
from framework.logging.logger import get_logger
from framework.response import ResponseModel
from ..models import Product, ProductCreate, ProductUpdate, SearchFilters, to_wire
from .base import IProductRepository

logger = get_logger("http_product_repository")

_NOT_FOUND = object()


def _format_number(value: float) -> str:
    """500.0 -> "500", 19.99 -> "19.99"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def build_search_params(query: str, filters: Optional[SearchFilters] = None) -> Dict[str, str]:
    """Query string for GET {base}/search; filter params only when the field is set."""
    params = {"q": query}
    if filters is None:
        return params
    if filters.category is not None:
        params["category"] = filters.category
    if filters.min_price is not None:
        params["minPrice"] = _format_number(filters.min_price)
    if filters.max_price is not None:
        params["maxPrice"] = _format_number(filters.max_price)
    if filters.in_stock is not None:
        params["inStock"] = _format_bool(filters.in_stock)
    return params


class HttpProductRepository(IProductRepository):
    """
    Remote catalog client.

    Address scheme (base = PRODUCTS_API_URL):
        GET    {base}                   all products
        GET    {base}/{id}              one product (404 -> None)
        POST   {base}                   create
        PUT    {base}/{id}              partial update (404 -> None)
        DELETE {base}/{id}              delete (404 -> False)
        GET    {base}?category=...      by category
        GET    {base}?inStock=true      in stock
        GET    {base}/search?q=...      search (+ category/minPrice/maxPrice/inStock)

    Responses may be bare JSON or wrapped in the {"code", "message", "data"}
    envelope used by the catalog API. Any other failure raises
    RepositoryTransportError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        self.base_url = (base_url or settings.PRODUCTS_API_URL).rstrip("/")
        self.timeout = settings.PRODUCTS_API_TIMEOUT if timeout is None else timeout
        self.token = token if token is not None else settings.PRODUCTS_API_TOKEN
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            headers = {"Accept": "application/json"}
            if self.token:
                headers["Authorization"] = f"Bearer {self.token}"
            self._client = httpx.AsyncClient(timeout=self.timeout, headers=headers)
        return self._client

    async def aclose(self) -> None:
        """Close the underlying client if this repository created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str = "",
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        not_found_ok: bool = False
    ) -> Any:
        url = f"{self.base_url}{path}"
        detail = {"method": method, "url": url, "params": params}
        logger.debug(f"{method} {url} params={params}")

        try:
            response = await self._get_client().request(method, url, params=params, json=json)
        except httpx.HTTPError as e:
            logger.error(f"Catalog request failed: {method} {url} | {type(e).__name__}: {e}")
            raise RepositoryTransportError(
                f"Catalog request failed: {method} {url}", detail=detail
            ) from e

        if not_found_ok and response.status_code == 404:
            return _NOT_FOUND

        if response.is_error:
            logger.error(f"Catalog returned HTTP {response.status_code}: {method} {url}")
            raise RepositoryTransportError(
                f"Catalog returned HTTP {response.status_code} for {method} {url}",
                detail={**detail, "status_code": response.status_code}
            )

        if not response.content:
            return None

        try:
            body = response.json()
        except ValueError as e:
            raise RepositoryTransportError(
                f"Catalog returned invalid JSON for {method} {url}", detail=detail
            ) from e

        return ResponseModel.unwrap(body)

    def _parse_product(self, data: Any) -> Product:
        try:
            return Product.model_validate(data)
        except ValidationError as e:
            raise RepositoryTransportError(
                "Catalog returned a malformed product", detail=e.errors(include_url=False)
            ) from e

    def _parse_products(self, data: Any) -> List[Product]:
        if not isinstance(data, list):
            raise RepositoryTransportError(
                "Catalog returned a malformed product list",
                detail={"type": type(data).__name__}
            )
        return [self._parse_product(item) for item in data]

    async def get_all(self) -> List[Product]:
        return self._parse_products(await self._request("GET"))

    async def get_by_id(self, id: int) -> Optional[Product]:
        data = await self._request("GET", f"/{id}", not_found_ok=True)
        if data is _NOT_FOUND or data is None:
            return None
        return self._parse_product(data)

    async def create(self, data: ProductCreate) -> Product:
        created = await self._request("POST", json=to_wire(data))
        return self._parse_product(created)

    async def update(self, id: int, changes: ProductUpdate) -> Optional[Product]:
        data = await self._request(
            "PUT", f"/{id}", json=to_wire(changes, exclude_unset=True, exclude_none=True),
            not_found_ok=True
        )
        if data is _NOT_FOUND or data is None:
            return None
        return self._parse_product(data)

    async def delete(self, id: int) -> bool:
        data = await self._request("DELETE", f"/{id}", not_found_ok=True)
        return data is not _NOT_FOUND

    async def get_by_category(self, category: str) -> List[Product]:
        return self._parse_products(await self._request("GET", params={"category": category}))

    async def get_in_stock(self) -> List[Product]:
        return self._parse_products(await self._request("GET", params={"inStock": "true"}))

    async def search(self, query: str, filters: Optional[SearchFilters] = None) -> List[Product]:
        params = build_search_params(query, filters)
        return self._parse_products(await self._request("GET", "/search", params=params))
