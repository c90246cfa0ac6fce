from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..collection import PageRequest
from ..exceptions import data_format_error
from ..models import Category, UploadResult
from ..models_products import Product, ProductCreate, ProductQuery
from ..pagination import DecodedPage, decode_page
from ..upload_validation import UploadCandidate
from .base import BaseClient

ALL_STATUSES = "all"


def build_product_params(query: ProductQuery) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": query.limit, "offset": query.offset}
    if query.search:
        params["search"] = query.search
    if query.status and query.status != ALL_STATUSES:
        params["status"] = query.status
    return params


def product_query_for(request: PageRequest) -> ProductQuery:
    return ProductQuery(
        limit=request.page_size,
        offset=request.offset,
        search=request.filters.get("search"),
        status=request.filters.get("status"),
    )


@dataclass
class ProductsClient(BaseClient):
    def fetch_page(self, request: PageRequest) -> object:
        return self._request(
            "GET",
            "/vendor/products",
            params=build_product_params(product_query_for(request)),
            module="products",
            operation="list_products",
        )

    def list_products(self, query: ProductQuery | None = None) -> DecodedPage[Product]:
        payload = self._request(
            "GET",
            "/vendor/products",
            params=build_product_params(query or ProductQuery()),
            module="products",
            operation="list_products",
        )
        return decode_page(payload, "products", Product)

    def list_categories(self) -> list[Category]:
        payload = self._request("GET", "/category", module="products", operation="list_categories")
        return decode_page(payload, "categories", Category).items

    def upload_file(self, candidate: UploadCandidate, *, kind: str = "product") -> UploadResult:
        """Send one file as multipart form data; ``kind`` is "product" or "thumbnail"."""
        with candidate.open() as handle:
            payload = self._request(
                "POST",
                "/product/upload",
                files={"file": (candidate.name, handle, candidate.content_type or "application/octet-stream")},
                form_data={"type": kind, "originalFileName": candidate.name},
                module="products",
                operation=f"upload_{kind}",
            )
        if not isinstance(payload, dict):
            raise data_format_error("Expected upload response to be a JSON object", payload)
        body = payload.get("data", payload)
        if not isinstance(body, dict) or not body.get("key"):
            raise data_format_error("Upload response did not include a file key", payload)
        return UploadResult.model_validate(body)

    def create_product(self, product: ProductCreate) -> dict[str, Any]:
        payload = self._request(
            "POST",
            "/product",
            json_body=product.model_dump(mode="json", exclude_none=True),
            module="products",
            operation="create_product",
        )
        return payload if isinstance(payload, dict) else {}

    def delete_product(self, product_id: int | str) -> bool:
        payload = self._request("DELETE", f"/product/{product_id}", module="products", operation="delete_product")
        if isinstance(payload, dict) and "success" in payload:
            return bool(payload["success"])
        return True
