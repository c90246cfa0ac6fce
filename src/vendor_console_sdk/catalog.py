from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .clients.products_client import ALL_STATUSES, ProductsClient
from .collection import PaginatedCollection
from .exceptions import ApiError, ValidationIssue
from .models import Category, UploadResult
from .models_products import Product
from .product_validation import ProductForm, build_product_create, validate_product_form
from .ui_errors import ViewError, to_view_error
from .upload_validation import UploadSlot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogResult:
    ok: bool
    issues: list[ValidationIssue] = field(default_factory=list)
    error: ViewError | None = None
    response: dict[str, Any] | None = None

    @property
    def message(self) -> str | None:
        if self.issues:
            return self.issues[0].reason
        if self.error:
            return self.error.message
        return None


class ProductCatalog:
    """Vendor product list with the add and delete flows that mutate it."""

    def __init__(self, client: ProductsClient, *, page_size: int = 5) -> None:
        self.client = client
        self.products: PaginatedCollection[Product] = PaginatedCollection(
            "products",
            client.fetch_page,
            Product,
            page_size=page_size,
        )
        self.categories: list[Category] = []
        self.categories_error: ViewError | None = None
        self.busy = False

    def search(self, term: str | None) -> bool:
        return self.products.set_search(term)

    def filter_status(self, status: str | None) -> bool:
        return self.products.set_filter(status=None if status == ALL_STATUSES else status)

    def load_categories(self) -> bool:
        try:
            self.categories = self.client.list_categories()
        except ApiError as exc:
            logger.warning("categories_fetch_failed", extra={"code": exc.code, "status_code": exc.status_code})
            self.categories_error = to_view_error(exc)
            return False
        self.categories_error = None
        return True

    def add_product(self, form: ProductForm, file_slot: UploadSlot, thumbnail_slot: UploadSlot | None = None) -> CatalogResult:
        if self.busy:
            return CatalogResult(ok=False, issues=[ValidationIssue("form", "Another product change is in progress")])
        issues = validate_product_form(form, file_slot)
        if not issues and thumbnail_slot is not None and thumbnail_slot.file is not None:
            thumbnail_check = thumbnail_slot.validate_for_submission()
            if not thumbnail_check.ok:
                issues = [ValidationIssue("thumbnail", thumbnail_check.reason or "Invalid thumbnail")]
        if issues:
            logger.info("product_form_rejected", extra={"field": issues[0].field})
            return CatalogResult(ok=False, issues=issues)

        file = file_slot.file
        if file is None:
            return CatalogResult(ok=False, issues=[ValidationIssue("file", "No file selected")])
        thumbnail = thumbnail_slot.file if thumbnail_slot is not None else None

        self.busy = True
        try:
            file_upload = self.client.upload_file(file, kind="product")
            thumbnail_upload: UploadResult | None = None
            if thumbnail is not None:
                thumbnail_upload = self.client.upload_file(thumbnail, kind="thumbnail")
            payload = build_product_create(form, file, file_upload, thumbnail_upload)
            response = self.client.create_product(payload)
        except ApiError as exc:
            logger.warning("product_create_failed", extra={"code": exc.code, "status_code": exc.status_code})
            return CatalogResult(ok=False, error=to_view_error(exc))
        finally:
            self.busy = False

        logger.info("product_created", extra={"file_key": file_upload.key})
        file_slot.clear()
        if thumbnail_slot is not None:
            thumbnail_slot.clear()
        self.products.refetch()
        return CatalogResult(ok=True, response=response)

    def delete_product(self, product_id: int | str) -> CatalogResult:
        if self.busy:
            return CatalogResult(ok=False, issues=[ValidationIssue("form", "Another product change is in progress")])
        self.busy = True
        try:
            deleted = self.client.delete_product(product_id)
        except ApiError as exc:
            logger.warning(
                "product_delete_failed",
                extra={"product_id": str(product_id), "code": exc.code, "status_code": exc.status_code},
            )
            return CatalogResult(ok=False, error=to_view_error(exc))
        finally:
            self.busy = False
        if not deleted:
            return CatalogResult(ok=False, error=ViewError(kind="api", message="Failed to delete product"))
        logger.info("product_deleted", extra={"product_id": str(product_id)})
        self.products.refetch()
        return CatalogResult(ok=True)
