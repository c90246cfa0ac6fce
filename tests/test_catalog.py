from __future__ import annotations

import json

import responses

from vendor_console_sdk.catalog import ProductCatalog
from vendor_console_sdk.clients.products_client import ProductsClient
from vendor_console_sdk.product_validation import ProductForm
from vendor_console_sdk.upload_validation import MIB, UploadCandidate, digital_file_slot, thumbnail_slot

BASE_URL = "https://api.example.com"
PRODUCTS_URL = f"{BASE_URL}/vendor/products"


def _product(product_id: int, published: bool = True) -> dict:
    return {"id": product_id, "name": f"Product {product_id}", "price": "19.99", "is_published": published, "is_active": True}


def _catalog(http) -> ProductCatalog:
    return ProductCatalog(ProductsClient(http=http, access_token="tok"))


def _form() -> ProductForm:
    return ProductForm(name="Synth pack", description="Presets", price="19.99", compare_at_price="29.99", category_id="4")


@responses.activate
def test_add_product_uploads_then_creates_then_refetches(http) -> None:
    responses.add(responses.POST, f"{BASE_URL}/product/upload", json={"key": "files/1", "url": "https://cdn/files/1"})
    responses.add(responses.POST, f"{BASE_URL}/product/upload", json={"key": "thumbs/1", "url": "https://cdn/thumbs/1"})
    responses.add(responses.POST, f"{BASE_URL}/product", json={"success": True, "product_id": 11})
    responses.add(responses.GET, PRODUCTS_URL, json={"data": {"products": [_product(11, False)], "pagination": {"total": 1}}})

    file_slot = digital_file_slot()
    file_slot.select(UploadCandidate.from_bytes("pack.zip", b"PK" * 10, "application/zip"))
    cover = thumbnail_slot()
    cover.select(UploadCandidate.from_bytes("cover.webp", b"RIFF", "image/webp"))

    catalog = _catalog(http)
    result = catalog.add_product(_form(), file_slot, cover)
    assert result.ok
    created = json.loads(responses.calls[2].request.body)
    assert created["file_key"] == "files/1"
    assert created["thumbnail_url"] == "https://cdn/thumbs/1"
    assert created["original_file_name"] == "pack.zip"
    assert created["price"] == "19.99"
    assert file_slot.file is None
    assert catalog.products.items[0].display_status.label == "Draft"


def test_invalid_form_makes_no_calls(http) -> None:
    catalog = _catalog(http)
    file_slot = digital_file_slot()
    file_slot.select(UploadCandidate(name="big.mp4", content_type="video/mp4", size=200 * MIB))
    result = catalog.add_product(_form(), file_slot)
    assert not result.ok
    assert result.message == "File size exceeds 100MB limit"
    assert file_slot.file is None


@responses.activate
def test_upload_failure_is_reported(http) -> None:
    responses.add(responses.POST, f"{BASE_URL}/product/upload", json={"message": "Storage full"}, status=507)
    file_slot = digital_file_slot()
    file_slot.select(UploadCandidate.from_bytes("guide.pdf", b"%PDF", "application/pdf"))
    result = _catalog(http).add_product(_form(), file_slot)
    assert not result.ok
    assert result.message == "Storage full"
    assert file_slot.file is not None
    assert len(responses.calls) == 1


@responses.activate
def test_delete_then_refetch(http) -> None:
    responses.add(responses.GET, PRODUCTS_URL, json={"data": {"products": [_product(1), _product(2)], "pagination": {"total": 2}}})
    responses.add(responses.GET, PRODUCTS_URL, json={"data": {"products": [_product(2)], "pagination": {"total": 1}}})
    responses.add(responses.DELETE, f"{BASE_URL}/product/1", json={"success": True})
    catalog = _catalog(http)
    catalog.products.refetch()
    assert catalog.delete_product(1).ok
    assert [product.id for product in catalog.products.items] == [2]


@responses.activate
def test_status_filter_all_is_not_sent(http) -> None:
    responses.add(responses.GET, PRODUCTS_URL, json={"data": {"products": [], "pagination": {"total": 0}}})
    catalog = _catalog(http)
    catalog.filter_status("all")
    catalog.filter_status("published")
    first, second = responses.calls
    assert "status" not in first.request.url
    assert "status=published" in second.request.url


@responses.activate
def test_category_failure_is_panel_local(http) -> None:
    responses.add(responses.GET, f"{BASE_URL}/category", body=b"not json", status=200)
    catalog = _catalog(http)
    assert catalog.load_categories() is False
    assert catalog.categories_error.kind == "data_format"
    assert catalog.products.error is None
