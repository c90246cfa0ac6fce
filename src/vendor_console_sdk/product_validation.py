from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ValidationIssue
from .metrics import parse_amount
from .models import UploadResult
from .models_products import ProductCreate
from .upload_validation import UploadCandidate, UploadSlot


@dataclass
class ProductForm:
    """Raw add-product form input, as typed by the vendor."""

    name: str = ""
    description: str = ""
    price: str = ""
    compare_at_price: str = ""
    sku: str = ""
    category_id: str = ""
    vendor_id: str = ""
    duration: str = ""
    preview_url: str = ""


def validate_product_form(form: ProductForm, file_slot: UploadSlot) -> list[ValidationIssue]:
    """Check the form in the order the console reports problems; first issue wins."""
    if not form.name.strip() or not form.price.strip() or not form.category_id.strip() or file_slot.file is None:
        return [ValidationIssue(field="form", reason="Please fill all required fields")]

    price = parse_amount(form.price)
    if price is None or price <= 0:
        return [ValidationIssue(field="price", reason="Price must be a positive number")]

    if form.compare_at_price.strip():
        compare_at = parse_amount(form.compare_at_price)
        if compare_at is None or compare_at <= price:
            return [
                ValidationIssue(
                    field="compare_at_price",
                    reason="Compare price must be greater than regular price",
                )
            ]

    submission = file_slot.validate_for_submission()
    if not submission.ok:
        return [ValidationIssue(field="file", reason=submission.reason or "Invalid file")]
    return []


def build_product_create(
    form: ProductForm,
    file: UploadCandidate,
    file_upload: UploadResult,
    thumbnail_upload: UploadResult | None = None,
) -> ProductCreate:
    compare_at = parse_amount(form.compare_at_price) if form.compare_at_price.strip() else None
    return ProductCreate(
        name=form.name.strip(),
        description=form.description,
        price=parse_amount(form.price),
        compare_at_price=compare_at,
        sku=form.sku.strip() or None,
        category_id=form.category_id.strip(),
        vendor_id=form.vendor_id.strip() or None,
        file_key=file_upload.key,
        original_file_name=file.name,
        file_size=file.size_label,
        file_type=file.content_type or file.extension,
        duration=form.duration.strip() or None,
        preview_url=form.preview_url.strip() or None,
        thumbnail_url=thumbnail_upload.url if thumbnail_upload else None,
    )
