"""Decoding of list endpoints into one ``{items, total_count}`` shape.

The commerce API answers list requests in three shapes:

* a paginated envelope, ``{"data": [...], "pagination": {...}}`` or
  ``{"data": {"products": [...], "pagination": {...}}}`` or
  ``{"data": [...], "total": 12}``;
* a bare array, ``[...]`` or ``{"data": [...]}``;
* a nested collection, ``{"data": {"orders": [...]}}``.

``classify_page`` maps a payload onto exactly one of those variants and
anything else is a ``DataFormatError``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import data_format_error
from .models import PaginationMeta

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class PageEnvelope:
    rows: list[Any]
    meta: PaginationMeta


@dataclass(frozen=True)
class BareList:
    rows: list[Any]


@dataclass(frozen=True)
class NestedCollection:
    rows: list[Any]
    key: str


PageShape = Union[PageEnvelope, BareList, NestedCollection]


@dataclass(frozen=True)
class DecodedPage(Generic[T]):
    items: list[T]
    total_count: int
    page: int | None
    shape: str


def classify_page(payload: object, collection_key: str) -> PageShape:
    if isinstance(payload, list):
        return BareList(rows=payload)
    if not isinstance(payload, dict):
        raise data_format_error(f"Unexpected {collection_key} response: {type(payload).__name__}", payload)

    body = payload.get("data", payload)
    if isinstance(body, list):
        meta = _read_meta(payload)
        if meta is not None:
            return PageEnvelope(rows=body, meta=meta)
        return BareList(rows=body)

    if isinstance(body, dict):
        rows = body.get(collection_key)
        if isinstance(rows, list):
            meta = _read_meta(body) or _read_meta(payload)
            if meta is not None:
                return PageEnvelope(rows=rows, meta=meta)
            return NestedCollection(rows=rows, key=collection_key)

    raise data_format_error(f"Unexpected data format received for {collection_key}", payload)


def decode_page(payload: object, collection_key: str, row_model: type[T]) -> DecodedPage[T]:
    shape = classify_page(payload, collection_key)
    items = _validate_rows(shape.rows, row_model, collection_key)
    if isinstance(shape, PageEnvelope):
        return DecodedPage(items=items, total_count=shape.meta.total, page=shape.meta.page, shape="envelope")
    if isinstance(shape, BareList):
        return DecodedPage(items=items, total_count=len(items), page=1, shape="bare_list")
    if isinstance(shape, NestedCollection):
        return DecodedPage(items=items, total_count=len(items), page=1, shape="nested")
    raise AssertionError(f"unhandled page shape {shape!r}")


def _read_meta(container: dict[str, Any]) -> PaginationMeta | None:
    raw = container.get("pagination")
    if raw is None and isinstance(container.get("total"), int):
        raw = {"total": container["total"]}
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise data_format_error("Pagination block is not an object", container)
    try:
        return PaginationMeta.model_validate(raw)
    except PydanticValidationError as exc:
        raise data_format_error(f"Invalid pagination block: {exc.errors()[0]['msg']}", container) from exc


def _validate_rows(rows: list[Any], row_model: type[T], collection_key: str) -> list[T]:
    items: list[T] = []
    for index, row in enumerate(rows):
        try:
            items.append(row_model.model_validate(row))
        except PydanticValidationError as exc:
            issue = exc.errors()[0] if exc.errors() else {"loc": (), "msg": "invalid row"}
            location = ".".join(str(part) for part in issue.get("loc", ()))
            raise data_format_error(
                f"{collection_key}[{index}] {location}: {issue.get('msg', 'invalid row')}",
                row,
            ) from exc
    return items
