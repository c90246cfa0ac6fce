from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Callable, Generic, Mapping, TypeVar

from pydantic import BaseModel

from .exceptions import ApiError, DataFormatError
from .pagination import decode_page
from .ui_errors import ViewError, to_view_error
from .view_state import ViewState, resolve_view_state

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class PageRequest:
    page: int
    page_size: int
    filters: Mapping[str, Any] = field(default_factory=dict)
    sort_by: str | None = None
    sort_order: str | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


Fetcher = Callable[[PageRequest], object]
Listener = Callable[["PaginatedCollection[Any]"], None]


@dataclass(frozen=True)
class CollectionSnapshot(Generic[T]):
    rows: tuple[T, ...] = ()
    total_count: int = 0
    # False when the server returned the whole collection in one response and
    # paging happens on this side.
    server_paged: bool = True


def clean_filters(filters: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in filters.items() if value not in (None, "")}


class PaginatedCollection(Generic[T]):
    """Page, filter and item state for one remote list.

    Each refetch is stamped with a token from a monotonically increasing
    counter; a response that arrives after a newer refetch was issued is
    dropped, so a slow stale page can never overwrite a fresher one.
    """

    def __init__(
        self,
        name: str,
        fetch: Fetcher,
        row_model: type[T],
        *,
        collection_key: str | None = None,
        page_size: int = 5,
        sort_by: str | None = None,
        sort_order: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self.name = name
        self.row_model = row_model
        self.collection_key = collection_key or name
        self.sort_by = sort_by
        self.sort_order = sort_order
        self._fetch = fetch
        self._page = 1
        self._page_size = page_size
        self._filters: dict[str, Any] = clean_filters(filters or {})
        self._snapshot: CollectionSnapshot[T] = CollectionSnapshot()
        self._error: ViewError | None = None
        self._tokens = count(1)
        self._current_token = 0
        self._loading = False
        self._listeners: list[Listener] = []

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def filters(self) -> dict[str, Any]:
        return dict(self._filters)

    @property
    def total_count(self) -> int:
        return self._snapshot.total_count

    @property
    def total_pages(self) -> int:
        return math.ceil(self._snapshot.total_count / self._page_size)

    @property
    def items(self) -> list[T]:
        rows = self._snapshot.rows
        if self._snapshot.server_paged:
            return list(rows)
        start = (self._page - 1) * self._page_size
        return list(rows[start : start + self._page_size])

    @property
    def error(self) -> ViewError | None:
        return self._error

    @property
    def request_token(self) -> int:
        return self._current_token

    @property
    def view_state(self) -> ViewState:
        return resolve_view_state(loading=self._loading, has_data=bool(self._snapshot.rows), error=self._error)

    @property
    def has_previous(self) -> bool:
        return self._page > 1

    @property
    def has_next(self) -> bool:
        return self._page < self.total_pages

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def set_filter(self, **filters: Any) -> bool:
        """Merge filters (None or "" removes one), go back to page 1 and refetch."""
        merged = {**self._filters, **filters}
        self._filters = clean_filters(merged)
        self._page = 1
        return self.refetch()

    def set_search(self, term: str | None) -> bool:
        return self.set_filter(search=(term or "").strip() or None)

    def go_to_page(self, page: int) -> bool:
        if page < 1 or page > self.total_pages:
            return False
        self._page = page
        return self.refetch()

    def next_page(self) -> bool:
        return self.go_to_page(self._page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self._page - 1)

    def build_request(self) -> PageRequest:
        return PageRequest(
            page=self._page,
            page_size=self._page_size,
            filters=dict(self._filters),
            sort_by=self.sort_by,
            sort_order=self.sort_order,
        )

    def refetch(self) -> bool:
        """Fetch the current page; True when the response was applied."""
        token = next(self._tokens)
        self._current_token = token
        self._loading = True
        request = self.build_request()
        logger.info(
            "collection_fetch_started",
            extra={"collection": self.name, "page": request.page, "token": token},
        )
        try:
            payload = self._fetch(request)
            decoded = decode_page(payload, self.collection_key, self.row_model)
        except DataFormatError as exc:
            if self._is_stale(token):
                return False
            logger.warning("collection_data_format_error", extra={"collection": self.name, "reason": exc.message})
            self._commit(CollectionSnapshot(), to_view_error(exc))
            return False
        except ApiError as exc:
            if self._is_stale(token):
                return False
            logger.warning(
                "collection_fetch_failed",
                extra={"collection": self.name, "code": exc.code, "status_code": exc.status_code},
            )
            # Keep the rows that were already on screen.
            self._commit(self._snapshot, to_view_error(exc))
            return False

        if self._is_stale(token):
            return False
        snapshot = CollectionSnapshot(
            rows=tuple(decoded.items),
            total_count=decoded.total_count,
            server_paged=decoded.shape == "envelope",
        )
        self._commit(snapshot, None)
        logger.info(
            "collection_fetch_applied",
            extra={"collection": self.name, "token": token, "total": decoded.total_count, "shape": decoded.shape},
        )
        if self._page > 1 and self._page > self.total_pages:
            # The page emptied underneath us, typically after a delete.
            self._page = max(self.total_pages, 1)
            if snapshot.server_paged:
                return self.refetch()
        return True

    def _is_stale(self, token: int) -> bool:
        if token == self._current_token:
            return False
        logger.info(
            "collection_stale_response_discarded",
            extra={"collection": self.name, "token": token, "current_token": self._current_token},
        )
        return True

    def _commit(self, snapshot: CollectionSnapshot[T], error: ViewError | None) -> None:
        self._snapshot = snapshot
        self._error = error
        self._loading = False
        for listener in list(self._listeners):
            listener(self)
