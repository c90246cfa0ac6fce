from __future__ import annotations

from dataclasses import dataclass

from ..collection import PageRequest
from ..models import SortOrder
from ..models_orders import Order, OrderQuery
from ..pagination import DecodedPage, decode_page
from .base import BaseClient


def order_query_for(request: PageRequest) -> OrderQuery:
    return OrderQuery(
        limit=request.page_size,
        page=request.page,
        sort_by=request.sort_by or "created_at",
        sort_order=SortOrder(request.sort_order or SortOrder.DESC.value),
    )


@dataclass
class OrdersClient(BaseClient):
    def fetch_page(self, request: PageRequest) -> object:
        return self._request(
            "GET",
            "/vendor/orders",
            params=order_query_for(request).to_params(),
            module="orders",
            operation="list_orders",
        )

    def list_orders(self, query: OrderQuery | None = None) -> DecodedPage[Order]:
        payload = self._request(
            "GET",
            "/vendor/orders",
            params=(query or OrderQuery()).to_params(),
            module="orders",
            operation="list_orders",
        )
        return decode_page(payload, "orders", Order)
