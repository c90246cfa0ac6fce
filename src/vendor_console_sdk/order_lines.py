from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable

from .models_orders import Order, OrderItem
from .status import StatusBadge


@dataclass(frozen=True)
class OrderLineRow:
    """One table row per ordered item, carrying its parent order's fields."""

    order_id: int | str
    order_number: str
    customer_name: str | None
    status: StatusBadge
    payment: StatusBadge
    created_at: datetime | None
    item: OrderItem

    @property
    def line_total(self) -> Decimal:
        if self.item.total_price:
            return self.item.total_price
        return self.item.price * self.item.quantity


def order_line_rows(orders: Iterable[Order]) -> list[OrderLineRow]:
    # Orders without items produce no rows.
    return [
        OrderLineRow(
            order_id=order.order_id,
            order_number=order.order_number,
            customer_name=order.customer_name,
            status=order.status_badge,
            payment=order.payment_badge,
            created_at=order.created_at,
            item=item,
        )
        for order in orders
        for item in order.items
    ]
