from __future__ import annotations

from decimal import Decimal

from vendor_console_sdk.models_orders import Order
from vendor_console_sdk.order_lines import order_line_rows
from vendor_console_sdk.status import Severity


def test_rows_duplicate_order_header_per_item() -> None:
    orders = [
        Order.model_validate(
            {
                "order_id": 1,
                "order_number": "ORD-1",
                "customer_name": "Grace",
                "status": "completed",
                "payment_status": "pending",
                "items": [
                    {"product_id": 10, "product_name": "Course", "quantity": 2, "price": "5.00", "total_price": "10.00"},
                    {"product_id": 11, "product_name": "Pack", "quantity": 3, "price": "2.50"},
                ],
            }
        ),
        Order.model_validate({"order_id": 2, "order_number": "ORD-2", "items": []}),
    ]
    rows = order_line_rows(orders)
    assert [row.item.product_name for row in rows] == ["Course", "Pack"]
    assert {row.order_number for row in rows} == {"ORD-1"}
    assert rows[0].status.severity is Severity.SUCCESS
    assert rows[0].payment.severity is Severity.WARNING
    assert rows[0].line_total == Decimal("10.00")
    assert rows[1].line_total == Decimal("7.50")


def test_orders_without_items_produce_no_rows() -> None:
    assert order_line_rows([Order(order_id=3, order_number="ORD-3")]) == []
