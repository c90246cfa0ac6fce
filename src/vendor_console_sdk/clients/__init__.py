from .analytics_client import AnalyticsClient
from .base import BaseClient
from .orders_client import OrdersClient
from .payouts_client import PayoutsClient
from .products_client import ProductsClient
from .vendors_client import VendorsClient

__all__ = [
    "AnalyticsClient",
    "BaseClient",
    "OrdersClient",
    "PayoutsClient",
    "ProductsClient",
    "VendorsClient",
]
