from __future__ import annotations

from dataclasses import dataclass

from .catalog import ProductCatalog
from .clients.analytics_client import AnalyticsClient
from .clients.base import TokenProvider
from .clients.orders_client import OrdersClient
from .clients.payouts_client import PayoutsClient
from .clients.products_client import ProductsClient
from .clients.vendors_client import VendorsClient
from .collection import PaginatedCollection
from .config import ClientConfig, load_config
from .http_client import HttpClient
from .models import SortOrder
from .models_orders import Order
from .payouts import PayoutDesk
from .tracing import TraceContext
from .vendor_approval import ApprovalWorkflow


@dataclass
class ConsoleSession:
    """Builds clients and per-view controllers from one config and credential.

    The credential is whatever the surrounding auth layer hands in; it is passed
    through as a bearer token and never inspected here.
    """

    config: ClientConfig
    token: TokenProvider = None
    trace: TraceContext | None = None
    http: HttpClient | None = None

    def __post_init__(self) -> None:
        self.trace = self.trace or TraceContext()
        self.http = self.http or HttpClient(config=self.config, trace=self.trace)

    @classmethod
    def from_env(cls, token: TokenProvider = None, env_file: str | None = None) -> "ConsoleSession":
        """Session configured from ``VENDOR_CONSOLE_*`` variables and an optional .env file."""
        return cls(config=load_config(env_file), token=token)

    def products_client(self) -> ProductsClient:
        return ProductsClient(http=self.http, access_token=self.token)

    def orders_client(self) -> OrdersClient:
        return OrdersClient(http=self.http, access_token=self.token)

    def payouts_client(self) -> PayoutsClient:
        return PayoutsClient(http=self.http, access_token=self.token)

    def vendors_client(self) -> VendorsClient:
        return VendorsClient(http=self.http, access_token=self.token)

    def analytics_client(self) -> AnalyticsClient:
        return AnalyticsClient(http=self.http, access_token=self.token)

    def orders_collection(self) -> PaginatedCollection[Order]:
        return PaginatedCollection(
            "orders",
            self.orders_client().fetch_page,
            Order,
            page_size=self.config.page_size,
            sort_by="created_at",
            sort_order=SortOrder.DESC.value,
        )

    def product_catalog(self) -> ProductCatalog:
        return ProductCatalog(self.products_client(), page_size=self.config.page_size)

    def payout_desk(self) -> PayoutDesk:
        return PayoutDesk(self.payouts_client(), page_size=self.config.page_size)

    def approval_workflow(self) -> ApprovalWorkflow:
        return ApprovalWorkflow(self.vendors_client(), page_size=self.config.page_size)
