from .catalog import CatalogResult, ProductCatalog
from .collection import PageRequest, PaginatedCollection
from .config import ClientConfig, ConfigError, load_config
from .exceptions import (
    ApiError,
    BusinessRuleError,
    ClientValidationError,
    ConflictError,
    DataFormatError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    RequestRejectedError,
    UnauthorizedError,
    ValidationIssue,
)
from .http_client import HttpClient
from .metrics import format_price, monthly_revenue_series, parse_currency, percent_change, summarize_analytics
from .models import Category, PaginationMeta, SortOrder, UploadResult
from .models_analytics import VendorAnalytics
from .models_orders import Order, OrderItem, OrderQuery
from .models_payouts import Balance, PaymentMethod, Payout, PayoutRequest
from .models_products import Product, ProductCreate, ProductQuery
from .models_vendors import PendingVendor, VendorDecision, VendorStatus
from .order_lines import OrderLineRow, order_line_rows
from .pagination import DecodedPage, decode_page
from .payout_validation import PayoutValidationResult, validate_payout_request
from .payouts import PayoutDesk, PayoutSubmission
from .product_validation import ProductForm, validate_product_form
from .session import ConsoleSession
from .status import (
    Severity,
    StatusBadge,
    resolve_order_status,
    resolve_payment_status,
    resolve_payout_status,
    resolve_product_status,
    resolve_vendor_status,
)
from .tracing import TraceContext
from .upload_validation import UploadCandidate, UploadSlot, digital_file_slot, thumbnail_slot
from .vendor_approval import ApprovalResult, ApprovalWorkflow

__all__ = [
    "ApiError",
    "ApprovalResult",
    "ApprovalWorkflow",
    "Balance",
    "BusinessRuleError",
    "CatalogResult",
    "Category",
    "ClientConfig",
    "ClientValidationError",
    "ConfigError",
    "ConflictError",
    "ConsoleSession",
    "DataFormatError",
    "DecodedPage",
    "ForbiddenError",
    "HttpClient",
    "NetworkError",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderLineRow",
    "OrderQuery",
    "PageRequest",
    "PaginatedCollection",
    "PaginationMeta",
    "PaymentMethod",
    "Payout",
    "PayoutDesk",
    "PayoutRequest",
    "PayoutSubmission",
    "PayoutValidationResult",
    "PendingVendor",
    "Product",
    "ProductCatalog",
    "ProductCreate",
    "ProductForm",
    "ProductQuery",
    "RequestRejectedError",
    "Severity",
    "SortOrder",
    "StatusBadge",
    "TraceContext",
    "UnauthorizedError",
    "UploadCandidate",
    "UploadResult",
    "UploadSlot",
    "ValidationIssue",
    "VendorAnalytics",
    "VendorDecision",
    "VendorStatus",
    "decode_page",
    "digital_file_slot",
    "format_price",
    "load_config",
    "monthly_revenue_series",
    "order_line_rows",
    "parse_currency",
    "percent_change",
    "resolve_order_status",
    "resolve_payment_status",
    "resolve_payout_status",
    "resolve_product_status",
    "resolve_vendor_status",
    "summarize_analytics",
    "thumbnail_slot",
    "validate_payout_request",
    "validate_product_form",
]
