from __future__ import annotations

import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
SDK_SRC = BASE_DIR / "src"

sys.path.insert(0, str(SDK_SRC))

from vendor_console_sdk.config import ClientConfig  # noqa: E402
from vendor_console_sdk.http_client import HttpClient  # noqa: E402
from vendor_console_sdk.tracing import TraceContext  # noqa: E402

BASE_URL = "https://api.example.com"


@pytest.fixture
def http() -> HttpClient:
    cfg = ClientConfig(env_name="test", api_base_url=BASE_URL, retry_backoff_seconds=0)
    return HttpClient(cfg, trace=TraceContext())
