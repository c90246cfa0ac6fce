from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from ..http_client import HttpClient

# A fixed bearer token, or a zero-argument callable returning the current one.
TokenProvider = Union[str, Callable[[], Union[str, None]], None]


@dataclass
class BaseClient:
    http: HttpClient
    access_token: TokenProvider = None

    def _current_token(self) -> str | None:
        if callable(self.access_token):
            return self.access_token()
        return self.access_token

    def _auth_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        token = self._current_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(self, method: str, path: str, **kwargs):
        headers = kwargs.pop("headers", {})
        merged = {**self._auth_headers(), **headers}
        return self.http.request(method, path, headers=merged, **kwargs)
