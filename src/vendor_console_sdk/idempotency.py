from __future__ import annotations

import uuid
from dataclasses import dataclass, field

IDEMPOTENCY_HEADER = "Idempotency-Key"


def new_idempotency_key(operation: str) -> str:
    return f"{operation}-{uuid.uuid4().hex}"


def idempotency_headers(key: str) -> dict[str, str]:
    return {IDEMPOTENCY_HEADER: key}


@dataclass
class PendingAttempts:
    """Keys for mutations that were sent but not confirmed.

    A retry of the same operation reuses its key, so the server can recognise
    the replay; the key is dropped once the operation succeeds.
    """

    _keys: dict[str, str] = field(default_factory=dict)

    def key_for(self, operation: str, *, prefix: str | None = None) -> str:
        key = self._keys.get(operation)
        if key is None:
            key = new_idempotency_key(prefix or operation)
            self._keys[operation] = key
        return key

    def clear(self, operation: str) -> None:
        self._keys.pop(operation, None)
