from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

_TRUE_FLAGS = frozenset({"1", "true", "yes", "on"})
_FALSE_FLAGS = frozenset({"0", "false", "no", "off", ""})


def loose_status(value: object) -> str | None:
    """Status columns take any scalar; the status resolvers decide what it means."""
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    return str(value)


def loose_flag(value: object) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE_FLAGS:
        return True
    if text in _FALSE_FLAGS:
        return False
    return None


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class PaginationMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    total: int = 0
    page: int | None = None
    pages: int | None = None
    limit: int | None = None


class Category(BaseModel):
    model_config = ConfigDict(extra="allow")

    category_id: int | str
    name: str


class UploadResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    key: str
    url: str | None = None
