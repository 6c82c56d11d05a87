"""List-response envelope shared by paginated and non-paginated endpoints.

With ``include_totals=true`` the Management API answers with an object::

    {"start": 0, "limit": 50, "length": 2, "total": 14, "users": [...]}

and without it with the bare array. ``normalize_page`` gives callers the
same ``Page`` in both cases; only the metadata's presence differs.
"""
from __future__ import annotations
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, NonNegativeInt

from .exceptions import DecodeError
from .invocation import decode_model

T = TypeVar("T")

METADATA_FIELDS = ("start", "limit", "length", "total")


class Page(BaseModel, Generic[T]):
    """Items of one list call plus optional pagination metadata.

    Fields:
        items: Resources returned by the call
        start: Page offset
        limit: Maximum number of items per page
        length: Number of items in this page
        total: Total number of items
    """

    model_config = ConfigDict(frozen=True)

    items: List[T]
    start: Optional[NonNegativeInt] = None
    limit: Optional[NonNegativeInt] = None
    length: Optional[NonNegativeInt] = None
    total: Optional[NonNegativeInt] = None

    @property
    def has_totals(self) -> bool:
        return self.total is not None


def normalize_page(
    payload: Any,
    include_totals: bool,
    items_key: str,
    model: Type[T],
    endpoint: str,
) -> Page[T]:
    """Wrap a list payload into a ``Page``.

    Args:
        payload: Decoded JSON body
        include_totals: Whether the originating request asked for totals
        items_key: Key holding the items in the totals envelope (``users``, ``clients``)
        model: Resource model of the items
        endpoint: Endpoint path, for error messages

    Raises:
        DecodeError: If the payload shape does not match ``include_totals``
    """
    if include_totals:
        if not isinstance(payload, dict):
            raise DecodeError(f"Expected a paged object, got {type(payload).__name__}", endpoint)
        if items_key not in payload:
            raise DecodeError(f"Paged response has no '{items_key}' key", endpoint)
        data = {name: payload.get(name) for name in METADATA_FIELDS}
        data["items"] = payload[items_key]
    else:
        if not isinstance(payload, list):
            raise DecodeError(f"Expected a list, got {type(payload).__name__}", endpoint)
        data = {"items": payload}

    return decode_model(Page[model], data, endpoint)
