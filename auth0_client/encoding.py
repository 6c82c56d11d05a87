"""Wire encoding of finalized requests.

Every request type knows its own field layout and calls the helpers below,
which apply the shared rules:

- absent values (None) and empty lists never reach the wire;
- list parameters become one string joined by a separator
  (space for OAuth scopes, comma for management field filters),
  including single-element lists;
- query strings render booleans as ``true``/``false`` and integers in decimal;
- resource ids go into the path, never into the query or body.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from .builder import Request

SPACE = " "
COMMA = ","


@dataclass(frozen=True)
class WireRequest:
    """HTTP-level view of a request: method, path, and query or JSON body."""
    method: str
    path: str
    query: Dict[str, str] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None


def encode(request: "Request") -> WireRequest:
    """Map a finalized request to its wire representation."""
    return request.to_wire()


def join(values: Sequence[str], separator: str) -> Optional[str]:
    """Join a list parameter, returning None when there is nothing to send."""
    if not values:
        return None
    return separator.join(values)


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (list, tuple)) and not value:
        return False
    return True


def _query_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def encode_query(params: Mapping[str, Any]) -> Dict[str, str]:
    """Build query parameters, skipping absent values."""
    return {name: _query_value(value) for name, value in params.items() if _present(value)}


def encode_body(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Build a JSON object, skipping absent values."""
    return {name: _json_value(value) for name, value in params.items() if _present(value)}


def resource_path(collection: str, resource_id: str) -> str:
    """Interpolate an identifier into ``{collection}/{id}``.

    Ids such as ``auth0|abc`` are percent-encoded so they stay one segment;
    ``.`` and ``..`` are encoded too, since URL normalization drops them.
    """
    segment = quote(resource_id, safe="")
    if segment in (".", ".."):
        segment = segment.replace(".", "%2E")
    return f"{collection.rstrip('/')}/{segment}"


def list_values(values: Iterable[Any]) -> list[Any]:
    """Materialize the values passed to a list-parameter append."""
    if isinstance(values, str):
        # A bare string is one value, not a sequence of characters
        return [values]
    return list(values)
