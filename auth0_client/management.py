"""Management API v2 entry point and the pieces shared by its resources."""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Iterable, Optional, Tuple

from .builder import Request, RequestBuilder
from .context import BearerToken, Context
from .encoding import COMMA, WireRequest, encode_query, join, resource_path
from .pagination import normalize_page
from .transport import RequestsTransport, Transport

if TYPE_CHECKING:
    from .clients import Clients
    from .users import Users


class ManagementApi:
    """Entry point for the Management API.

    Usage:
        mgmt = ManagementApi("https://tenant.eu.auth0.com", api_token)
        page = mgmt.users().list().per_page(50).include_totals(True).send()
        user = mgmt.users().get("auth0|507f1f77bcf86cd799439020").send()

    Args:
        domain: Tenant URL
        api_token: Management API token sent as ``Authorization: Bearer``
        transport: HTTP transport (defaults to a requests-based one)
    """

    def __init__(self, domain: str, api_token: str, transport: Optional[Transport] = None):
        self.context = Context(domain, BearerToken(api_token))
        self.transport = transport or RequestsTransport()

    def __repr__(self) -> str:
        return f"ManagementApi(domain={self.context.domain!r})"

    def users(self) -> "Users":
        """Methods of the ``/api/v2/users`` endpoints."""
        from .users import Users
        return Users(self)

    def clients(self) -> "Clients":
        """Methods of the ``/api/v2/clients`` endpoints."""
        from .clients import Clients
        return Clients(self)


# ─────────────────────────────────────────────────────────────────────────────
# Requests
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ManagementRequest(Request):
    """GET request whose parameters travel in the query string."""
    collection: ClassVar[str] = ""

    def path(self) -> str:
        return self.collection

    def query(self) -> Dict[str, Any]:
        """Subclasses implement: the query parameters, before omission of absent values."""
        raise NotImplementedError

    def to_wire(self) -> WireRequest:
        return WireRequest("GET", self.path(), query=encode_query(self.query()))


@dataclass(frozen=True)
class ResourceRequest(ManagementRequest):
    """Read one resource by id, optionally trimming its fields."""
    resource_id: str = ""
    fields: Tuple[str, ...] = ()
    include_fields: Optional[bool] = None

    def path(self) -> str:
        return resource_path(self.collection, self.resource_id)

    def query(self) -> Dict[str, Any]:
        return {
            "fields": join(self.fields, COMMA),
            "include_fields": self.include_fields,
        }


@dataclass(frozen=True)
class ListRequest(ManagementRequest):
    """List a collection; the response is normalized into a ``Page``."""
    items_key: ClassVar[str] = ""

    include_totals: Optional[bool] = None

    def parse(self, payload: Any, wire: WireRequest) -> Any:
        return normalize_page(payload, bool(self.include_totals), self.items_key, self.response_model, wire.path)


# ─────────────────────────────────────────────────────────────────────────────
# Builder mixins
# ─────────────────────────────────────────────────────────────────────────────
class FieldsMixin:
    """``fields`` / ``include_fields`` filters shared by list and get builders."""

    def field(self, field: str):
        """Append one element to the list of fields."""
        return self._append("fields", [field])

    def fields(self, fields: Iterable[str]):
        """Append the contents of an iterable to the list of fields."""
        return self._append("fields", fields)

    def include_fields(self, include_fields: bool):
        """Whether the listed fields are included (true) or excluded (false)."""
        return self._set_bool("include_fields", include_fields)


class PagingMixin:

    def page(self, page: int):
        """Page index of the results to return. First page is 0."""
        return self._set_uint("page", page)

    def per_page(self, per_page: int):
        """Number of results per page. Paging is disabled if not sent."""
        return self._set_uint("per_page", per_page)

    def include_totals(self, include_totals: bool):
        """Return results inside an object that carries the total count."""
        return self._set_bool("include_totals", include_totals)


class ResourceBuilder(FieldsMixin, RequestBuilder):
    required = ("resource_id",)
    list_params = ("fields",)
