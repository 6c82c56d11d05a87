"""Clients methods of the Management API."""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Iterable, Optional, Tuple

from . import models
from .builder import RequestBuilder
from .encoding import COMMA, join
from .management import FieldsMixin, ListRequest, PagingMixin, ResourceBuilder, ResourceRequest

if TYPE_CHECKING:
    from .management import ManagementApi

CLIENTS_ENDPOINT = "/api/v2/clients"


class Clients:
    """Service for the ``/api/v2/clients`` endpoints (applications and SSO integrations)."""

    def __init__(self, api: "ManagementApi"):
        self.api = api

    def list(self) -> "ListClientsBuilder":
        """Retrieve clients matching the provided filters."""
        return ListClientsBuilder(self.api.context, self.api.transport)

    def get(self, client_id: str) -> "GetClientBuilder":
        """Retrieve one client by its client id."""
        return GetClientBuilder(self.api.context, self.api.transport)._set_str("resource_id", client_id)


@dataclass(frozen=True)
class ListClients(ListRequest):
    response_model: ClassVar[Any] = models.Client
    collection: ClassVar[str] = CLIENTS_ENDPOINT
    items_key: ClassVar[str] = "clients"

    fields: Tuple[str, ...] = ()
    include_fields: Optional[bool] = None
    page: Optional[int] = None
    per_page: Optional[int] = None
    is_global: Optional[bool] = None
    is_first_party: Optional[bool] = None
    app_type: Tuple[str, ...] = ()

    def query(self) -> Dict[str, Any]:
        return {
            "fields": join(self.fields, COMMA),
            "include_fields": self.include_fields,
            "page": self.page,
            "per_page": self.per_page,
            "include_totals": self.include_totals,
            "is_global": self.is_global,
            "is_first_party": self.is_first_party,
            "app_type": join(self.app_type, COMMA),
        }


@dataclass(frozen=True)
class GetClient(ResourceRequest):
    response_model: ClassVar[Any] = models.Client
    collection: ClassVar[str] = CLIENTS_ENDPOINT


class ListClientsBuilder(FieldsMixin, PagingMixin, RequestBuilder):
    request_class = ListClients
    list_params = ("fields", "app_type")

    def is_global(self, is_global: bool) -> "ListClientsBuilder":
        """Filter on the global 'All Applications' client."""
        return self._set_bool("is_global", is_global)

    def is_first_party(self, is_first_party: bool) -> "ListClientsBuilder":
        return self._set_bool("is_first_party", is_first_party)

    def app_type(self, app_type: str) -> "ListClientsBuilder":
        """Append one application type (``native``, ``spa``, ``regular_web``, ...)."""
        return self._append("app_type", [app_type])

    def app_types(self, app_types: Iterable[str]) -> "ListClientsBuilder":
        """Append the contents of an iterable to the list of application types."""
        return self._append("app_type", app_types)


class GetClientBuilder(ResourceBuilder):
    request_class = GetClient
