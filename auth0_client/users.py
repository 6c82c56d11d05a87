"""Users methods of the Management API."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional, Tuple

from . import models
from .builder import RequestBuilder
from .encoding import COMMA, join
from .management import FieldsMixin, ListRequest, PagingMixin, ResourceBuilder, ResourceRequest

if TYPE_CHECKING:
    from .management import ManagementApi

USERS_ENDPOINT = "/api/v2/users"


class SearchEngine(str, Enum):
    """Search engine version used by the ``q`` parameter."""
    V1 = "v1"
    V2 = "v2"
    V3 = "v3"


class Users:
    """Service for the ``/api/v2/users`` endpoints."""

    def __init__(self, api: "ManagementApi"):
        self.api = api

    def list(self) -> "ListUsersBuilder":
        """Retrieve users, optionally filtered, sorted and paged."""
        return ListUsersBuilder(self.api.context, self.api.transport)

    def get(self, user_id: str) -> "GetUserBuilder":
        """Retrieve one user by id (e.g. ``auth0|507f1f77bcf86cd799439020``)."""
        return GetUserBuilder(self.api.context, self.api.transport)._set_str("resource_id", user_id)


@dataclass(frozen=True)
class ListUsers(ListRequest):
    response_model: ClassVar[Any] = models.User
    collection: ClassVar[str] = USERS_ENDPOINT
    items_key: ClassVar[str] = "users"

    page: Optional[int] = None
    per_page: Optional[int] = None
    sort: Optional[str] = None
    connection: Optional[str] = None
    fields: Tuple[str, ...] = ()
    include_fields: Optional[bool] = None
    q: Optional[str] = None
    search_engine: Optional[SearchEngine] = None

    def query(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "per_page": self.per_page,
            "include_totals": self.include_totals,
            "sort": self.sort,
            "connection": self.connection,
            "fields": join(self.fields, COMMA),
            "include_fields": self.include_fields,
            "q": self.q,
            "search_engine": self.search_engine,
        }


@dataclass(frozen=True)
class GetUser(ResourceRequest):
    response_model: ClassVar[Any] = models.User
    collection: ClassVar[str] = USERS_ENDPOINT


class ListUsersBuilder(FieldsMixin, PagingMixin, RequestBuilder):
    request_class = ListUsers
    list_params = ("fields",)

    def sort(self, sort: str) -> "ListUsersBuilder":
        """Field to sort by, ``field:1`` ascending or ``field:-1`` descending."""
        return self._set_str("sort", sort)

    def connection(self, connection: str) -> "ListUsersBuilder":
        return self._set_str("connection", connection)

    def query(self, q: str) -> "ListUsersBuilder":
        """Query in Lucene query string syntax, sent as ``q``."""
        return self._set_str("q", q)

    def search_engine(self, search_engine: SearchEngine) -> "ListUsersBuilder":
        return self._set_enum("search_engine", SearchEngine, search_engine)


class GetUserBuilder(ResourceBuilder):
    request_class = GetUser
