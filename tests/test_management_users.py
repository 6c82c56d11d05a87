import pytest

from auth0_client import ApiError, DecodeError, Page, SearchEngine, ValidationError, encode
from auth0_client.models import User

from conftest import API_TOKEN


def test_list_users(mgmt, transport, users_list_payload):
    transport.respond(users_list_payload)

    page = mgmt.users().list().send()

    assert isinstance(page, Page)
    assert len(page.items) == 2
    assert all(isinstance(user, User) for user in page.items)
    assert (page.start, page.limit, page.length, page.total) == (None, None, None, None)

    call = transport.last
    assert call.method == "GET"
    assert call.url == "https://t.example.com/api/v2/users"
    assert call.headers["Authorization"] == f"Bearer {API_TOKEN}"
    assert call.params == {}
    assert call.json is None


def test_list_users_with_page(mgmt, transport, users_list_payload):
    transport.respond(users_list_payload)

    mgmt.users().list().page(24).per_page(5).send()

    assert transport.last.params == {"page": "24", "per_page": "5"}


def test_list_users_with_totals(mgmt, transport, users_paged_payload):
    transport.respond(users_paged_payload)

    page = mgmt.users().list().include_totals(True).send()

    assert transport.last.params == {"include_totals": "true"}
    assert len(page.items) == 2
    assert page.start == 0
    assert page.length == 14
    assert page.total == 14
    assert page.limit == 50
    assert page.has_totals


def test_list_users_include_totals_false_is_sent_but_unwrapped(mgmt, transport, users_list_payload):
    transport.respond(users_list_payload)

    page = mgmt.users().list().include_totals(False).send()

    assert transport.last.params == {"include_totals": "false"}
    assert page.total is None
    assert not page.has_totals


def test_list_users_with_sort_query_and_connection(mgmt, transport, users_list_payload):
    transport.respond(users_list_payload)

    (
        mgmt.users()
        .list()
        .sort("date:1")
        .query("email:\\*@gmail.com")
        .connection("Username-Password-Authentication")
        .search_engine(SearchEngine.V3)
        .send()
    )

    assert transport.last.params == {
        "sort": "date:1",
        "q": "email:\\*@gmail.com",
        "connection": "Username-Password-Authentication",
        "search_engine": "v3",
    }


def test_list_users_fields_given_separately(mgmt, transport, users_list_payload):
    transport.respond(users_list_payload)

    mgmt.users().list().field("some").field("random").field("fields").send()

    assert transport.last.params == {"fields": "some,random,fields"}


def test_list_users_fields_and_include_fields(mgmt):
    wire = encode(mgmt.users().list().fields(["x", "y"]).include_fields(False).finalize())
    assert wire.query == {"fields": "x,y", "include_fields": "false"}


def test_list_users_empty_fields_are_omitted(mgmt):
    wire = encode(mgmt.users().list().fields([]).finalize())
    assert "fields" not in wire.query


def test_list_users_search_engine_accepts_wire_value(mgmt):
    wire = encode(mgmt.users().list().search_engine("v2").finalize())
    assert wire.query == {"search_engine": "v2"}


@pytest.mark.parametrize(
    "configure",
    [
        lambda b: b.page(-1),
        lambda b: b.per_page("50"),
        lambda b: b.page(True),
        lambda b: b.include_totals("yes"),
        lambda b: b.search_engine("v9"),
    ],
)
def test_list_users_rejects_bad_values_at_finalize(mgmt, configure):
    builder = configure(mgmt.users().list())
    with pytest.raises(ValidationError):
        builder.finalize()


def test_list_users_valid_value_clears_earlier_rejection(mgmt):
    wire = encode(mgmt.users().list().page(-1).page(2).finalize())
    assert wire.query == {"page": "2"}


def test_list_users_totals_requested_but_bare_list_returned(mgmt, transport, users_list_payload):
    transport.respond(users_list_payload)

    with pytest.raises(DecodeError):
        mgmt.users().list().include_totals(True).send()


def test_get_user(mgmt, transport, user_payload):
    transport.respond(user_payload)

    user = mgmt.users().get("auth0|507f1f77bcf86cd799439020").send()

    assert isinstance(user, User)
    assert user.user_id == "auth0|507f1f77bcf86cd799439020"
    assert user.created_at.year == 2023
    assert user.identities[0].is_social is False
    assert user.identities[0].profile_data.email == "john.doe@gmail.com"
    assert user.logins_count == 3
    assert transport.last.url == "https://t.example.com/api/v2/users/auth0%7C507f1f77bcf86cd799439020"
    assert transport.last.params == {}


def test_get_user_with_fields(mgmt, transport, user_payload):
    transport.respond(user_payload)

    mgmt.users().get("abc").fields(["some", "random"]).field("fields").include_fields(True).send()

    assert transport.last.params == {"fields": "some,random,fields", "include_fields": "true"}


def test_get_user_id_not_in_query(mgmt):
    wire = encode(mgmt.users().get("abc").finalize())
    assert wire.path == "/api/v2/users/abc"
    assert wire.query == {}
    assert wire.body is None


@pytest.mark.parametrize("user_id, segment", [(".", "%2E"), ("..", "%2E%2E")])
def test_get_user_dot_id_stays_in_users_path(mgmt, transport, user_payload, user_id, segment):
    transport.respond(user_payload)

    mgmt.users().get(user_id).send()

    assert transport.last.url == f"https://t.example.com/api/v2/users/{segment}"


def test_get_user_requires_id(mgmt):
    with pytest.raises(ValidationError):
        mgmt.users().get("").finalize()


def test_get_user_not_found(mgmt, transport):
    transport.respond(
        {"statusCode": 404, "error": "Not Found", "message": "The user does not exist.", "errorCode": "inexistent_user"},
        status_code=404,
    )

    with pytest.raises(ApiError) as excinfo:
        mgmt.users().get("missing").send()

    assert excinfo.value.status_code == 404
    assert excinfo.value.error_code == "inexistent_user"
    assert excinfo.value.message == "The user does not exist."
    assert excinfo.value.body["statusCode"] == 404


def test_list_users_unauthorized(mgmt, transport):
    transport.respond(body=b"Unauthorized", status_code=401)

    with pytest.raises(ApiError) as excinfo:
        mgmt.users().list().send()

    assert excinfo.value.status_code == 401
    assert excinfo.value.body is None
