from types import SimpleNamespace

from jsonapi_serializer import RequestContext
from jsonapi_serializer.utils.links import LinkBuilder


def test_relative_links():
    links = LinkBuilder()

    assert links.resource_self("user", "123") == "/user/123"
    assert links.relationship_self("user", "123", "company") == "/user/123/relationships/company"
    assert links.relationship_related("company", "2") == "/company/2"
    assert links.collection_self("user") == "/user"


def test_absolute_links_use_context_scheme_and_host():
    links = LinkBuilder(RequestContext(scheme="https", host="api.example.com", port=443))

    assert links.resource_self("user", "1") == "https://api.example.com/user/1"


def test_non_default_port_is_kept():
    links = LinkBuilder(RequestContext(host="localhost", port=8000))

    assert links.collection_self("user") == "http://localhost:8000/user"


def test_namespace():
    assert LinkBuilder(namespace="/api").resource_self("user", "1") == "/api/user/1"


def test_pagination_link_keeps_page_key_order():
    links = LinkBuilder()

    assert links.pagination("mytype", "4", {"cursor": "abc", "size": 10}) == (
        "/mytype/4?page%5Bcursor%5D=abc&page%5Bsize%5D=10"
    )
    assert links.pagination("mytype", None, {"number": 2}) == "/mytype?page%5Bnumber%5D=2"


def test_pagination_link_merges_request_query():
    context = RequestContext(
        host="www.example.com",
        path="/user",
        query_params={"include": "company", "page[number]": "1"},
    )

    assert LinkBuilder(context).pagination("user", None, {"number": 2}) == (
        "http://www.example.com/user?include=company&page%5Bnumber%5D=2"
    )


def test_pagination_without_parameters_is_plain_path():
    assert LinkBuilder().pagination("user", "1", {}) == "/user/1"


def test_any_object_with_scheme_and_host_is_a_context():
    context = SimpleNamespace(scheme="https", host="example.org", port=8443)

    assert LinkBuilder(context).resource_self("user", "1") == "https://example.org:8443/user/1"
    assert LinkBuilder(context).pagination("user", None, {"number": 1}) == (
        "https://example.org:8443/user?page%5Bnumber%5D=1"
    )
