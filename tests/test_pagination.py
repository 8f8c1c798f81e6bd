from jsonapi_serializer.pagination import StandardPagination
from jsonapi_serializer.utils.links import LinkBuilder


def test_links_without_total_always_offer_next():
    links = StandardPagination().get_links(LinkBuilder(), "user", {"offset": 2, "limit": 2})

    assert links == {
        "self": "/user?page%5Boffset%5D=2&page%5Blimit%5D=2",
        "first": "/user?page%5Boffset%5D=0&page%5Blimit%5D=2",
        "prev": "/user?page%5Boffset%5D=0&page%5Blimit%5D=2",
        "next": "/user?page%5Boffset%5D=4&page%5Blimit%5D=2",
    }


def test_last_page_has_no_next():
    links = StandardPagination().get_links(
        LinkBuilder(), "user", {"offset": 4, "limit": 2}, total=5
    )

    assert "next" not in links
    assert links["last"] == "/user?page%5Boffset%5D=4&page%5Blimit%5D=2"


def test_malformed_window_uses_defaults():
    links = StandardPagination().get_links(
        LinkBuilder(), "user", {"offset": "abc", "limit": None}, total=3
    )

    assert links == {
        "self": "/user?page%5Boffset%5D=0&page%5Blimit%5D=10",
        "first": "/user?page%5Boffset%5D=0&page%5Blimit%5D=10",
        "last": "/user?page%5Boffset%5D=0&page%5Blimit%5D=10",
    }
