import pytest

from jsonapi_serializer import InvalidQueryError, QueryConfig, parse_query_params, validate_query


def test_parse_query_params():
    query = parse_query_params(
        {
            "include": "company, company.industry",
            "fields[user]": "username,first_name",
            "sort": "-inserted_at,text",
            "page[offset]": "20",
            "page[cursor]": "abc",
            "filter[name]": "acme",
            "filter[id][in]": "1,2",
            "filter[age][gt]": "30",
            "unrelated": "value",
        }
    )

    assert query.include == {"company", "company.industry"}
    assert query.fields == {"user": {"username", "first_name"}}
    assert query.sort == [
        {"field": "inserted_at", "direction": "desc"},
        {"field": "text", "direction": "asc"},
    ]
    assert query.page == {"offset": 20, "cursor": "abc"}
    assert query.filter == {
        "name": "acme",
        "id": {"op": "in", "val": ["1", "2"]},
        "age": {"op": "gt", "val": "30"},
    }


def test_parse_json_filter_value():
    query = parse_query_params({"filter[tags]": '["a", "b"]'})

    assert query.filter == {"tags": ["a", "b"]}


def test_empty_params_give_empty_query():
    assert parse_query_params({}) == QueryConfig()


def test_validate_query_accepts_known_paths(registry):
    query = QueryConfig(include={"company.industry"}, fields={"user": {"username"}, "unknown": {"x"}})

    validate_query(query, "user", registry)


def test_validate_query_rejects_unknown_include(registry):
    with pytest.raises(InvalidQueryError) as excinfo:
        validate_query(QueryConfig(include={"company.owner"}), "user", registry)

    assert excinfo.value.parameter == "include"
    assert excinfo.value.status == 400


def test_validate_query_rejects_unknown_field(registry):
    with pytest.raises(InvalidQueryError) as excinfo:
        validate_query(QueryConfig(fields={"user": {"password"}}), "user", registry)

    assert excinfo.value.to_error_object()["source"] == {"parameter": "fields[user]"}
