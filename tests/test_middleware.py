import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from jsonapi_serializer import (
    DescriptorRegistry,
    JSONAPIView,
    QueryConfig,
    RequestContext,
    serialize,
    validate_query,
)
from jsonapi_serializer.middleware import JSONAPI_MEDIA_TYPE, ErrorHandlerMiddleware, JSONAPIResponse


class UserView(JSONAPIView):
    class Meta:
        type_ = "user"
        fields = ["username"]
        relationships = {"company": "company"}


class CompanyView(JSONAPIView):
    class Meta:
        type_ = "company"
        fields = ["name"]


USERS = {
    1: {"id": 1, "username": "j.smith", "company": {"id": 2, "name": "acme"}},
    2: {"username": "no-id"},
}


@pytest.fixture()
def client():
    registry = DescriptorRegistry()
    registry.register(UserView)
    registry.register(CompanyView)

    app = FastAPI()
    app.add_middleware(ErrorHandlerMiddleware)

    @app.get("/user/{user_id}")
    async def get_user(user_id: int, request: Request):
        query = QueryConfig.from_request(request)
        validate_query(query, "user", registry)
        document = serialize(
            "user",
            USERS[user_id],
            RequestContext.from_request(request),
            None,
            query,
            registry=registry,
        )
        return JSONAPIResponse(document)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return TestClient(app)


def test_serializes_with_request_context(client):
    response = client.get("/user/1", params={"include": "company", "fields[user]": "username"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(JSONAPI_MEDIA_TYPE)
    body = response.json()
    assert body["data"]["links"] == {"self": "http://testserver/user/1"}
    assert body["included"][0]["links"] == {"self": "http://testserver/company/2"}


def test_invalid_query_becomes_400(client):
    response = client.get("/user/1", params={"include": "owner"})

    assert response.status_code == 400
    error = response.json()["errors"][0]
    assert error["status"] == "400"
    assert error["code"] == "InvalidQueryError"
    assert error["source"] == {"parameter": "include"}


def test_missing_identifier_becomes_500(client):
    response = client.get("/user/2")

    assert response.status_code == 500
    assert response.json()["errors"][0]["code"] == "MissingIdentifierError"


def test_unexpected_error_becomes_500(client):
    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "errors": [{"status": "500", "title": "Internal Server Error", "detail": "boom"}]
    }
