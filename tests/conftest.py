import pytest

from jsonapi_serializer import (
    DescriptorRegistry,
    JSONAPISettings,
    JSONAPIView,
    Relationship,
    RelationshipPolicy,
    RequestContext,
    configure,
)
from jsonapi_serializer.pagination import StandardPagination


class UserView(JSONAPIView):
    class Meta:
        type_ = "user"
        fields = ["username", "first_name", "last_name"]
        relationships = {"company": "company"}


class CompanyView(JSONAPIView):
    class Meta:
        type_ = "company"
        fields = ["name"]
        relationships = {"industry": "industry"}


class IndustryView(JSONAPIView):
    class Meta:
        type_ = "industry"
        fields = ["name"]


class PostView(JSONAPIView):
    class Meta:
        type_ = "mytype"
        fields = ["text", "body", "full_description", "inserted_at"]
        relationships = {
            "author": ("user", "include"),
            "best_comments": Relationship(
                "comment", RelationshipPolicy.ALWAYS_INCLUDE, many=True
            ),
        }

    def meta(self, record, context):
        return {"meta_text": f"meta_{record['text']}"}

    def links(self, record, context):
        return {"next": self.pagination_link({"cursor": "some-string"})}


class CommentView(JSONAPIView):
    class Meta:
        type_ = "comment"
        fields = ["text"]
        relationships = {"user": ("user", "include")}


class AuthorView(JSONAPIView):
    class Meta:
        type_ = "author"
        fields = ["name"]
        relationships = {"posts": Relationship("article", many=True)}


class ArticleView(JSONAPIView):
    class Meta:
        type_ = "article"
        fields = ["title"]
        relationships = {"author": "author"}
        paginator = StandardPagination


@pytest.fixture()
def registry():
    registry = DescriptorRegistry()
    for view in (UserView, CompanyView, IndustryView, PostView, CommentView, AuthorView, ArticleView):
        registry.register(view)
    return registry


@pytest.fixture()
def context():
    return RequestContext(scheme="http", host="www.example.com", path="/user/123")


@pytest.fixture(autouse=True)
def reset_settings():
    configure(JSONAPISettings(field_transformation="underscore"))
    yield
    configure(JSONAPISettings())
