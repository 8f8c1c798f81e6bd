"""JSON:API error types and error object builders."""

from typing import Any


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error


class JSONAPIError(Exception):
    """Base class for errors raised while building JSON:API documents."""

    status: int = 500
    title: str = "Internal Server Error"

    def __init__(self, detail: str, *, source: dict[str, Any] | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.source = source

    def to_error_object(self) -> dict[str, Any]:
        """Return this error as a JSON:API error object."""
        return JSONAPIErrorBuilder().error_object(
            status=str(self.status),
            code=type(self).__name__,
            title=self.title,
            detail=self.detail,
            source=self.source,
        )


class ConfigurationError(JSONAPIError):
    """A descriptor or the library settings are structurally invalid."""

    title = "Serializer Misconfigured"


class MissingIdentifierError(JSONAPIError):
    """The primary record of a document has no usable ``id``."""

    title = "Missing Resource Identifier"

    def __init__(self, resource_type: str) -> None:
        super().__init__(f"Primary '{resource_type}' record has no id.")
        self.resource_type = resource_type


class InvalidQueryError(JSONAPIError):
    """A query parameter references a relationship or field that does not exist."""

    status = 400
    title = "Invalid Query Parameter"

    def __init__(self, detail: str, *, parameter: str) -> None:
        super().__init__(detail, source={"parameter": parameter})
        self.parameter = parameter
