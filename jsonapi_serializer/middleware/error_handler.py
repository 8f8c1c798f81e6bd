"""JSON:API error handling middleware."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from jsonapi_serializer.core.document import JSONAPIDocumentBuilder
from jsonapi_serializer.core.errors import JSONAPIError

logger = logging.getLogger(__name__)

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JSONAPIResponse(JSONResponse):
    """JSON response carrying the JSON:API media type."""

    media_type = JSONAPI_MEDIA_TYPE


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON:API error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except JSONAPIError as exc:
            logger.warning("%s: %s", type(exc).__name__, exc.detail)
            response = JSONAPIResponse(
                JSONAPIDocumentBuilder().build_error([exc.to_error_object()]),
                status_code=exc.status,
            )
            await response(scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - last-resort handler
            logger.exception("Unhandled error while serving %s", scope.get("path"))
            response = JSONAPIResponse(
                {
                    "errors": [
                        {
                            "status": "500",
                            "title": "Internal Server Error",
                            "detail": str(exc),
                        }
                    ]
                },
                status_code=500,
            )
            await response(scope, receive, send)
