from typing import Dict, Optional

from starlette.exceptions import HTTPException


class GQLHTTPError(Exception):
    """Base exception for gqlhttp package"""


class ConfigurationError(GQLHTTPError):
    """The adapter was given invalid settings at construction time"""


class GQLHTTPException(HTTPException):
    """A request could not be served. Rendered as a plain-text response"""

    status_code_default = 500
    detail_default = "Internal server error."
    headers_default: Optional[Dict[str, str]] = None

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(
            status_code=self.status_code_default,
            detail=detail or self.detail_default,
            headers=dict(self.headers_default) if self.headers_default else None,
        )


class MethodNotAllowed(GQLHTTPException):
    status_code_default = 405
    detail_default = "GraphQL only supports POST requests."
    headers_default = {"Allow": "POST"}


class MissingBody(GQLHTTPException):
    status_code_default = 400
    detail_default = "No body provided."


class UnsupportedMediaType(GQLHTTPException):
    status_code_default = 400
    detail_default = "Not supported content type."


class InvalidPayload(GQLHTTPException):
    status_code_default = 400
    detail_default = "POST body is invalid JSON."


class PayloadTooLarge(GQLHTTPException):
    status_code_default = 413
    detail_default = "POST body is too large."


class InternalReadError(GQLHTTPException):
    status_code_default = 500
    detail_default = "POST body is invalid."


class MissingQuery(GQLHTTPException):
    status_code_default = 400
    detail_default = "Must provide query string."


class InternalError(GQLHTTPException):
    status_code_default = 500
    detail_default = "Internal server error."


class InternalEncodeError(InternalError):
    detail_default = "Failed to encode response."
