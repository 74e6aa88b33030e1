from gqlhttp.exceptions import MethodNotAllowed, MissingBody
from starlette.requests import Request

__all__ = ["validate_request", "has_body"]


def has_body(request: Request) -> bool:
    """Check whether the request declares a body, without reading it

    An HTTP/1.x request carries a body when it is sent with a non-zero Content-Length
    or a Transfer-Encoding (e.g. chunked). HTTP/2 and later may stream a body without
    either, so those are left to the body reader
    """
    if not request.scope.get("http_version", "1.1").startswith("1"):
        return True

    headers = request.headers
    if "transfer-encoding" in headers:
        return True

    content_length = headers.get("content-length")
    if content_length is None:
        return False

    try:
        return int(content_length) > 0
    except ValueError:
        # Malformed length, let the body reader decide
        return True


def validate_request(request: Request) -> None:
    """Reject requests that can not carry a GraphQL operation"""

    if request.method != "POST":
        raise MethodNotAllowed()

    if not has_body(request):
        raise MissingBody()
