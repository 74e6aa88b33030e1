import logging

from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import PlainTextResponse

logger = logging.getLogger(__name__)


async def http_exception(request: Request, exc: HTTPException) -> PlainTextResponse:
    """Starlette exception handler converting starlette.exceptions.HTTPException into plain-text responses"""

    if exc.status_code >= 500:
        logger.error("%s %s failed with %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    else:
        logger.debug("%s %s rejected with %s: %s", request.method, request.url.path, exc.status_code, exc.detail)

    return PlainTextResponse(exc.detail, status_code=exc.status_code, headers=exc.headers)
