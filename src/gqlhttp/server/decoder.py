from __future__ import annotations

import json
import typing
from dataclasses import dataclass, field
from enum import Enum

from gqlhttp.exceptions import InternalReadError, InvalidPayload, MissingQuery, PayloadTooLarge, UnsupportedMediaType
from starlette.requests import ClientDisconnect, Request

__all__ = ["ContentType", "ExecutionRequest", "decode_request", "read_body"]


class ContentType(str, Enum):
    JSON = "application/json"
    GRAPHQL = "application/graphql"

    @classmethod
    def from_header(cls, header: str) -> typing.Optional[ContentType]:
        """Match a Content-Type header by prefix, e.g. 'application/json; charset=utf-8' -> JSON"""
        for content_type in cls:
            if header.startswith(content_type.value):
                return content_type
        return None


@dataclass(frozen=True)
class ExecutionRequest:
    query: str
    operation_name: str = ""
    variables: typing.Dict[str, typing.Any] = field(default_factory=dict)


async def read_body(request: Request, max_body_size: typing.Optional[int] = None) -> bytes:
    """Read the full request body, enforcing max_body_size in bytes"""

    if max_body_size is not None:
        content_length = request.headers.get("content-length", "")
        if content_length.isdigit() and int(content_length) > max_body_size:
            raise PayloadTooLarge()

    chunks: typing.List[bytes] = []
    size = 0
    try:
        async for chunk in request.stream():
            size += len(chunk)
            if max_body_size is not None and size > max_body_size:
                raise PayloadTooLarge()
            chunks.append(chunk)
    except ClientDisconnect as exc:
        raise InternalReadError() from exc
    return b"".join(chunks)


def _or_default(value: typing.Any, default: typing.Any) -> typing.Any:
    return default if value is None else value


def decode_json(body: bytes) -> ExecutionRequest:
    """Structured-document strategy: {"query": ..., "operationName": ..., "variables": ...}"""

    try:
        params = json.loads(body)
    except ValueError as exc:
        raise InvalidPayload() from exc

    # A JSON null leaves every field unset
    if params is None:
        params = {}

    if not isinstance(params, dict):
        raise InvalidPayload()

    query = _or_default(params.get("query"), "")
    operation_name = _or_default(params.get("operationName"), "")
    variables = _or_default(params.get("variables"), {})

    if not isinstance(query, str) or not isinstance(operation_name, str) or not isinstance(variables, dict):
        raise InvalidPayload()

    return ExecutionRequest(query=query, operation_name=operation_name, variables=variables)


def decode_graphql(body: bytes) -> ExecutionRequest:
    """Raw-text strategy: the body is the query"""

    try:
        query = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidPayload("POST body is not valid UTF-8.") from exc
    return ExecutionRequest(query=query)


DECODERS: typing.Dict[ContentType, typing.Callable[[bytes], ExecutionRequest]] = {
    ContentType.JSON: decode_json,
    ContentType.GRAPHQL: decode_graphql,
}


async def decode_request(request: Request, max_body_size: typing.Optional[int] = None) -> ExecutionRequest:
    """Retrieve the GraphQL query, operation name and variables from the Starlette Request"""

    content_type = ContentType.from_header(request.headers.get("content-type", ""))
    if content_type is None:
        raise UnsupportedMediaType()

    body = await read_body(request, max_body_size=max_body_size)
    execution_request = DECODERS[content_type](body)

    if not execution_request.query:
        raise MissingQuery()

    return execution_request
