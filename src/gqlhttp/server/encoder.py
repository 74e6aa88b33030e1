import json
import logging
import typing

from gqlhttp.exceptions import InternalEncodeError
from graphql import ExecutionResult, GraphQLError
from starlette.responses import JSONResponse

__all__ = ["GraphQLResponse", "encode_response"]

logger = logging.getLogger(__name__)


def to_serializable(value: typing.Any) -> typing.Any:
    """json.dumps fallback for graphql-core result objects"""
    if isinstance(value, (ExecutionResult, GraphQLError)):
        return value.formatted
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class GraphQLResponse(JSONResponse):
    """JSONResponse that understands graphql-core results and optionally indents its body

    The body is rendered when the response is constructed, so a value that can not
    be serialized fails before anything is sent to the client
    """

    def __init__(self, content: typing.Any, pretty: bool = False, **kwargs) -> None:
        self.pretty = pretty
        super().__init__(content, **kwargs)

    def render(self, content: typing.Any) -> bytes:
        if self.pretty:
            dump_kwargs: typing.Dict[str, typing.Any] = {"indent": "\t"}
        else:
            dump_kwargs = {"indent": None, "separators": (",", ":")}

        return json.dumps(
            content,
            default=to_serializable,
            ensure_ascii=False,
            allow_nan=False,
            **dump_kwargs,
        ).encode("utf-8")


def encode_response(content: typing.Any, pretty: bool = False) -> GraphQLResponse:
    """Serialize an execution result (or the value a response hook made of it)"""

    try:
        return GraphQLResponse(content, pretty=pretty)
    except (TypeError, ValueError) as exc:
        logger.exception("Failed to serialize GraphQL response")
        raise InternalEncodeError() from exc
