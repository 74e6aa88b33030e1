import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import anyio
from gqlhttp.exceptions import ConfigurationError, InternalError
from gqlhttp.server.decoder import ExecutionRequest, decode_request
from gqlhttp.server.encoder import encode_response
from gqlhttp.server.validator import validate_request
from graphql import ExecutionResult, GraphQLSchema
from graphql import graphql as graphql_exec
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route

__all__ = ["HandlerConfig", "OnResponse", "get_graphql_route"]

logger = logging.getLogger(__name__)

# Customizes the response, e.g. a custom error shape or filling in extensions
OnResponse = Callable[[ExecutionResult], Any]

ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]


@dataclass(frozen=True)
class HandlerConfig:
    schema: GraphQLSchema
    pretty: bool = False
    on_response: Optional[OnResponse] = None
    max_body_size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.schema is None:
            raise ConfigurationError("GraphQL schema must not be None")
        if self.max_body_size is not None and self.max_body_size < 0:
            raise ConfigurationError("max_body_size must be a positive number of bytes")


def get_graphql_route(
    schema: GraphQLSchema,
    path: str = "/",
    pretty: bool = False,
    on_response: Optional[OnResponse] = None,
    max_body_size: Optional[int] = None,
    name: Optional[str] = None,
) -> Route:
    """Create a Starlette Route to serve GraphQL requests

    **Parameters**

    * **schema**: _GraphQLSchema_ = A GraphQL-core schema
    * **path**: _str_ = URL path to serve GraphQL from, e.g. '/'
    * **pretty**: _bool_ = Indent the JSON response body
    * **on_response**: _Callable[[ExecutionResult], Any]_ = Hook returning the value to serialize in place of the execution result
    * **max_body_size**: _int_ = Maximum accepted request body size in bytes
    * **name**: _str_ = Name of the GraphQL serving Starlette route
    """

    config = HandlerConfig(schema=schema, pretty=pretty, on_response=on_response, max_body_size=max_body_size)

    async def graphql_endpoint(request: Request) -> Response:

        validate_request(request)
        execution_request = await decode_request(request, max_body_size=config.max_body_size)

        result = await execute_until_disconnect(
            request, lambda: execute(config.schema, request, execution_request)
        )
        if result is None:
            logger.info("Client disconnected, GraphQL execution cancelled")
            return PlainTextResponse("Client disconnected.", status_code=499)

        content = apply_on_response(result, config.on_response)
        return encode_response(content, pretty=config.pretty)

    # Every method reaches the endpoint so it answers 405 with Allow: POST itself
    graphql_route = Route(path=path, endpoint=graphql_endpoint, methods=ROUTED_METHODS, name=name)

    return graphql_route


async def execute(schema: GraphQLSchema, request: Request, execution_request: ExecutionRequest) -> ExecutionResult:
    request_context = {
        "request": request,
        "query": execution_request.query,
        "variables": execution_request.variables,
    }
    return await graphql_exec(
        schema=schema,
        source=execution_request.query,
        context_value=request_context,
        variable_values=execution_request.variables or None,
        operation_name=execution_request.operation_name or None,
    )


async def execute_until_disconnect(
    request: Request, execute_fn: Callable[[], Awaitable[ExecutionResult]]
) -> Optional[ExecutionResult]:
    """Await execute_fn while listening for the client going away

    Returns None if the client disconnected first, in which case the execution is cancelled
    """

    result: Optional[ExecutionResult] = None

    async with anyio.create_task_group() as task_group:

        async def run_execution() -> None:
            nonlocal result
            result = await execute_fn()
            task_group.cancel_scope.cancel()

        async def listen_for_disconnect() -> None:
            # The body has been read at this point, the next message is a disconnect
            while True:
                message = await request.receive()
                if message["type"] == "http.disconnect":
                    break
            task_group.cancel_scope.cancel()

        task_group.start_soon(run_execution)
        task_group.start_soon(listen_for_disconnect)

    return result


def apply_on_response(result: ExecutionResult, on_response: Optional[OnResponse]) -> Any:
    """Return the value to serialize for an execution result"""

    if on_response is None:
        return result

    try:
        return on_response(result)
    except Exception as exc:
        logger.exception("GraphQL response hook failed")
        raise InternalError() from exc
