from typing import Optional

from gqlhttp.exceptions import ConfigurationError
from gqlhttp.server.exception import http_exception
from gqlhttp.server.routes import get_graphql_route
from gqlhttp.server.routes.graphql import OnResponse
from graphql import GraphQLSchema
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware


def create_app(
    schema: GraphQLSchema,
    path: str = "/",
    pretty: bool = False,
    on_response: Optional[OnResponse] = None,
    max_body_size: Optional[int] = None,
) -> Starlette:
    """Instantiate the Starlette app"""

    if not path.startswith("/"):
        raise ConfigurationError("path must start with '/'")

    graphql_route = get_graphql_route(
        schema=schema,
        path=path,
        pretty=pretty,
        on_response=on_response,
        max_body_size=max_body_size,
        name="graphql",
    )

    _app = Starlette(
        routes=[graphql_route],
        middleware=[Middleware(CORSMiddleware, allow_origins=["*"])],
        exception_handlers={HTTPException: http_exception},
    )

    return _app
