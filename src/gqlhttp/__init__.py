from gqlhttp.server.routes import get_graphql_route
from gqlhttp.server.starlette import create_app

VERSION = "0.1.0"

__all__ = ["create_app", "get_graphql_route"]
