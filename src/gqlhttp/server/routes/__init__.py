from .graphql import HandlerConfig, get_graphql_route

__all__ = ["HandlerConfig", "get_graphql_route"]
