import uvicorn
from gqlhttp.server.exception import http_exception
from gqlhttp.server.routes import get_graphql_route
from graphql import build_schema
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.responses import PlainTextResponse
from starlette.routing import Route

##################
# GraphQL Schema #
##################

SCHEMA = build_schema(
    """
    type Book {
        title: String!
        author: String!
    }

    type Query {
        books(author: String): [Book!]!
    }
    """
)

BOOKS = [
    {"title": "The Left Hand of Darkness", "author": "Ursula K. Le Guin"},
    {"title": "The Dispossessed", "author": "Ursula K. Le Guin"},
    {"title": "Kindred", "author": "Octavia E. Butler"},
]


def resolve_books(_, info, author=None):
    return [book for book in BOOKS if author is None or book["author"] == author]


SCHEMA.query_type.fields["books"].resolve = resolve_books


def on_response(result):
    """Report the number of errors alongside the standard response"""
    payload = result.formatted
    payload["extensions"] = {"errorCount": len(result.errors or [])}
    return payload


#################################
# Starlette Application Factory #
#################################


async def health(_) -> PlainTextResponse:
    return PlainTextResponse("ok")


def create_app() -> Starlette:
    """Create the Starlette app serving GraphQL next to other routes"""

    graphql_route = get_graphql_route(SCHEMA, path="/graphql", pretty=True, on_response=on_response, name="graphql")

    _app = Starlette(
        routes=[graphql_route, Route("/health", health)],
        exception_handlers={HTTPException: http_exception},
    )

    return _app


# Instantiate the app
APP = create_app()


if __name__ == "__main__":

    uvicorn.run(
        "app:APP",
        host="0.0.0.0",
        port=5084,
        log_level="info",
        reload=False,
    )
