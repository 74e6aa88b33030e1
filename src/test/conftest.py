# pylint: disable=redefined-outer-name
from __future__ import annotations

from typing import Callable, Dict, Optional

import pytest
from gqlhttp.server.starlette import create_app
from graphql import GraphQLSchema
from sample_schema import SCHEMA
from starlette.requests import Request
from starlette.testclient import TestClient


@pytest.fixture
def schema() -> GraphQLSchema:
    """ GraphQL schema with hello, broken, requestPath and add fields """
    return SCHEMA


@pytest.fixture
def client_builder(schema: GraphQLSchema) -> Callable[..., TestClient]:
    """Return a function that accepts create_app keyword arguments
    and returns a TestClient for the app"""

    def build(**kwargs) -> TestClient:
        app = create_app(schema, **kwargs)
        return TestClient(app)

    return build


@pytest.fixture
def client(client_builder: Callable[..., TestClient]) -> TestClient:
    return client_builder()


@pytest.fixture
def request_builder() -> Callable[..., Request]:
    """Return a function that builds a Starlette Request without a server"""

    def build(
        body: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
        method: str = "POST",
        http_version: str = "1.1",
    ) -> Request:
        raw_headers = [(key.lower().encode("latin-1"), value.encode("latin-1")) for key, value in (headers or {}).items()]
        scope = {
            "type": "http",
            "http_version": http_version,
            "method": method,
            "path": "/",
            "root_path": "",
            "query_string": b"",
            "headers": raw_headers,
        }
        messages = [{"type": "http.request", "body": body, "more_body": False}]

        async def receive():
            if messages:
                return messages.pop(0)
            return {"type": "http.disconnect"}

        return Request(scope, receive)

    return build
