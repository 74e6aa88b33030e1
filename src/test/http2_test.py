import asyncio
import json
import typing

from gqlhttp.server.starlette import create_app
from sample_schema import SCHEMA


def post_over_http2(body: bytes, content_type: bytes = b"application/json") -> typing.Tuple[int, bytes]:
    """Send a POST through the ASGI app as an HTTP/2 server would: no Content-Length"""

    async def scenario():
        app = create_app(SCHEMA)
        messages = [{"type": "http.request", "body": body, "more_body": False}]

        async def receive():
            if messages:
                return messages.pop(0)
            # Held open until the response is sent, like a connected client
            await asyncio.Event().wait()

        sent = []

        async def send(message):
            sent.append(message)

        scope = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "2",
            "method": "POST",
            "scheme": "https",
            "path": "/",
            "raw_path": b"/",
            "root_path": "",
            "query_string": b"",
            "headers": [(b"content-type", content_type)],
            "client": ("testclient", 50000),
            "server": ("testserver", 443),
        }
        await asyncio.wait_for(app(scope, receive, send), timeout=10)
        return sent

    sent = asyncio.run(scenario())
    status = sent[0]["status"]
    response_body = b"".join(message.get("body", b"") for message in sent[1:])
    return status, response_body


def test_http2_json_without_content_length():
    status, body = post_over_http2(json.dumps({"query": "{ hello }"}).encode())
    assert status == 200
    assert json.loads(body) == {"data": {"hello": "Hello world"}}


def test_http2_graphql_without_content_length():
    status, body = post_over_http2(b"{ hello }", content_type=b"application/graphql")
    assert status == 200
    assert json.loads(body) == {"data": {"hello": "Hello world"}}


def test_http2_empty_body_is_missing_query():
    status, body = post_over_http2(b"", content_type=b"application/graphql")
    assert status == 400
    assert body == b"Must provide query string."


def test_http2_empty_json_body_is_invalid():
    status, body = post_over_http2(b"")
    assert status == 400
    assert body == b"POST body is invalid JSON."
