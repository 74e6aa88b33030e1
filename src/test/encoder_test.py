import json
import math

import pytest
from gqlhttp.exceptions import InternalEncodeError
from gqlhttp.server.encoder import GraphQLResponse, encode_response
from graphql import ExecutionResult, GraphQLError


def test_encode_compact():
    response = encode_response({"data": {"hello": "Hello world"}})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.body == b'{"data":{"hello":"Hello world"}}'


def test_encode_pretty():
    content = {"data": {"hello": "Hello world", "nested": {"a": [1, 2]}}}
    pretty = encode_response(content, pretty=True).body.decode()
    compact = encode_response(content, pretty=False).body.decode()

    assert "\n\t" in pretty
    assert "\n" not in compact
    assert json.loads(pretty) == json.loads(compact) == content


def test_encode_execution_result():
    result = ExecutionResult(data={"broken": None}, errors=[GraphQLError("broken resolver")])
    payload = json.loads(encode_response(result).body)
    assert payload["data"] == {"broken": None}
    assert payload["errors"][0]["message"] == "broken resolver"


def test_encode_execution_result_nested_in_hook_output():
    result = ExecutionResult(data={"hello": "Hello world"})
    payload = json.loads(encode_response({"result": result, "extensions": {"cost": 1}}).body)
    assert payload == {"result": {"data": {"hello": "Hello world"}}, "extensions": {"cost": 1}}


@pytest.mark.parametrize("value", [{"a": 1, "b": [True, None, "x"]}, [1, 2.5, "é"], "text", 3, None])
def test_encode_round_trip(value):
    assert json.loads(encode_response(value).body) == value


def test_encode_keeps_non_ascii():
    response = GraphQLResponse({"name": "été"})
    assert "été".encode("utf-8") in response.body


@pytest.mark.parametrize("value", [object(), {"value": {1, 2}}, {"value": math.nan}])
def test_encode_unserializable(value):
    with pytest.raises(InternalEncodeError) as exc_info:
        encode_response(value)
    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Failed to encode response."
