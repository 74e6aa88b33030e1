from typing import Any, Mapping, Optional

from gqlhttp.env import EnvManager
from gqlhttp.exceptions import ConfigurationError
from gqlhttp.server.routes.graphql import OnResponse
from graphql import GraphQLSchema
from uvicorn.importer import ImportFromStringError, import_from_string

TRUTHY = {"1", "true", "yes", "on"}
FALSY = {"0", "false", "no", "off", ""}


def to_bool(value: Optional[str]) -> bool:
    """'true' -> True"""
    if value is None:
        return False
    normalized = value.strip().lower()
    if normalized in TRUTHY:
        return True
    if normalized in FALSY:
        return False
    raise ConfigurationError(f"Expected a boolean, got {value!r}")


def to_optional_int(value: Optional[str]) -> Optional[int]:
    """'1024' -> 1024, '' -> None"""
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"Expected an integer, got {value!r}")


def load_object(import_path: str) -> Any:
    """Resolve an import path of the form 'package.module:attribute'"""
    try:
        return import_from_string(import_path)
    except ImportFromStringError as exc:
        raise ConfigurationError(str(exc)) from exc


def load_schema(import_path: Optional[str]) -> GraphQLSchema:
    if not import_path:
        raise ConfigurationError("No GraphQL schema configured. Set GQLHTTP_SCHEMA e.g. 'app.schema:SCHEMA'")

    schema = load_object(import_path)
    if not isinstance(schema, GraphQLSchema):
        raise ConfigurationError(f"{import_path} is not a GraphQLSchema")
    return schema


def load_on_response(import_path: Optional[str]) -> Optional[OnResponse]:
    if not import_path:
        return None

    on_response = load_object(import_path)
    if not callable(on_response):
        raise ConfigurationError(f"{import_path} is not callable")
    return on_response


class Config:
    """Server settings read from GQLHTTP_* environment variables

    Read when instantiated, after the CLI has stashed its options with EnvManager
    """

    def __init__(self, env: Mapping[str, str]) -> None:
        self.schema = env.get("GQLHTTP_SCHEMA")
        self.path = env.get("GQLHTTP_PATH") or "/"
        self.pretty = to_bool(env.get("GQLHTTP_PRETTY"))
        self.max_body_size = to_optional_int(env.get("GQLHTTP_MAX_BODY_SIZE"))
        self.on_response = env.get("GQLHTTP_ON_RESPONSE")

    @classmethod
    def from_environ(cls) -> "Config":
        return cls(EnvManager.get_environ())

    def load_schema(self) -> GraphQLSchema:
        return load_schema(self.schema)

    def load_on_response(self) -> Optional[OnResponse]:
        return load_on_response(self.on_response)
