from __future__ import annotations

import click
import uvicorn
from gqlhttp import VERSION
from gqlhttp.config import load_on_response, load_schema
from gqlhttp.env import EnvManager
from gqlhttp.exceptions import ConfigurationError
from graphql.utilities import print_schema


@click.group()
@click.version_option(version=VERSION)
def main(**kwargs):
    pass  # pragma: no cover


@main.command()
@click.option("-s", "--schema", required=True, help='Import path of the GraphQL schema e.g. "app.schema:SCHEMA"')
@click.option("--path", default="/", help="URL path to serve GraphQL from")
@click.option("--pretty/--no-pretty", default=False, help="Indent JSON responses")
@click.option("--max-body-size", type=int, default=None, help="Maximum request body size in bytes")
@click.option("--on-response", default=None, help='Import path of a response hook e.g. "app.hooks:on_response"')
@click.option("-p", "--port", default=5034, help="Web server port")
@click.option("-h", "--host", default="0.0.0.0", help="Host address")
@click.option("-w", "--workers", default=1, help="Number of parallel workers")
@click.option("--reload/--no-reload", default=False, help="Reload if source files change")
def run(schema, path, pretty, max_body_size, on_response, host, port, workers, reload):
    """Run the GraphQL Web Server"""
    if reload and workers > 1:
        click.echo("Reload not supported with workers > 1")
        return

    # Fail here rather than in every worker
    try:
        load_schema(schema)
        load_on_response(on_response)
    except ConfigurationError as exc:
        raise click.BadParameter(str(exc)) from exc

    with EnvManager(
        GQLHTTP_SCHEMA=schema,
        GQLHTTP_PATH=path,
        GQLHTTP_PRETTY=str(pretty).lower(),
        GQLHTTP_MAX_BODY_SIZE=max_body_size,
        GQLHTTP_ON_RESPONSE=on_response,
    ):

        uvicorn.run("gqlhttp.server.app:APP", host=host, workers=workers, port=port, log_level="info", reload=reload)


@main.command()
@click.option("-s", "--schema", required=True, help='Import path of the GraphQL schema e.g. "app.schema:SCHEMA"')
@click.option("-o", "--out-file", type=click.File("w"), default=None, help="Output file path")
def dump_schema(schema, out_file):
    """Dump the GraphQL Schema to stdout or file"""
    try:
        gql_schema = load_schema(schema)
    except ConfigurationError as exc:
        raise click.BadParameter(str(exc)) from exc

    schema_str = print_schema(gql_schema)
    click.echo(schema_str, file=out_file)
