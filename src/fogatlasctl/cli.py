from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Coroutine
from typing import Annotated, Any, TypeVar

import typer

import fogatlasctl
from fogatlasctl.client import AsyncFogAtlasClient
from fogatlasctl.constants import VERSION
from fogatlasctl.errors import FogAtlasError
from fogatlasctl.handlers import (
    BulkOutcome,
    CommandOptions,
    delete_all,
    delete_resource,
    get_resource,
    patch_resource,
    put_all,
    put_resource,
)
from fogatlasctl.models import OperationResult
from fogatlasctl.render import render
from fogatlasctl.utils.output import OutputFormat, emit

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Command line interface for FogAtlas")

ALL_RESOURCES = "{applications|deployments|microservices|nodes|regions|relationships|externalendpoints|dynamicnodes}"

ResourceArg = Annotated[str, typer.Argument(metavar="RESOURCE", help=ALL_RESOURCES, show_default=False)]
EndpointOpt = Annotated[
    str | None,
    typer.Option("--endpoint", help="API endpoint (host:port), defaults to 127.0.0.1:8080"),
]
FileOpt = Annotated[str, typer.Option("--file", help="File describing the resource(s)", show_default=False)]
RegionOpt = Annotated[
    str,
    typer.Option(
        "--region_id",
        help="Region the resource belongs to (nodes, relationships, externalendpoints, dynamicnodes)",
        show_default=False,
    ),
]

T = TypeVar("T")


def _run(awaitable: Coroutine[Any, Any, T]) -> T:
    try:
        return asyncio.run(awaitable)
    except FogAtlasError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1) from exc


def _make_client(endpoint: str | None) -> AsyncFogAtlasClient:
    return AsyncFogAtlasClient(endpoint=endpoint)


def _setup_logging(level: int) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s-%(levelname)s-%(name)s: %(message)s", "%H:%M:%S"))

    project_logger = logging.getLogger(fogatlasctl.__name__)
    project_logger.setLevel(level)
    project_logger.handlers = [handler]
    project_logger.propagate = False


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fogatlasctl {VERSION}")
        raise typer.Exit()


def _echo_result(result: OperationResult) -> None:
    # The API reports problems in the body; success leaves it empty.
    typer.echo(result.error)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug output")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    _ = version
    _setup_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command("get", help="Retrieve information on a resource")
def get(
    resource: ResourceArg = "",
    endpoint: EndpointOpt = None,
    identifier: Annotated[
        str, typer.Option("--id", help="Identifier of the resource to be retrieved", show_default=False)
    ] = "",
    region_id: RegionOpt = "",
    node_id: Annotated[
        str, typer.Option("--node_id", help="Node the resource belongs to (microservices)", show_default=False)
    ] = "",
    status: Annotated[
        str, typer.Option("--status", help="Status of the deployment (deployments)", show_default=False)
    ] = "",
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    options = CommandOptions(id=identifier, region_id=region_id, node_id=node_id, status=status)

    async def run() -> Any:
        async with _make_client(endpoint) as client:
            return await get_resource(client, resource, options)

    rendered = _run(run())
    if output == OutputFormat.TABLE:
        render(rendered)
        return
    emit(rendered.payload, output=output)


@app.command("put", help="Create/update a resource")
def put(
    resource: ResourceArg = "",
    endpoint: EndpointOpt = None,
    identifier: Annotated[
        str, typer.Option("--id", help="Identifier of the resource to be created/updated", show_default=False)
    ] = "",
    file: FileOpt = "",
) -> None:
    options = CommandOptions(id=identifier, file=file)

    async def run() -> OperationResult:
        async with _make_client(endpoint) as client:
            return await put_resource(client, resource, options)

    _echo_result(_run(run()))


@app.command("patch", help="Update the status of a deployment")
def patch(
    resource: Annotated[str, typer.Argument(metavar="RESOURCE", help="{deployments}", show_default=False)] = "",
    endpoint: EndpointOpt = None,
    identifier: Annotated[
        str, typer.Option("--id", help="Name of the deployment to be updated", show_default=False)
    ] = "",
    status: Annotated[str, typer.Option("--status", help="New status value", show_default=False)] = "",
) -> None:
    options = CommandOptions(id=identifier, status=status)

    async def run() -> OperationResult:
        async with _make_client(endpoint) as client:
            return await patch_resource(client, resource, options)

    _echo_result(_run(run()))


@app.command("delete", help="Delete a resource")
def delete(
    resource: ResourceArg = "",
    endpoint: EndpointOpt = None,
    identifier: Annotated[
        str, typer.Option("--id", help="Identifier of the resource to be deleted", show_default=False)
    ] = "",
) -> None:
    options = CommandOptions(id=identifier)

    async def run() -> OperationResult:
        async with _make_client(endpoint) as client:
            return await delete_resource(client, resource, options)

    _echo_result(_run(run()))


@app.command("putAll", help="Create/update a set of resources described in a yaml file")
def put_all_command(
    endpoint: EndpointOpt = None,
    file: FileOpt = "",
) -> None:
    options = CommandOptions(file=file)

    def report(outcome: BulkOutcome) -> None:
        if outcome.result is not None:
            _echo_result(outcome.result)
        else:
            typer.echo(f"error while sending request: {outcome.error}")

    async def run() -> list[BulkOutcome]:
        async with _make_client(endpoint) as client:
            return await put_all(client, options, on_outcome=report)

    _run(run())


@app.command("deleteAll", help="Delete all resources of the given type")
def delete_all_command(
    resource: ResourceArg = "",
    endpoint: EndpointOpt = None,
    region_id: RegionOpt = "",
) -> None:
    options = CommandOptions(region_id=region_id)

    def report(outcome: BulkOutcome) -> None:
        if outcome.result is not None:
            _echo_result(outcome.result)
        else:
            typer.echo(f"Error: {outcome.error}")

    async def run() -> list[BulkOutcome]:
        async with _make_client(endpoint) as client:
            return await delete_all(client, resource, options, on_outcome=report)

    _run(run())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
