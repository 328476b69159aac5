"""Table rendering for API responses.

Responses are tagged with their resource kind and cardinality; each
(kind, cardinality) pair has one registered renderer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fogatlasctl.constants import (
    APPLICATIONS,
    DEPLOYMENTS,
    DYNAMIC_NODES,
    EXTERNAL_ENDPOINTS,
    MICROSERVICES,
    NODES,
    REGIONS,
    RELATIONSHIPS,
)
from fogatlasctl.models import (
    Application,
    Deployment,
    DynamicNode,
    ExternalEndpoint,
    FogAtlasModel,
    Microservice,
    Node,
    PriceComponent,
    Region,
    Relationship,
)

logger = logging.getLogger(__name__)


class Cardinality(StrEnum):
    SINGLE = "single"
    LIST = "list"


@dataclass(frozen=True, slots=True)
class Rendered:
    """A decoded response together with the tag that selects its renderer."""

    resource: str
    cardinality: Cardinality
    payload: FogAtlasModel

    def items(self) -> list[Any]:
        if self.cardinality is Cardinality.SINGLE:
            return [self.payload]
        return list(getattr(self.payload, self.resource))


ItemsRenderer = Callable[[Sequence[Any], Console], None]
Renderer = Callable[[Rendered, Console], None]

_RENDERERS: dict[tuple[str, Cardinality], Renderer] = {}


def _register(resource: str) -> Callable[[ItemsRenderer], ItemsRenderer]:
    def decorator(func: ItemsRenderer) -> ItemsRenderer:
        def render_tagged(rendered: Rendered, console: Console) -> None:
            func(rendered.items(), console)

        for cardinality in Cardinality:
            _RENDERERS[(resource, cardinality)] = render_tagged
        return func

    return decorator


def _fmt_float(value: float) -> str:
    return f"{value:.2f}"


def _fmt_price(price: PriceComponent) -> str:
    return ",".join(
        _fmt_float(value) for value in (price.min_price, price.max_price, price.scarcity, price.unit_price)
    )


def _table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> Table:
    table = Table(show_header=True, header_style="bold")
    for header in headers:
        table.add_column(header, overflow="fold")
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))
    return table


_UNBOUNDED_WIDTH = 100_000


def _print(console: Console, table: Table) -> None:
    """Print ``table`` at its natural width, growing past the console if needed.

    Piped output defaults to 80 columns; cells must never be cropped.
    """

    needed = console.measure(table, options=console.options.update_width(_UNBOUNDED_WIDTH)).maximum
    if needed <= console.width:
        console.print(table)
        return

    saved = console.width
    console.width = needed
    try:
        console.print(table)
    finally:
        console.width = saved


@_register(APPLICATIONS)
def render_applications(items: Sequence[Application], console: Console) -> None:
    rows = [
        [
            app.id,
            app.name,
            app.description,
            app.status,
            ",".join(ms.microservice_id for ms in app.microservices),
        ]
        for app in items
    ]
    _print(console, _table(["ID", "Name", "Description", "Status", "Microservice Id"], rows))


@_register(DEPLOYMENTS)
def render_deployments(items: Sequence[Deployment], console: Console) -> None:
    """Deployments print a summary plus microservice and dataflow requirement tables."""

    rows: list[list[str]] = []
    requirements: list[list[str]] = []
    dataflows: list[list[str]] = []
    for depl in items:
        rows.append([depl.name, depl.description, depl.status, depl.externalendpoint_id])
        for ms in depl.microservices:
            requirements.append(
                [
                    depl.name,
                    ms.name,
                    ms.description,
                    ms.cpu_required,
                    ms.memory_required,
                    ms.disk_required,
                    ms.region_id,
                    ms.region_required,
                    _fmt_float(ms.price_required),
                    _fmt_float(ms.price_computed),
                    ms.deployment_descriptor,
                ]
            )
        for df in depl.dataflows:
            dataflows.append(
                [
                    depl.name,
                    df.source_id,
                    df.destination_id,
                    str(df.bandwidth_required),
                    str(df.latency_required),
                ]
            )

    _print(console, _table(["Name", "Description", "Status", "ExternalEndpointID"], rows))
    console.print("Microservices Requirements")
    _print(
        console,
        _table(
            [
                "Depl. Name",
                "Name",
                "Description",
                "CPURequired",
                "MemoryRequired",
                "DiskRequired",
                "RegionID",
                "RegionRequired",
                "PriceRequired",
                "PriceComputed",
                "Deployment Descriptor",
            ],
            requirements,
        )
    )
    console.print("Dataflows")
    _print(
        console,
        _table(
            ["Depl. Name", "SourceID", "DestinationID", "BandwidthRequired", "LatencyRequired"],
            dataflows,
        )
    )


@_register(MICROSERVICES)
def render_microservices(items: Sequence[Microservice], console: Console) -> None:
    rows = [
        [ms.id, ms.name, ms.description, ms.application_id, ms.node_id, ms.region_id, ms.status]
        for ms in items
    ]
    _print(
        console,
        _table(["ID", "Name", "Description", "ApplicationID", "NodeID", "RegionID", "Status"], rows)
    )


@_register(NODES)
def render_nodes(items: Sequence[Node], console: Console) -> None:
    rows = [
        [
            node.id,
            node.architecture,
            node.version,
            node.distribution,
            node.region_id,
            node.cpu_capacity,
            node.cpu_available,
            node.memory_capacity,
            node.memory_available,
            node.disk_capacity,
            node.disk_available,
            node.status,
        ]
        for node in items
    ]
    _print(
        console,
        _table(
            [
                "ID",
                "Architecture",
                "Version",
                "Distribution",
                "RegionID",
                "CPUCapacity",
                "CPUAvailable",
                "MemoryCapacity",
                "MemoryAvailable",
                "DiskCapacity",
                "DiskAvailable",
                "Status",
            ],
            rows,
        )
    )


@_register(REGIONS)
def render_regions(items: Sequence[Region], console: Console) -> None:
    rows: list[list[str]] = []
    for reg in items:
        cpu_price = mem_price = disk_price = ""
        if reg.prices is not None:
            cpu_price = _fmt_price(reg.prices.cpu)
            mem_price = _fmt_price(reg.prices.memory)
            disk_price = _fmt_price(reg.prices.disk)
        rows.append(
            [
                reg.id,
                reg.description,
                reg.location,
                str(reg.tier),
                cpu_price,
                mem_price,
                disk_price,
                ",".join(rel.relationship_id for rel in reg.relationships),
            ]
        )
    _print(
        console,
        _table(
            ["ID", "Description", "Location", "Tier", "CPUPrice", "MemPrice", "DiskPrice", "Relationship Id"],
            rows,
        )
    )


@_register(RELATIONSHIPS)
def render_relationships(items: Sequence[Relationship], console: Console) -> None:
    rows: list[list[str]] = []
    for rel in items:
        bw_price = lat_price = ""
        if rel.prices is not None:
            bw_price = _fmt_price(rel.prices.bandwidth)
            lat_price = _fmt_price(rel.prices.latency)
        rows.append(
            [
                rel.id,
                rel.endpoint_a,
                rel.endpoint_b,
                rel.region_id,
                str(rel.bandwidth_capacity),
                str(rel.bandwidth_available),
                str(rel.latency),
                bw_price,
                lat_price,
                rel.status,
            ]
        )
    _print(
        console,
        _table(
            [
                "ID",
                "EndpointA",
                "EndpointB",
                "RegionID",
                "BandwidthCapacity",
                "BandwidthAvailable",
                "Latency",
                "BandwidthPrice",
                "LatencyPrice",
                "Status",
            ],
            rows,
        )
    )


@_register(EXTERNAL_ENDPOINTS)
def render_externalendpoints(items: Sequence[ExternalEndpoint], console: Console) -> None:
    rows = [
        [ee.id, ee.name, ee.description, ee.type, ee.location, ee.region_id, ee.ip_address]
        for ee in items
    ]
    _print(
        console,
        _table(["ID", "Name", "Description", "Type", "Location", "RegionID", "IPAddress"], rows)
    )


@_register(DYNAMIC_NODES)
def render_dynamicnodes(items: Sequence[DynamicNode], console: Console) -> None:
    rows = [[dyn.id, dyn.ip_address, dyn.node_id, dyn.region_id] for dyn in items]
    _print(console, _table(["ID", "IPAddress", "NodeID", "RegionID"], rows))


def render(rendered: Rendered, *, console: Console | None = None) -> None:
    """Print ``rendered`` as tables. Untagged or unregistered values print nothing."""

    renderer = _RENDERERS.get((rendered.resource, rendered.cardinality))
    if renderer is None:
        logger.warning("no table renderer for %s (%s)", rendered.resource, rendered.cardinality)
        return
    renderer(rendered, console or Console())
