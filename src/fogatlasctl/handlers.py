"""Command handlers: validate options, issue API calls, and wrap failures.

Single-item handlers fail fast by raising ``FogAtlasError``. Bulk handlers
report each item through ``on_outcome`` and keep going after failures.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fogatlasctl.constants import DEPLOYMENTS
from fogatlasctl.errors import FogAtlasError, RequestError, UsageError, unknown_resource
from fogatlasctl.loader import load_descriptor, load_resource
from fogatlasctl.models import OperationResult
from fogatlasctl.render import Cardinality, Rendered
from fogatlasctl.resources import BULK_ORDER, RESOURCE_KINDS, ResourceKind, resolve_kind

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandOptions:
    """Named options shared by every command; empty string means unset."""

    id: str = ""
    region_id: str = ""
    node_id: str = ""
    status: str = ""
    file: str = ""

    def value(self, name: str) -> str:
        return str(getattr(self, name) or "")


@dataclass(slots=True)
class BulkOutcome:
    resource: str
    identifier: str
    result: OperationResult | None = None
    error: FogAtlasError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


OutcomeCallback = Callable[[BulkOutcome], None]


def _list_params(kind: ResourceKind, filter_name: str | None, options: CommandOptions) -> dict[str, str]:
    if filter_name is None:
        return {}
    value = options.value(filter_name)
    return {filter_name: value} if value else {}


async def _list(client: Any, kind: ResourceKind, params: dict[str, str]) -> Any:
    try:
        return await kind.service(client).list(**params)
    except RequestError as exc:
        raise FogAtlasError(f"get {kind.label} failed: {exc}") from exc


async def get_resource(client: Any, resource: str, options: CommandOptions) -> Rendered:
    kind = resolve_kind(resource)
    if options.id:
        try:
            item = await kind.service(client).get(options.id)
        except RequestError as exc:
            raise FogAtlasError(f"get {kind.label} failed: {exc}") from exc
        return Rendered(kind.token, Cardinality.SINGLE, item)

    listing = await _list(client, kind, _list_params(kind, kind.list_filter, options))
    return Rendered(kind.token, Cardinality.LIST, listing)


async def put_resource(client: Any, resource: str, options: CommandOptions) -> OperationResult:
    """Upsert one resource read from ``options.file``, keyed by ``options.id``."""

    kind = resolve_kind(resource)
    if not options.id or not options.file:
        raise UsageError("options --id and --file are required")

    item = load_resource(options.file, kind.item_model)
    try:
        return await kind.service(client).put(options.id, item)
    except RequestError as exc:
        raise FogAtlasError(f"put {kind.label} failed ({exc})") from exc


async def patch_resource(client: Any, resource: str, options: CommandOptions) -> OperationResult:
    if resource != DEPLOYMENTS:
        raise unknown_resource(resource)
    if not options.id or not options.status:
        raise UsageError("options --id and --status are required")

    try:
        return await client.deployments.patch_status(options.id, options.status)
    except RequestError as exc:
        raise FogAtlasError(f"patch deployments failed ({exc})") from exc


async def delete_resource(client: Any, resource: str, options: CommandOptions) -> OperationResult:
    kind = resolve_kind(resource)
    if not options.id:
        raise UsageError("option --id is required")

    try:
        return await kind.service(client).delete(options.id)
    except RequestError as exc:
        raise FogAtlasError(f"delete {kind.label} failed: {exc}") from exc


async def put_all(
    client: Any,
    options: CommandOptions,
    *,
    on_outcome: OutcomeCallback | None = None,
) -> list[BulkOutcome]:
    """Upsert every item of a bulk descriptor, one request at a time.

    Items are keyed by their own body (``id``, or ``name`` for deployments and
    microservices). A failed item is recorded and the loop moves on; there is
    no rollback.
    """

    if not options.file:
        raise UsageError("option --file is required")

    descriptor = load_descriptor(options.file)
    logger.debug("loaded %d items from %s", descriptor.item_count(), options.file)

    outcomes: list[BulkOutcome] = []
    for token in BULK_ORDER:
        kind = RESOURCE_KINDS[token]
        service = kind.service(client)
        for item in kind.bulk_items(descriptor):
            identifier = kind.bulk_key_of(item)
            outcome = BulkOutcome(resource=token, identifier=identifier)
            try:
                outcome.result = await service.put(identifier, item)
            except RequestError as exc:
                logger.warning("put %s %r failed: %s", kind.label, identifier, exc)
                outcome.error = exc
            outcomes.append(outcome)
            if on_outcome is not None:
                on_outcome(outcome)
    return outcomes


async def delete_all(
    client: Any,
    resource: str,
    options: CommandOptions,
    *,
    on_outcome: OutcomeCallback | None = None,
) -> list[BulkOutcome]:
    """Delete every listed item of one kind. Only the initial listing is fatal."""

    kind = resolve_kind(resource)
    listing = await _list(client, kind, _list_params(kind, kind.purge_filter, options))

    service = kind.service(client)
    outcomes: list[BulkOutcome] = []
    for item in kind.items(listing):
        identifier = kind.key_of(item)
        outcome = BulkOutcome(resource=kind.token, identifier=identifier)
        try:
            outcome.result = await service.delete(identifier)
        except RequestError as exc:
            logger.warning("delete %s %r failed: %s", kind.label, identifier, exc)
            outcome.error = FogAtlasError(f"delete {kind.label} failed: {exc}")
        outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)
    return outcomes
