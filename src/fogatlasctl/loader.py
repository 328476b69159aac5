"""Readers for resource bodies and bulk descriptor files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import ValidationError

from fogatlasctl.errors import FileFormatError
from fogatlasctl.models import BulkDescriptor, FogAtlasModel

ModelT = TypeVar("ModelT", bound=FogAtlasModel)


def read_file(path: str | Path) -> str:
    try:
        return Path(path).expanduser().read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileFormatError(f"unable to read file {path}: {exc}") from exc


def load_resource(path: str | Path, model: type[ModelT]) -> ModelT:
    """Decode a single resource body; the file holds the bare JSON object."""

    raw = read_file(path)
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        raise FileFormatError(f"wrong file format: {exc}") from exc


def _drop_empty_lists(payload: dict[str, Any]) -> dict[str, Any]:
    # A key with no items decodes to None in YAML.
    return {key: value for key, value in payload.items() if value is not None}


def load_descriptor(path: str | Path) -> BulkDescriptor:
    """Parse a bulk descriptor. YAML is a superset of JSON so both are accepted."""

    raw = read_file(path)
    try:
        parsed = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise FileFormatError(f"wrong file format: {exc}") from exc

    if not isinstance(parsed, dict):
        raise FileFormatError("wrong file format: descriptor must be a mapping of resource lists")

    try:
        return BulkDescriptor.model_validate(_drop_empty_lists(parsed))
    except ValidationError as exc:
        raise FileFormatError(f"wrong file format: {exc}") from exc
