from __future__ import annotations

import json
from enum import StrEnum

import yaml

from fogatlasctl.models import FogAtlasModel


class OutputFormat(StrEnum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


def emit(value: FogAtlasModel, *, output: OutputFormat = OutputFormat.JSON) -> None:
    """Print a decoded response as json or yaml. Tables go through ``fogatlasctl.render``."""

    plain = value.model_dump(mode="json", by_alias=True)
    if output == OutputFormat.YAML:
        print(yaml.safe_dump(plain, sort_keys=False), end="")
        return
    print(json.dumps(plain, indent=2))
