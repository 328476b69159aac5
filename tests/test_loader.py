from __future__ import annotations

import json
from pathlib import Path

import pytest

from fogatlasctl.errors import FileFormatError
from fogatlasctl.loader import load_descriptor, load_resource
from fogatlasctl.models import Deployment, Region


def test_descriptor_reads_singular_dynamicnode_key(tmp_path: Path) -> None:
    path = tmp_path / "infra.yaml"
    path.write_text(
        "dynamicnode:\n  - id: dn-1\n    ip_address: 10.0.0.7\nregions:\n  - id: r1\n    tier: 2\n",
        encoding="utf-8",
    )
    descriptor = load_descriptor(path)

    assert [node.id for node in descriptor.dynamic_nodes] == ["dn-1"]
    assert descriptor.regions[0].tier == 2
    assert descriptor.item_count() == 2


def test_descriptor_accepts_plural_dynamicnodes_and_json(tmp_path: Path) -> None:
    path = tmp_path / "infra.json"
    path.write_text(json.dumps({"dynamicnodes": [{"id": "dn-2"}], "applications": []}), encoding="utf-8")
    descriptor = load_descriptor(path)

    assert descriptor.dynamic_nodes[0].id == "dn-2"
    assert descriptor.applications == []


def test_descriptor_treats_empty_keys_as_empty_lists(tmp_path: Path) -> None:
    path = tmp_path / "infra.yaml"
    path.write_text("applications:\nnodes:\n", encoding="utf-8")
    descriptor = load_descriptor(path)

    assert descriptor.item_count() == 0


def test_empty_descriptor_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_descriptor(path).item_count() == 0


def test_descriptor_must_be_a_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- id: a\n", encoding="utf-8")
    with pytest.raises(FileFormatError, match="mapping"):
        load_descriptor(path)


def test_descriptor_with_wrong_shape(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("regions: not-a-list\n", encoding="utf-8")
    with pytest.raises(FileFormatError, match="wrong file format"):
        load_descriptor(path)


def test_missing_descriptor(tmp_path: Path) -> None:
    with pytest.raises(FileFormatError, match="unable to read file"):
        load_descriptor(tmp_path / "nope.yaml")


def test_load_resource_keeps_nested_and_unknown_fields(tmp_path: Path) -> None:
    path = tmp_path / "deployment.json"
    body = {
        "name": "web",
        "microservices": [{"name": "frontend", "price_required": 1.5, "replicas": 2}],
        "dataflows": [{"source_id": "frontend", "destination_id": "db", "latency_required": 20}],
        "labels": {"team": "edge"},
    }
    path.write_text(json.dumps(body), encoding="utf-8")
    deployment = load_resource(path, Deployment)

    assert deployment.microservices[0].price_required == 1.5
    assert deployment.dataflows[0].latency_required == 20
    assert deployment.to_payload() == body


def test_load_resource_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "region.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(FileFormatError, match="wrong file format"):
        load_resource(path, Region)
