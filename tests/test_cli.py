from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

import fogatlasctl.cli as cli_module

runner = CliRunner()

WIDE = {"COLUMNS": "300"}


@pytest.fixture()
def patched_cli(api, monkeypatch: pytest.MonkeyPatch) -> Callable[..., object]:
    endpoints: list[str | None] = []

    def make_client(endpoint: str | None):
        endpoints.append(endpoint)
        return api.client()

    monkeypatch.setattr(cli_module, "_make_client", make_client)

    def invoke(*args: str):
        return runner.invoke(cli_module.app, list(args), env=WIDE)

    invoke.endpoints = endpoints  # type: ignore[attr-defined]
    return invoke


def test_get_nodes_renders_table(api, patched_cli) -> None:
    api.on("GET", "/nodes", {"nodes": [{"id": "node-1", "architecture": "arm64", "status": "ready"}]})
    result = patched_cli("get", "nodes", "--region_id", "001-001")

    assert result.exit_code == 0
    assert "node-1" in result.stdout
    assert "arm64" in result.stdout
    assert dict(api.requests[0].url.params) == {"region_id": "001-001"}


def test_get_by_id_json_output(api, patched_cli) -> None:
    api.on("GET", "/applications/app-1", {"id": "app-1", "name": "demo", "owner": "fbk"})
    result = patched_cli("get", "applications", "--id", "app-1", "-o", "json")

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["id"] == "app-1"
    assert payload["owner"] == "fbk"
    assert api.calls == [("GET", "/applications/app-1")]


def test_endpoint_option_reaches_client_factory(api, patched_cli) -> None:
    api.on("GET", "/regions", {"regions": []})
    result = patched_cli("get", "regions", "--endpoint", "10.0.0.1:8080")

    assert result.exit_code == 0
    assert patched_cli.endpoints == ["10.0.0.1:8080"]


def test_get_failure_prints_error_on_stdout(api, patched_cli) -> None:
    api.on("GET", "/regions", {"message": "boom"}, status=500)
    result = patched_cli("get", "regions")

    assert result.exit_code == 1
    assert result.stdout.startswith("Error: get regions failed: HTTP 500")


def test_unknown_resource_is_reported(api, patched_cli) -> None:
    result = patched_cli("delete", "gadgets", "--id", "x")

    assert result.exit_code == 1
    assert "Error: resource specified (gadgets) is unknown" in result.stdout
    assert api.requests == []


def test_missing_resource_token_is_unknown(api, patched_cli) -> None:
    result = patched_cli("get")

    assert result.exit_code == 1
    assert "resource specified () is unknown" in result.stdout


def test_unknown_command_is_a_usage_error(patched_cli) -> None:
    result = patched_cli("list", "nodes")
    assert result.exit_code == 2


def test_put_prints_server_error_string(api, patched_cli, tmp_path: Path) -> None:
    body = tmp_path / "app.json"
    body.write_text(json.dumps({"id": "app-1", "name": "demo"}), encoding="utf-8")
    api.on("PUT", "/applications/app-1", {"error": "microservice ms-9 not found"})
    result = patched_cli("put", "applications", "--id", "app-1", "--file", str(body))

    assert result.exit_code == 0
    assert result.stdout == "microservice ms-9 not found\n"


def test_put_success_prints_empty_line(api, patched_cli, tmp_path: Path) -> None:
    body = tmp_path / "node.json"
    body.write_text(json.dumps({"id": "n1"}), encoding="utf-8")
    result = patched_cli("put", "nodes", "--id", "n1", "--file", str(body))

    assert result.exit_code == 0
    assert result.stdout == "\n"


def test_put_without_file_is_usage_error(api, patched_cli) -> None:
    result = patched_cli("put", "nodes", "--id", "n1")

    assert result.exit_code == 1
    assert result.stdout == "Error: options --id and --file are required\n"
    assert api.requests == []


def test_patch_deployment(api, patched_cli) -> None:
    result = patched_cli("patch", "deployments", "--id", "web", "--status", "stopped")

    assert result.exit_code == 0
    assert api.calls == [("PATCH", "/deployments/web")]


def test_put_all_exits_zero_when_items_fail(api, patched_cli, tmp_path: Path) -> None:
    descriptor = tmp_path / "infra.yaml"
    descriptor.write_text("nodes:\n  - id: n1\n  - id: n2\ndynamicnode:\n  - id: dn-1\n", encoding="utf-8")
    api.on("PUT", "/nodes/n1", {"message": "bad node"}, status=400)
    result = patched_cli("putAll", "--file", str(descriptor))

    assert result.exit_code == 0
    assert "error while sending request: HTTP 400" in result.stdout
    assert api.calls == [("PUT", "/nodes/n1"), ("PUT", "/nodes/n2"), ("PUT", "/dynamicnodes/dn-1")]


def test_put_all_requires_file(api, patched_cli) -> None:
    result = patched_cli("putAll")

    assert result.exit_code == 1
    assert "Error: option --file is required" in result.stdout


def test_delete_all_reports_failures_and_continues(api, patched_cli) -> None:
    api.on("GET", "/dynamicnodes", {"dynamicnodes": [{"id": "dn-1"}, {"id": "dn-2"}]})
    api.on("DELETE", "/dynamicnodes/dn-1", {"message": "locked"}, status=423)
    result = patched_cli("deleteAll", "dynamicnodes", "--region_id", "001-001")

    assert result.exit_code == 0
    assert "Error: delete dynamicnodes failed: HTTP 423" in result.stdout
    assert api.calls[-1] == ("DELETE", "/dynamicnodes/dn-2")
    assert dict(api.requests[0].url.params) == {"region_id": "001-001"}


def test_version_flag() -> None:
    result = runner.invoke(cli_module.app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "fogatlasctl 1.3.0"


def test_get_table_is_not_cropped_on_narrow_output(api, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_module, "_make_client", lambda _endpoint: api.client())
    node = {
        "id": "node-trento-edge-0001",
        "architecture": "arm64",
        "version": "1.19.4-k3s1",
        "distribution": "ubuntu-20.04",
        "region_id": "001-001",
        "cpu_capacity": "4000m",
        "cpu_available": "3500m",
        "memory_capacity": "8Gi",
        "memory_available": "6Gi",
        "disk_capacity": "100Gi",
        "disk_available": "80Gi",
        "status": "ready",
    }
    api.on("GET", "/nodes", {"nodes": [node]})
    result = runner.invoke(cli_module.app, ["get", "nodes"], env={"COLUMNS": "60"})

    assert result.exit_code == 0
    assert "…" not in result.stdout
    for value in node.values():
        assert value in result.stdout


def test_get_renders_row_with_null_fields(api, patched_cli) -> None:
    api.on("GET", "/applications/a1", {"id": "a1", "name": "demo", "description": None})
    result = patched_cli("get", "applications", "--id", "a1")

    assert result.exit_code == 0
    assert "a1" in result.stdout
    assert "demo" in result.stdout


def test_delete_with_null_error_prints_empty_line(api, patched_cli) -> None:
    api.on("DELETE", "/nodes/n1", {"error": None})
    result = patched_cli("delete", "nodes", "--id", "n1")

    assert result.exit_code == 0
    assert result.stdout == "\n"
