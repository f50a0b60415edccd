from __future__ import annotations

import argparse

import pytest

from db_mcp import server
from db_mcp.config import ServerConfig
from db_mcp.connectors import build_registry
from db_mcp.core.errors import ConnectorNotFoundError
from db_mcp.servers.base_server import create_mcp_server

from conftest import SAMPLE_DSN, FakePool


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("DB_MCP_DSN", "DB_MCP_CONNECTOR", "DB_MCP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def launched(monkeypatch):
    calls = []
    monkeypatch.setattr(server, "run_server", lambda config, registry: calls.append((config, registry)))
    return calls


async def test_server_registers_resources_and_tools():
    mcp = create_mcp_server(build_registry(), "postgres", SAMPLE_DSN, server_name="Test DB")
    tools = {tool.name for tool in await mcp.list_tools()}
    assert tools == {"execute_sql", "list_table_indexes", "describe_table"}

    templates = {template.uriTemplate for template in await mcp.list_resource_templates()}
    assert templates == {
        "db://schemas/{schema_name}/tables",
        "db://schemas/{schema_name}/schema/{table_name}",
    }
    resources = [str(resource.uri) for resource in await mcp.list_resources()]
    assert len(resources) == 1
    assert resources[0].startswith("db://schemas")


async def test_lifespan_connects_and_disconnects(monkeypatch):
    registry = build_registry()
    connector = registry.lookup("postgres")
    pool = FakePool()
    monkeypatch.setattr(connector, "_create_pool", lambda config: pool)

    mcp = create_mcp_server(registry, "postgres", SAMPLE_DSN)
    assert connector.is_connected is False
    async with mcp.settings.lifespan(mcp) as context:
        assert context is connector
        assert connector.is_connected
        assert pool.opened
    assert connector.is_connected is False
    assert pool.closed


def test_server_name_defaults_to_connector_label():
    assert create_mcp_server(build_registry(), "postgres", SAMPLE_DSN).name == "PostgreSQL MCP Server"
    assert create_mcp_server(build_registry(), "postgres", SAMPLE_DSN, server_name=None).name == "PostgreSQL MCP Server"
    assert create_mcp_server(build_registry(), "postgres", SAMPLE_DSN, server_name="Test DB").name == "Test DB"


def test_create_server_with_unknown_connector():
    with pytest.raises(ConnectorNotFoundError):
        create_mcp_server(build_registry(), "oracle", "oracle://localhost/x")


def test_config_prefers_flags_over_environment():
    args = argparse.Namespace(connector=None, dsn=SAMPLE_DSN, name=None, log_level="debug")
    config = ServerConfig.from_args(args, {"DB_MCP_DSN": "postgres://other/db", "DB_MCP_CONNECTOR": "postgres"})
    assert config.dsn == SAMPLE_DSN
    assert config.connector_id == "postgres"
    assert config.log_level == "DEBUG"


def test_config_falls_back_to_environment():
    args = argparse.Namespace(connector=None, dsn=None, name=None, log_level=None)
    config = ServerConfig.from_args(args, {"DB_MCP_DSN": SAMPLE_DSN, "DB_MCP_LOG_LEVEL": "warning"})
    assert config.dsn == SAMPLE_DSN
    assert config.log_level == "WARNING"
    assert config.server_name is None


def test_config_rejects_unknown_log_level():
    with pytest.raises(ValueError):
        ServerConfig(log_level="chatty")


def test_main_runs_server(launched):
    assert server.main(["--dsn", SAMPLE_DSN, "--name", "Sales"]) == 0
    config, registry = launched[0]
    assert config.server_name == "Sales"
    assert config.connector_id == "postgres"
    assert "postgres" in registry


def test_main_reads_dsn_from_environment(monkeypatch, launched):
    monkeypatch.setenv("DB_MCP_DSN", SAMPLE_DSN)
    assert server.main([]) == 0
    assert launched[0][0].dsn == SAMPLE_DSN
    assert launched[0][0].server_name is None


def test_main_requires_dsn(launched):
    assert server.main([]) == 2
    assert launched == []


def test_main_rejects_invalid_dsn(launched):
    assert server.main(["--dsn", "mysql://root@localhost/app"]) == 2
    assert launched == []


def test_main_rejects_unknown_connector(launched):
    assert server.main(["--connector", "oracle", "--dsn", SAMPLE_DSN]) == 2
    assert launched == []


def test_main_lists_connectors(capsys, launched):
    assert server.main(["--list-connectors"]) == 0
    assert "postgres\tPostgreSQL" in capsys.readouterr().out


def test_main_prints_sample_dsn(capsys, launched):
    assert server.main(["--sample-dsn"]) == 0
    assert capsys.readouterr().out.strip() == SAMPLE_DSN
