import pytest

from code_intel.tools.mcp_transport import MCPTransport
from code_intel.utils import env

_ENV_VARS = ("CODE_GRAPH_MCP_URL", "CODE_GRAPH_MCP_TRANSPORT", "CODE_GRAPH_MCP_COMMAND", "CODE_GRAPH_MCP_ARGS")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_no_configuration_means_no_connection():
    assert env.code_graph_connection() is None


def test_url_connection_defaults_to_streamable_http(monkeypatch):
    monkeypatch.setenv("CODE_GRAPH_MCP_URL", "http://localhost:9000/mcp/")

    assert env.code_graph_connection() == {"url": "http://localhost:9000/mcp/", "transport": "streamable_http"}


def test_command_connection_uses_stdio(monkeypatch):
    monkeypatch.setenv("CODE_GRAPH_MCP_COMMAND", "npx")
    monkeypatch.setenv("CODE_GRAPH_MCP_ARGS", "-y @code-graph/mcp --root '/srv/my repo'")

    assert env.code_graph_connection() == {
        "transport": "stdio",
        "command": "npx",
        "args": ["-y", "@code-graph/mcp", "--root", "/srv/my repo"],
    }


def test_load_env_reads_dotenv_file(tmp_path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("CODE_GRAPH_MCP_URL=http://code-graph:9000/mcp/\nCODE_GRAPH_MCP_TRANSPORT=sse\n")

    env.load_env(str(dotenv_file))

    assert env.code_graph_connection() == {"url": "http://code-graph:9000/mcp/", "transport": "sse"}


@pytest.mark.asyncio
async def test_build_provider_without_server_is_a_no_op():
    provider = env.build_provider()

    assert provider.is_available() is False
    assert await provider.get_project_stats() is None


def test_build_provider_wires_mcp_transport(monkeypatch):
    monkeypatch.setenv("CODE_GRAPH_MCP_URL", "http://localhost:9000/mcp/")

    provider = env.build_provider()

    assert isinstance(provider.mcp_call_fn, MCPTransport)
    assert set(provider.mcp_call_fn.connections) == {"code-graph"}


def test_package_exports_provider_setup():
    import code_intel

    assert code_intel.build_provider is env.build_provider
    assert code_intel.load_env is env.load_env
