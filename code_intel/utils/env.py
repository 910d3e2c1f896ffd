import logging
import os
import shlex
from typing import Optional

from dotenv import load_dotenv
from langchain_mcp_adapters.sessions import Connection

from code_intel.providers import CodeGraphProvider, CODE_GRAPH_NAMESPACE
from code_intel.tools.mcp_transport import MCPTransport

logger = logging.getLogger(__name__)


def load_env(env_file: Optional[str] = None) -> None:
    """Load environment variables from .env file."""
    load_dotenv(env_file)


def code_graph_connection() -> Optional[Connection]:
    """Return the Code Graph MCP connection configured in the environment, if any."""
    url = os.getenv("CODE_GRAPH_MCP_URL")
    if url:
        return {
            "url": url,
            "transport": os.getenv("CODE_GRAPH_MCP_TRANSPORT", "streamable_http"),
        }  # type: ignore[return-value]

    command = os.getenv("CODE_GRAPH_MCP_COMMAND")
    if command:
        return {
            "transport": "stdio",
            "command": command,
            "args": shlex.split(os.getenv("CODE_GRAPH_MCP_ARGS", "")),
        }

    return None


def build_provider() -> CodeGraphProvider:
    """Create a capability client wired to the configured Code Graph server."""
    connection = code_graph_connection()
    if connection is None:
        logger.warning("⚠️ No Code Graph MCP server configured; code intelligence is disabled")
        return CodeGraphProvider()
    return CodeGraphProvider(mcp_call_fn=MCPTransport({CODE_GRAPH_NAMESPACE: connection}))
