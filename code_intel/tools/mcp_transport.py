"""
MCP transport using langchain_mcp_adapters

Calls a named tool on one of the configured MCP servers and decodes the
result into plain JSON data for the capability client.
"""
import json
import logging
from typing import Any, Dict, Optional

from langchain_mcp_adapters.client import MultiServerMCPClient
from langchain_mcp_adapters.sessions import Connection
from mcp.types import CallToolResult

logger = logging.getLogger(__name__)


class MCPToolError(RuntimeError):
    """Raised when an MCP server cannot serve a tool call."""


def decode_tool_result(result: CallToolResult) -> Any:
    """Turn a CallToolResult into JSON data, a plain string, or None."""
    if result.isError:
        message = " ".join(getattr(block, "text", "") for block in result.content).strip()
        raise MCPToolError(message or "MCP tool call failed")

    structured = getattr(result, "structuredContent", None)
    if structured is not None:
        # FastMCP wraps non-object return values as {"result": ...}
        if isinstance(structured, dict) and list(structured) == ["result"]:
            return structured["result"]
        return structured

    text = "".join(block.text for block in result.content if getattr(block, "type", None) == "text")
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


class MCPTransport:
    """Invoke tools by name on configured MCP servers.

    An instance is directly usable as the ``mcp_call_fn`` of a capability
    client: ``await transport(namespace, tool_name, args)``.
    """

    def __init__(self, connections: Dict[str, Connection], client: Optional[MultiServerMCPClient] = None):
        self.connections: Dict[str, Connection] = connections
        self.client = client if client is not None else self.mcp_client()

    def mcp_client(self) -> MultiServerMCPClient:
        """Create MCP client with the configured servers."""
        return MultiServerMCPClient(connections=self.connections)

    async def __call__(self, namespace: str, tool_name: str, args: Dict[str, Any]) -> Any:
        if namespace not in self.connections:
            raise MCPToolError(f"No MCP server configured for '{namespace}'")

        async with self.client.session(namespace) as session:
            result = await session.call_tool(tool_name, args)

        data = decode_tool_result(result)
        logger.info("🔧 %s/%s returned %s", namespace, tool_name, "no data" if data is None else type(data).__name__)
        return data
