"""Tooling around the enricher: MCP transport and agent tools.

Each agent tool module exposes a `build_<name>_tools(enricher)` function returning
callables decorated with `@tool`; `factory.get_tools` assembles them.
"""

from .factory import get_tools
from .mcp_transport import MCPTransport, MCPToolError

__all__ = ["get_tools", "MCPTransport", "MCPToolError"]
