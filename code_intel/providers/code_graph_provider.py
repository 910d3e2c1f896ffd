import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, cast

from code_intel.models import (
    CalleeEntry,
    CallerEntry,
    CodebaseAnalysis,
    ComplexityResult,
    Definition,
    DependencyGraph,
    McpCallFn,
    ProjectStats,
    Reference,
)
from .normalize import (
    CALLEE_ALIASES,
    CALLER_ALIASES,
    REFERENCE_ALIASES,
    normalize_object,
    normalize_sequence,
)

logger = logging.getLogger(__name__)

CODE_GRAPH_NAMESPACE = "code-graph"

# Capability -> Code Graph MCP tool. Read-only public contract.
TOOL_MAP: Mapping[str, str] = MappingProxyType({
    "find_definition": "find_definition",
    "find_references": "find_references",
    "find_callers": "find_callers",
    "find_callees": "find_callees",
    "analyze_dependencies": "dependency_analysis",
    "analyze_complexity": "complexity_analysis",
    "analyze_codebase": "analyze_codebase",
    "get_project_stats": "project_statistics",
})


class CodeGraphProvider:
    """
    Capability client for the Code Graph MCP server.

    Each capability issues exactly one tool call and normalizes the raw
    answer into its canonical shape. Without a transport every capability
    returns None. Transport errors are not caught here.

    Usage:
        provider = CodeGraphProvider(mcp_call_fn=transport)
        refs = await provider.find_references("load_config")
    """

    def __init__(self, mcp_call_fn: Optional[McpCallFn] = None):
        self.mcp_call_fn = mcp_call_fn

    def is_available(self) -> bool:
        """Check if a transport is configured."""
        return self.mcp_call_fn is not None

    async def _call(self, capability: str, args: Dict[str, Any]) -> Any:
        if self.mcp_call_fn is None:
            return None
        tool_name = TOOL_MAP[capability]
        logger.debug("Calling %s/%s with %s", CODE_GRAPH_NAMESPACE, tool_name, args)
        return await self.mcp_call_fn(CODE_GRAPH_NAMESPACE, tool_name, args)

    async def find_definition(self, symbol: str) -> Optional[Definition]:
        raw = await self._call("find_definition", {"symbol": symbol})
        return cast(Optional[Definition], normalize_object(raw, ("file", "line", "column", "context")))

    async def find_references(self, symbol: str, options: Optional[Dict[str, Any]] = None) -> Optional[List[Reference]]:
        raw = await self._call("find_references", {"symbol": symbol, **(options or {})})
        return cast(Optional[List[Reference]], normalize_sequence(raw, "references", REFERENCE_ALIASES))

    async def find_callers(self, symbol: str) -> Optional[List[CallerEntry]]:
        raw = await self._call("find_callers", {"symbol": symbol})
        return cast(Optional[List[CallerEntry]], normalize_sequence(raw, "callers", CALLER_ALIASES))

    async def find_callees(self, symbol: str) -> Optional[List[CalleeEntry]]:
        raw = await self._call("find_callees", {"symbol": symbol})
        return cast(Optional[List[CalleeEntry]], normalize_sequence(raw, "callees", CALLEE_ALIASES))

    async def analyze_dependencies(self, path: str) -> Optional[DependencyGraph]:
        raw = await self._call("analyze_dependencies", {"path": path})
        return cast(Optional[DependencyGraph], normalize_object(raw, ("nodes", "edges")))

    async def analyze_complexity(self, path: str) -> Optional[ComplexityResult]:
        raw = await self._call("analyze_complexity", {"path": path})
        return cast(Optional[ComplexityResult], normalize_object(raw, ("score", "details")))

    async def analyze_codebase(self, path: str, options: Optional[Dict[str, Any]] = None) -> Optional[CodebaseAnalysis]:
        raw = await self._call("analyze_codebase", {"path": path, **(options or {})})
        return cast(Optional[CodebaseAnalysis], normalize_object(raw, ("files", "structure", "patterns")))

    async def get_project_stats(self) -> Optional[ProjectStats]:
        raw = await self._call("get_project_stats", {})
        return cast(Optional[ProjectStats], normalize_object(raw, ("files", "lines", "languages")))
