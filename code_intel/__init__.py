"""
Code Intel - capability normalization and query composition

Normalizes Code Graph MCP answers into stable shapes and composes them into
analyses for a calling agent. No CLI or server code lives here.

Usage:
    from code_intel import CodeIntelEnricher, build_provider, load_env

    load_env()  # CODE_GRAPH_MCP_URL or CODE_GRAPH_MCP_COMMAND from .env
    enricher = CodeIntelEnricher(build_provider())
    # every operation is async
    # await enricher.find_tests("load_config")
"""

from code_intel.api import CodeIntelEnricher
from code_intel.providers import CodeGraphProvider, TOOL_MAP
from code_intel.utils.env import build_provider, load_env

__all__ = ["CodeGraphProvider", "CodeIntelEnricher", "TOOL_MAP", "build_provider", "load_env"]
