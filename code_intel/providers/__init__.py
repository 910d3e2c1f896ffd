"""Capability clients for code-intelligence backends"""
from .code_graph_provider import CodeGraphProvider, TOOL_MAP, CODE_GRAPH_NAMESPACE

__all__ = ["CodeGraphProvider", "TOOL_MAP", "CODE_GRAPH_NAMESPACE"]
