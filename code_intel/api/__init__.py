"""
Composed analyses over the capability client.

This package is interface-agnostic: agents, CLIs or servers can all use it.
"""
from .code_intel_enricher import CodeIntelEnricher, is_test_path

__all__ = ["CodeIntelEnricher", "is_test_path"]
