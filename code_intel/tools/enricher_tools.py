import json
import logging
from typing import Any, List

from langchain_core.tools import BaseTool, tool

from code_intel.api import CodeIntelEnricher

logger = logging.getLogger(__name__)


def _to_json(result: Any) -> str:
    return json.dumps(result, indent=2, default=str)


def build_enricher_tools(enricher: CodeIntelEnricher) -> List[BaseTool]:
    @tool
    async def assess_impact(files: List[str]) -> str:
        """Estimate the blast radius and complexity of changing the given files. Returns JSON, or null when no data is available."""
        logger.info("🧭 Tool 'assess_impact' called with %d files", len(files))
        return _to_json(await enricher.assess_impact(files))

    @tool
    async def detect_duplicates(query: str) -> str:
        """Find code similar to a description before writing new code. Returns JSON with matches and relatedFiles, or null."""
        logger.info("🧭 Tool 'detect_duplicates' called with query=%r", query)
        return _to_json(await enricher.detect_duplicates(query))

    @tool
    async def get_conventions(path: str = ".") -> str:
        """Report the coding patterns and project statistics for a path. Returns JSON, or null."""
        logger.info("🧭 Tool 'get_conventions' called with path=%r", path)
        return _to_json(await enricher.get_conventions(path))

    @tool
    async def find_tests(symbol: str) -> str:
        """List references to a symbol that live in test files. Returns a JSON list, or null."""
        logger.info("🧭 Tool 'find_tests' called with symbol=%r", symbol)
        return _to_json(await enricher.find_tests(symbol))

    @tool
    async def describe_project(path: str = ".") -> str:
        """Describe the codebase structure and statistics for a path. Returns JSON, or null."""
        logger.info("🧭 Tool 'describe_project' called with path=%r", path)
        return _to_json(await enricher.describe_project(path))

    return [assess_impact, detect_duplicates, get_conventions, find_tests, describe_project]
