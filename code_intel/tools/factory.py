from typing import Callable, List

from langchain_core.tools import BaseTool

from code_intel.api import CodeIntelEnricher
from .enricher_tools import build_enricher_tools

ToolBuilder = Callable[[CodeIntelEnricher], List[BaseTool]]


def get_tools(enricher: CodeIntelEnricher) -> List[BaseTool]:
    """Return the agent tools backed by the given enricher."""
    builders: List[ToolBuilder] = [
        build_enricher_tools,
    ]
    return [tool for builder in builders for tool in builder(enricher)]
