from __future__ import annotations
from typing import Any, Awaitable, Callable, Dict, List, NotRequired, Optional, Protocol, TypedDict


# Canonical capability shapes. Per-item fields are NotRequired: an alias the
# backend never sent is omitted from the item.

class Definition(TypedDict):
    file: str
    line: int
    column: int
    context: str


class Reference(TypedDict):
    file: NotRequired[str]
    line: NotRequired[int]
    context: NotRequired[str]


class CallerEntry(TypedDict):
    caller: NotRequired[str]
    file: NotRequired[str]
    line: NotRequired[int]


class CalleeEntry(TypedDict):
    callee: NotRequired[str]
    file: NotRequired[str]
    line: NotRequired[int]


# "from" is a keyword, hence the functional form
DependencyEdge = TypedDict("DependencyEdge", {"from": str, "to": str})


class DependencyGraph(TypedDict):
    nodes: List[str]
    edges: List[DependencyEdge]


class ComplexityResult(TypedDict):
    score: float
    details: Dict[str, Any]


class CodebaseAnalysis(TypedDict):
    files: List[str]
    structure: Dict[str, Any]
    patterns: List[str]


class ProjectStats(TypedDict):
    files: int
    lines: int
    languages: Dict[str, int]


# Composed results returned by the enricher

class ComplexitySummary(TypedDict):
    average: float
    perFile: Dict[str, float]


class ImpactAssessment(TypedDict):
    blastRadius: int
    complexity: ComplexitySummary


class DuplicateReport(TypedDict):
    matches: List[Reference]
    relatedFiles: List[str]


class Conventions(TypedDict):
    patterns: List[str]
    stats: ProjectStats


class ProjectDescription(TypedDict):
    codebase: CodebaseAnalysis
    stats: ProjectStats


def empty_codebase() -> CodebaseAnalysis:
    return {"files": [], "structure": {}, "patterns": []}


def empty_project_stats() -> ProjectStats:
    return {"files": 0, "lines": 0, "languages": {}}


# Transport used to reach the code-graph backend: (namespace, tool name, args)
McpCallFn = Callable[[str, str, Dict[str, Any]], Awaitable[Any]]


class CapabilityClient(Protocol):
    """The eight primitives the enricher composes."""

    async def find_definition(self, symbol: str) -> Optional[Definition]: ...
    async def find_references(self, symbol: str, options: Optional[Dict[str, Any]] = None) -> Optional[List[Reference]]: ...
    async def find_callers(self, symbol: str) -> Optional[List[CallerEntry]]: ...
    async def find_callees(self, symbol: str) -> Optional[List[CalleeEntry]]: ...
    async def analyze_dependencies(self, path: str) -> Optional[DependencyGraph]: ...
    async def analyze_complexity(self, path: str) -> Optional[ComplexityResult]: ...
    async def analyze_codebase(self, path: str, options: Optional[Dict[str, Any]] = None) -> Optional[CodebaseAnalysis]: ...
    async def get_project_stats(self) -> Optional[ProjectStats]: ...
