"""Canonical shapes and contracts"""
from .models import (
    Definition,
    Reference,
    CallerEntry,
    CalleeEntry,
    DependencyEdge,
    DependencyGraph,
    ComplexityResult,
    CodebaseAnalysis,
    ProjectStats,
    ComplexitySummary,
    ImpactAssessment,
    DuplicateReport,
    Conventions,
    ProjectDescription,
    McpCallFn,
    CapabilityClient,
    empty_codebase,
    empty_project_stats,
)

__all__ = [
    "Definition",
    "Reference",
    "CallerEntry",
    "CalleeEntry",
    "DependencyEdge",
    "DependencyGraph",
    "ComplexityResult",
    "CodebaseAnalysis",
    "ProjectStats",
    "ComplexitySummary",
    "ImpactAssessment",
    "DuplicateReport",
    "Conventions",
    "ProjectDescription",
    "McpCallFn",
    "CapabilityClient",
    "empty_codebase",
    "empty_project_stats",
]
