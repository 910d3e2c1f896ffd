"""
Composed code-intelligence analyses.

Each analysis combines one or two capability calls into a result a calling
agent can act on directly. None means "no backend data"; transport errors
propagate to the caller.
"""
import asyncio
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from code_intel.models import (
    CapabilityClient,
    ComplexityResult,
    Conventions,
    DuplicateReport,
    ImpactAssessment,
    ProjectDescription,
    Reference,
    empty_codebase,
    empty_project_stats,
)

logger = logging.getLogger(__name__)

_TEST_DIR_RE = re.compile(r"(?:^|/)(?:tests|__tests__)/")
_TEST_FILE_RE = re.compile(r"\.(?:test|spec)\.[^./]+$")


def _numeric_score(complexity: Optional[ComplexityResult]) -> Optional[float]:
    """The complexity score when it is a real number, else None."""
    if complexity is None or "score" not in complexity:
        return None
    score = complexity["score"]
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return None
    return score


def _list_field(result: Optional[Mapping[str, Any]], key: str) -> List[Any]:
    if result is None:
        return []
    value = result.get(key)
    return value if isinstance(value, list) else []


def is_test_path(file_path: str) -> bool:
    """Return True for paths under tests/ or __tests__/, or named *.test.* / *.spec.*."""
    normalized = file_path.replace("\\", "/")
    basename = normalized.rsplit("/", 1)[-1]
    return bool(_TEST_DIR_RE.search(normalized) or _TEST_FILE_RE.search(basename))


class CodeIntelEnricher:
    """
    Higher-level analyses composed from the eight capability primitives.

    This class provides:
    - Impact assessment (blast radius + complexity) for a set of files
    - Duplicate detection for a free-text query
    - Convention extraction and project description
    - Test discovery for a symbol

    Usage:
        enricher = CodeIntelEnricher(CodeGraphProvider(mcp_call_fn=transport))
        impact = await enricher.assess_impact(["src/config.py"])
    """

    def __init__(self, client: CapabilityClient):
        """
        Args:
            client: Any object implementing the eight capability methods
        """
        self._client = client

    @property
    def client(self) -> CapabilityClient:
        return self._client

    async def _file_impact(self, file_path: str) -> Tuple[int, Optional[ComplexityResult]]:
        references, complexity = await asyncio.gather(
            self._client.find_references(file_path),
            self._client.analyze_complexity(file_path),
        )
        return (len(references) if references is not None else 0), complexity

    async def assess_impact(self, files: Optional[Sequence[str]]) -> Optional[ImpactAssessment]:
        """
        Estimate what a change to the given files touches.

        Args:
            files: Files about to be changed

        Returns:
            blastRadius (reference sites across all files) and complexity
            (average score plus per-file scores), or None for no files.
            Files without a numeric complexity score are left out of perFile and of
            the average; the average is 0 when no file has a score.
        """
        if not files:
            return None

        results = await asyncio.gather(*(self._file_impact(f) for f in files))

        blast_radius = 0
        per_file: Dict[str, float] = {}
        for file_path, (ref_count, complexity) in zip(files, results):
            blast_radius += ref_count
            score = _numeric_score(complexity)
            if score is not None:
                per_file[file_path] = score

        average = sum(per_file.values()) / len(per_file) if per_file else 0
        logger.debug("Impact of %d files: %d reference sites, %d scored", len(files), blast_radius, len(per_file))
        return {
            "blastRadius": blast_radius,
            "complexity": {"average": average, "perFile": per_file},
        }

    async def detect_duplicates(self, query: str) -> Optional[DuplicateReport]:
        """
        Look for code similar to a free-text description.

        Returns:
            matches (references for the query) and relatedFiles (files of the
            codebase analysis), or None when neither call produced data
        """
        matches, codebase = await asyncio.gather(
            self._client.find_references(query, {}),
            self._client.analyze_codebase(".", {}),
        )
        if matches is None and codebase is None:
            return None
        return {
            "matches": matches if matches is not None else [],
            "relatedFiles": _list_field(codebase, "files"),
        }

    async def get_conventions(self, path: str = ".") -> Optional[Conventions]:
        """Patterns detected under path together with project statistics."""
        codebase, stats = await asyncio.gather(
            self._client.analyze_codebase(path),
            self._client.get_project_stats(),
        )
        if codebase is None and stats is None:
            return None
        return {
            "patterns": _list_field(codebase, "patterns"),
            "stats": stats if stats is not None else empty_project_stats(),
        }

    async def find_tests(self, symbol: str) -> Optional[List[Reference]]:
        """
        References to symbol that live in test files.

        Original order is kept and nothing is deduplicated.
        """
        references = await self._client.find_references(symbol)
        if references is None:
            return None
        return [ref for ref in references if "file" in ref and is_test_path(str(ref["file"]))]

    async def describe_project(self, path: str = ".") -> Optional[ProjectDescription]:
        """Codebase analysis and project statistics in one result."""
        codebase, stats = await asyncio.gather(
            self._client.analyze_codebase(path),
            self._client.get_project_stats(),
        )
        if codebase is None and stats is None:
            return None
        return {
            "codebase": codebase if codebase is not None else empty_codebase(),
            "stats": stats if stats is not None else empty_project_stats(),
        }
