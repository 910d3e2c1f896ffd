"""Normalize raw code-graph responses into canonical shapes.

The backend answers the sequence capabilities in one of two dialects:

- a bare list whose items already use the canonical field names
- an object wrapping the list under a capability key (``references``,
  ``callers``, ``callees``) whose items may use alias field names

Every check here is a presence check (``key in raw``), never a truthiness
check, so ``0``, ``[]`` and ``{}`` reported by the backend survive.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# canonical field -> raw keys, highest precedence first
AliasTable = Mapping[str, Tuple[str, ...]]

REFERENCE_ALIASES: AliasTable = {
    "file": ("path", "file"),
    "line": ("row", "line"),
    "context": ("snippet", "context"),
}

CALLER_ALIASES: AliasTable = {
    "caller": ("caller",),
    "file": ("path", "file"),
    "line": ("row", "line"),
}

CALLEE_ALIASES: AliasTable = {
    "callee": ("callee",),
    "file": ("path", "file"),
    "line": ("row", "line"),
}


class SequenceVariant(Enum):
    ABSENT = "absent"
    BARE = "bare"
    WRAPPED = "wrapped"
    MALFORMED = "malformed"


def classify_sequence(raw: Any, wrapper_key: str) -> SequenceVariant:
    """Tell which response dialect a raw sequence result is in."""
    if raw is None:
        return SequenceVariant.ABSENT
    if isinstance(raw, list):
        return SequenceVariant.BARE
    if isinstance(raw, Mapping):
        if wrapper_key not in raw:
            return SequenceVariant.ABSENT
        if isinstance(raw[wrapper_key], list):
            return SequenceVariant.WRAPPED
    return SequenceVariant.MALFORMED


def resolve_aliases(item: Mapping[str, Any], aliases: AliasTable) -> Dict[str, Any]:
    """Rename alias keys to canonical ones; unresolved fields are left out."""
    resolved: Dict[str, Any] = {}
    for field, candidates in aliases.items():
        for key in candidates:
            if key in item:
                resolved[field] = item[key]
                break
    return resolved


def normalize_sequence(raw: Any, wrapper_key: str, aliases: AliasTable) -> Optional[List[Dict[str, Any]]]:
    """Return the canonical list, ``[]`` when the backend reported none, or
    ``None`` when the backend had nothing to say."""
    variant = classify_sequence(raw, wrapper_key)

    if variant is SequenceVariant.BARE:
        return [dict(item) for item in raw if isinstance(item, Mapping)]

    if variant is SequenceVariant.WRAPPED:
        return [resolve_aliases(item, aliases) for item in raw[wrapper_key] if isinstance(item, Mapping)]

    if variant is SequenceVariant.MALFORMED:
        logger.debug("Unrecognized %s payload of type %s", wrapper_key, type(raw).__name__)
    return None


def normalize_object(raw: Any, fields: Sequence[str]) -> Optional[Dict[str, Any]]:
    """Pass an object result through untouched, or ``None`` when absent."""
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        logger.debug("Expected an object with %s, got %s", fields, type(raw).__name__)
        return None
    missing = [field for field in fields if field not in raw]
    if missing:
        logger.debug("Result is missing canonical fields %s", missing)
    return dict(raw)
