"""
Namespace-scoped memoization of aggregate hierarchy queries.

Keyed by (TypeReference, QueryKind). Only successful results are stored;
entries live until the owning namespace is torn down.
"""

from __future__ import annotations

import threading
from typing import Any

from ..domain.models import QueryKind, TypeReference

_MISSING = object()


class HierarchyCache:
    """Thread-safe result cache for one namespace."""

    def __init__(self) -> None:
        self._entries: dict[tuple[TypeReference, QueryKind], frozenset[Any]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, reference: TypeReference, kind: QueryKind) -> frozenset[Any] | None:
        with self._lock:
            value = self._entries.get((reference, kind), _MISSING)
            if value is _MISSING:
                self._misses += 1
                return None
            self._hits += 1
            return value

    def put(self, reference: TypeReference, kind: QueryKind, value: frozenset[Any]) -> None:
        with self._lock:
            self._entries[(reference, kind)] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "entries": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
