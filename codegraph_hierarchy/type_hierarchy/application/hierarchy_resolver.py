"""
Hierarchy Resolver

Queries over type nodes that walk the superclass chain:
- transitive interface sets
- transitive field / method sets (instance/static partitioned)
- member lookup by name / selector with override shadowing

The superclass chain is walked iteratively with a visited-set guard, so a
cyclic hierarchy is reported as HierarchyCycleError instead of recursing
without bound. Every query propagates HierarchyResolutionError unmodified;
absence of a member is a normal None result.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

from codegraph_hierarchy.common.observability import get_logger

from ..domain.models import (
    CLASS_INITIALIZER,
    FieldDescriptor,
    MethodDescriptor,
    QueryKind,
    Selector,
    TypeReference,
)
from ..domain.type_node import TypeNode
from ..exceptions import (
    HierarchyCycleError,
    HierarchyDepthExceededError,
    HierarchyResolutionError,
)
from ..infrastructure.cache import HierarchyCache
from ..infrastructure.config import HierarchyConfig, get_config
from ..infrastructure.namespace import TypeNamespace

logger = get_logger(__name__)

T = TypeVar("T")


class HierarchyResolver:
    """
    Stateless query evaluator over type nodes.

    An optional HierarchyCache memoizes aggregate results per
    (type, query kind) for types owned by the cache's namespace;
    types from other namespaces and lookups are never cached.
    """

    def __init__(
        self,
        config: HierarchyConfig | None = None,
        cache: HierarchyCache | None = None,
    ):
        self._config = config or get_config()
        self._cache = cache if self._config.cache.enable_cache else None
        self._max_depth = self._config.resolution.max_hierarchy_depth

    @classmethod
    def for_namespace(
        cls,
        namespace: TypeNamespace,
        config: HierarchyConfig | None = None,
    ) -> HierarchyResolver:
        """Resolver sharing the namespace's cache."""
        return cls(config=config, cache=namespace.cache)

    # ============================================================
    # Direct ancestry
    # ============================================================

    def superclass_of(self, node: TypeNode) -> TypeNode | None:
        """Superclass of node; None only for a hierarchy root."""
        try:
            return node.resolve_superclass()
        except HierarchyResolutionError as e:
            logger.debug("hierarchy_resolution_failed", type=node.name, query="superclass", reason=str(e))
            raise

    def direct_interfaces_of(self, node: TypeNode) -> frozenset[TypeNode]:
        try:
            return frozenset(node.resolve_direct_interfaces())
        except HierarchyResolutionError as e:
            logger.debug("hierarchy_resolution_failed", type=node.name, query="interfaces", reason=str(e))
            raise

    def iter_ancestors(self, node: TypeNode) -> Iterator[TypeNode]:
        """
        Yield node, its superclass, ... up to the root.

        Lazy: the superclass of a yielded type is resolved only when the
        caller asks for the next one.
        """
        path: list[TypeNode] = []
        visited: set[TypeReference] = set()
        current: TypeNode | None = node
        while current is not None:
            ref = current.reference
            if ref in visited:
                start = next(i for i, t in enumerate(path) if t.reference == ref)
                cycle = [t.name for t in path[start:]] + [current.name]
                logger.debug("hierarchy_cycle_detected", type=node.name, cycle=cycle)
                raise HierarchyCycleError(node, cycle)
            if len(path) >= self._max_depth:
                raise HierarchyDepthExceededError(node, self._max_depth)
            visited.add(ref)
            path.append(current)
            yield current
            current = self.superclass_of(current)

    def ancestor_chain(self, node: TypeNode) -> list[TypeNode]:
        """[node, superclass, ..., root]"""
        return list(self.iter_ancestors(node))

    # ============================================================
    # Interfaces
    # ============================================================

    def all_interfaces_of(self, node: TypeNode) -> frozenset[TypeNode]:
        """Direct interfaces of node and of every superclass, deduplicated."""

        def compute() -> frozenset[TypeNode]:
            result: set[TypeNode] = set()
            for t in self.iter_ancestors(node):
                result.update(self.direct_interfaces_of(t))
            return frozenset(result)

        return self._cached(node, QueryKind.ALL_INTERFACES, compute)

    # ============================================================
    # Single-member lookup (nearest declaration wins)
    # ============================================================

    def lookup_field(self, node: TypeNode, name: str) -> FieldDescriptor | None:
        for t in self.iter_ancestors(node):
            found = t.declared_field(name)
            if found is not None:
                return found
        return None

    def lookup_method(self, node: TypeNode, selector: Selector | str) -> MethodDescriptor | None:
        if isinstance(selector, str):
            selector = Selector.parse(selector)
        for t in self.iter_ancestors(node):
            found = t.declared_method(selector)
            if found is not None:
                return found
        return None

    def class_initializer_of(self, node: TypeNode) -> MethodDescriptor | None:
        return self.lookup_method(node, CLASS_INITIALIZER)

    # ============================================================
    # Fields
    # ============================================================

    def declared_instance_fields(self, node: TypeNode) -> frozenset[FieldDescriptor]:
        return node.members.instance_fields()

    def declared_static_fields(self, node: TypeNode) -> frozenset[FieldDescriptor]:
        return node.members.static_fields()

    def all_instance_fields(self, node: TypeNode) -> frozenset[FieldDescriptor]:
        return self._cached(
            node,
            QueryKind.ALL_INSTANCE_FIELDS,
            lambda: self._union_over_chain(node, self.declared_instance_fields),
        )

    def all_static_fields(self, node: TypeNode) -> frozenset[FieldDescriptor]:
        return self._cached(
            node,
            QueryKind.ALL_STATIC_FIELDS,
            lambda: self._union_over_chain(node, self.declared_static_fields),
        )

    def all_fields(self, node: TypeNode) -> frozenset[FieldDescriptor]:
        return self._cached(
            node,
            QueryKind.ALL_FIELDS,
            lambda: self.all_instance_fields(node) | self.all_static_fields(node),
        )

    # ============================================================
    # Methods
    # ============================================================

    def all_methods(self, node: TypeNode) -> frozenset[MethodDescriptor]:
        """
        Raw union of declared methods over the superclass chain.

        An overriding and an overridden method are distinct descriptors
        (different declaring types), so both appear. Use visible_methods()
        for the override view.
        """
        return self._cached(
            node,
            QueryKind.ALL_METHODS,
            lambda: self._union_over_chain(node, TypeNode.declared_methods),
        )

    def visible_methods(self, node: TypeNode) -> frozenset[MethodDescriptor]:
        """One method per selector, the nearest declaration winning."""

        def compute() -> frozenset[MethodDescriptor]:
            by_selector: dict[Selector, MethodDescriptor] = {}
            for t in self.iter_ancestors(node):
                for m in t.declared_methods():
                    by_selector.setdefault(m.selector, m)
            return frozenset(by_selector.values())

        return self._cached(node, QueryKind.VISIBLE_METHODS, compute)

    # ============================================================
    # Helpers
    # ============================================================

    def _union_over_chain(
        self,
        node: TypeNode,
        declared: Callable[[TypeNode], frozenset[T]],
    ) -> frozenset[T]:
        result: set[T] = set()
        for t in self.iter_ancestors(node):
            result.update(declared(t))
        return frozenset(result)

    def _cached(
        self,
        node: TypeNode,
        kind: QueryKind,
        compute: Callable[[], frozenset[T]],
    ) -> frozenset[T]:
        # Entries live only in the cache of the node's own namespace
        if self._cache is None or getattr(node.loader, "cache", None) is not self._cache:
            return compute()
        reference = node.reference
        hit = self._cache.get(reference, kind)
        if hit is not None:
            return hit
        value = compute()
        self._cache.put(reference, kind, value)
        return value
