"""
Type Namespace

Loading namespace that owns type nodes: an arena addressed by stable
indices, name lookup, and the memoization cache scoped to its lifetime.

Usage:
    ns = TypeNamespace("Application")
    root = ns.define("LRoot", fields=[field("count", "I")])
    leaf = ns.define("LLeaf", superclass="LRoot", methods=[method("tick()V")])
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple

from codegraph_hierarchy.common.observability import get_logger

from ..domain.member_table import MemberTable
from ..domain.models import (
    FieldDescriptor,
    MethodDescriptor,
    Modifier,
    Selector,
    SourcePosition,
    TypeOrigin,
    TypeReference,
)
from ..domain.type_node import TypeNode
from ..exceptions import DuplicateTypeError, ForeignMemberError, UnknownTypeError
from .ancestry import DeclaredAncestry, SyntheticAncestry
from .cache import HierarchyCache

logger = get_logger(__name__)


# ============================================================
# Member specs (bound to the declaring type by define())
# ============================================================


class FieldSpec(NamedTuple):
    name: str
    type_name: str = "Ljava/lang/Object;"
    modifiers: int = Modifier.NONE


class MethodSpec(NamedTuple):
    selector: Selector
    modifiers: int = Modifier.NONE


def field(name: str, type_name: str = "Ljava/lang/Object;", modifiers: int = Modifier.NONE) -> FieldSpec:
    """Field declaration for TypeNamespace.define()."""
    return FieldSpec(name, type_name, modifiers)


def method(selector: str | Selector, modifiers: int = Modifier.NONE) -> MethodSpec:
    """Method declaration for TypeNamespace.define(); accepts "name(args)ret"."""
    if isinstance(selector, str):
        selector = Selector.parse(selector)
    return MethodSpec(selector, modifiers)


FieldLike = FieldSpec | FieldDescriptor | str
MethodLike = MethodSpec | MethodDescriptor | Selector | str


def _bind_field(spec: FieldLike, owner: TypeReference) -> FieldDescriptor:
    if isinstance(spec, FieldDescriptor):
        if spec.declaring_type != owner:
            raise ForeignMemberError(spec.name, str(spec.declaring_type), str(owner))
        return spec
    if isinstance(spec, str):
        spec = FieldSpec(spec)
    return FieldDescriptor(spec.name, owner, spec.type_name, spec.modifiers)


def _bind_method(spec: MethodLike, owner: TypeReference) -> MethodDescriptor:
    if isinstance(spec, MethodDescriptor):
        if spec.declaring_type != owner:
            raise ForeignMemberError(str(spec.selector), str(spec.declaring_type), str(owner))
        return spec
    if isinstance(spec, (str, Selector)):
        spec = method(spec)
    return MethodDescriptor(spec.selector, owner, spec.modifiers)


# ============================================================
# Namespace
# ============================================================


class TypeNamespace:
    """
    Arena of type nodes for one loader.

    Nodes get a stable index in definition order. Superclass and interface
    names given to define() are resolved lazily, so types may be defined in
    any order.
    """

    def __init__(self, reference: str):
        self._reference = reference
        self._nodes: list[TypeNode] = []
        self._indices: dict[str, int] = {}
        self.cache = HierarchyCache()

    @property
    def reference(self) -> str:
        return self._reference

    # ------------------------------------------------------------
    # Definition
    # ------------------------------------------------------------

    def define(
        self,
        name: str,
        *,
        modifiers: int = Modifier.PUBLIC,
        fields: Iterable[FieldLike] = (),
        methods: Iterable[MethodLike] = (),
        superclass: str | None = None,
        interfaces: Iterable[str] = (),
        position: SourcePosition | None = None,
        origin: TypeOrigin = TypeOrigin.SOURCE,
    ) -> TypeNode:
        """Define a type whose ancestors are named declarations."""
        ancestry = DeclaredAncestry(self, superclass, interfaces)
        return self._register(name, modifiers, fields, methods, ancestry, position, origin)

    def define_synthetic(
        self,
        name: str,
        *,
        modifiers: int = Modifier.PUBLIC,
        fields: Iterable[FieldLike] = (),
        methods: Iterable[MethodLike] = (),
        superclass: TypeNode | None = None,
        interfaces: Iterable[TypeNode] = (),
        position: SourcePosition | None = None,
    ) -> TypeNode:
        """Define a type whose ancestors are already-built nodes."""
        ancestry = SyntheticAncestry(superclass, interfaces)
        return self._register(name, modifiers, fields, methods, ancestry, position, TypeOrigin.SYNTHETIC)

    def _register(
        self,
        name: str,
        modifiers: int,
        fields: Iterable[FieldLike],
        methods: Iterable[MethodLike],
        ancestry: DeclaredAncestry | SyntheticAncestry,
        position: SourcePosition | None,
        origin: TypeOrigin,
    ) -> TypeNode:
        if name in self._indices:
            raise DuplicateTypeError(name, self._reference)

        owner = TypeReference(self._reference, name)
        members = MemberTable(
            fields=[_bind_field(f, owner) for f in fields],
            methods=[_bind_method(m, owner) for m in methods],
        )
        node = TypeNode(name, self, modifiers, members, ancestry, position, origin)

        self._indices[name] = len(self._nodes)
        self._nodes.append(node)
        logger.debug(
            "type_defined",
            namespace=self._reference,
            type=name,
            index=self._indices[name],
            origin=origin.value,
        )
        return node

    # ------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------

    def lookup(self, name: str) -> TypeNode | None:
        idx = self._indices.get(name)
        return self._nodes[idx] if idx is not None else None

    def get(self, name: str) -> TypeNode:
        node = self.lookup(name)
        if node is None:
            raise UnknownTypeError(name, self._reference)
        return node

    def node_at(self, index: int) -> TypeNode:
        return self._nodes[index]

    def index_of(self, node: TypeNode) -> int:
        idx = self._indices.get(node.name)
        if idx is None or node.loader is not self:
            raise UnknownTypeError(node.name, self._reference)
        return idx

    def __contains__(self, name: object) -> bool:
        return name in self._indices

    def __iter__(self) -> Iterator[TypeNode]:
        return iter(list(self._nodes))

    def __len__(self) -> int:
        return len(self._nodes)

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------

    def teardown(self) -> None:
        """Drop all types and cached query results."""
        logger.debug("namespace_teardown", namespace=self._reference, types=len(self._nodes))
        self.cache.clear()
        self._nodes.clear()
        self._indices.clear()

    def __repr__(self) -> str:
        return f"TypeNamespace({self._reference!r}, types={len(self._nodes)})"
