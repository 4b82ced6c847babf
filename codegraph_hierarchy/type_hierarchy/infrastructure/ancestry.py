"""
Ancestry backings for type nodes.

Closed set of AncestrySource implementations:
- DeclaredAncestry: ancestor names recorded by a source/binary loader,
  resolved against the owning namespace on demand
- SyntheticAncestry: direct references to nodes built by an analysis
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..exceptions import HierarchyResolutionError

if TYPE_CHECKING:
    from ..domain.ports import TypeLoaderPort
    from ..domain.type_node import TypeNode


class DeclaredAncestry:
    """Ancestors named in a declaration (extends/implements clauses)."""

    __slots__ = ("_loader", "superclass_name", "interface_names")

    def __init__(
        self,
        loader: TypeLoaderPort,
        superclass_name: str | None = None,
        interface_names: Iterable[str] = (),
    ):
        self._loader = loader
        self.superclass_name = superclass_name
        self.interface_names = tuple(interface_names)

    def resolve_superclass(self, node: TypeNode) -> TypeNode | None:
        if self.superclass_name is None:
            return None
        return self._resolve(node, self.superclass_name, "superclass")

    def resolve_direct_interfaces(self, node: TypeNode) -> frozenset[TypeNode]:
        return frozenset(self._resolve(node, name, "interface") for name in self.interface_names)

    def _resolve(self, node: TypeNode, name: str, role: str) -> TypeNode:
        target = self._loader.lookup(name)
        if target is None:
            raise HierarchyResolutionError(
                f"{role} '{name}' of '{node.name}' not found in namespace '{self._loader.reference}'",
                type_node=node,
                missing=name,
            )
        return target


class SyntheticAncestry:
    """Ancestors supplied as already-built nodes."""

    __slots__ = ("_superclass", "_interfaces")

    def __init__(
        self,
        superclass: TypeNode | None = None,
        interfaces: Iterable[TypeNode] = (),
    ):
        self._superclass = superclass
        self._interfaces = frozenset(interfaces)

    def resolve_superclass(self, node: TypeNode) -> TypeNode | None:
        return self._superclass

    def resolve_direct_interfaces(self, node: TypeNode) -> frozenset[TypeNode]:
        return self._interfaces
