"""
Type Hierarchy Domain Ports

Capabilities a type node consumes from its owning loader.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .type_node import TypeNode


class AncestrySource(Protocol):
    """
    Superclass / direct interface capability of a type node.

    Both calls raise HierarchyResolutionError when the answer cannot be
    determined (e.g. the ancestor is missing from the closed world).
    """

    def resolve_superclass(self, node: TypeNode) -> TypeNode | None:
        """Superclass of node, None only for a hierarchy root"""
        ...

    def resolve_direct_interfaces(self, node: TypeNode) -> frozenset[TypeNode]:
        """Interfaces node declares directly"""
        ...


class TypeLoaderPort(Protocol):
    """Loading namespace that owns type nodes"""

    @property
    def reference(self) -> str:
        """Namespace identity used in TypeReference"""
        ...

    def lookup(self, name: str) -> TypeNode | None:
        """Type defined under name, or None"""
        ...
