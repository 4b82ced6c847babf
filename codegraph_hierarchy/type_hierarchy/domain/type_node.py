"""
Type Node

Resolved representation of one class or interface: identity, modifiers,
provenance and declared members. Ancestors are obtained through the
AncestrySource supplied by the loader that built the node.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import (
    FieldDescriptor,
    MethodDescriptor,
    Modifier,
    Selector,
    SourcePosition,
    TypeOrigin,
    TypeReference,
)

if TYPE_CHECKING:
    from .member_table import MemberTable
    from .ports import AncestrySource, TypeLoaderPort


class TypeNode:
    """
    User-defined class or interface.

    Immutable after construction. Equality and hashing use `reference`,
    so nodes deduplicate by identity in sets.
    """

    __slots__ = ("_name", "_loader", "_modifiers", "_members", "_ancestry", "_position", "_origin")

    def __init__(
        self,
        name: str,
        loader: TypeLoaderPort,
        modifiers: int,
        members: MemberTable,
        ancestry: AncestrySource,
        position: SourcePosition | None = None,
        origin: TypeOrigin = TypeOrigin.SOURCE,
    ):
        self._name = name
        self._loader = loader
        self._modifiers = int(modifiers)
        self._members = members
        self._ancestry = ancestry
        self._position = position
        self._origin = origin

    # ------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def loader(self) -> TypeLoaderPort:
        return self._loader

    @property
    def reference(self) -> TypeReference:
        return TypeReference(self._loader.reference, self._name)

    @property
    def origin(self) -> TypeOrigin:
        return self._origin

    # ------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------

    @property
    def modifiers(self) -> int:
        return self._modifiers

    @property
    def is_interface(self) -> bool:
        return bool(self._modifiers & Modifier.INTERFACE)

    @property
    def is_abstract(self) -> bool:
        return bool(self._modifiers & Modifier.ABSTRACT)

    @property
    def is_public(self) -> bool:
        return bool(self._modifiers & Modifier.PUBLIC)

    @property
    def is_static(self) -> bool:
        return bool(self._modifiers & Modifier.STATIC)

    @property
    def is_reference_type(self) -> bool:
        return True

    @property
    def is_array_class(self) -> bool:
        return False

    # ------------------------------------------------------------
    # Provenance
    # ------------------------------------------------------------

    @property
    def source_position(self) -> SourcePosition | None:
        return self._position

    @property
    def source_url(self) -> str | None:
        return self._position.url if self._position else None

    @property
    def source_file_name(self) -> str | None:
        return self._position.file_name if self._position else None

    # ------------------------------------------------------------
    # Declared members
    # ------------------------------------------------------------

    @property
    def members(self) -> MemberTable:
        return self._members

    def declared_field(self, name: str) -> FieldDescriptor | None:
        return self._members.field_named(name)

    def declared_method(self, selector: Selector) -> MethodDescriptor | None:
        return self._members.method_for(selector)

    def declared_methods(self) -> frozenset[MethodDescriptor]:
        return self._members.declared_methods()

    # ------------------------------------------------------------
    # Ancestry (may raise HierarchyResolutionError)
    # ------------------------------------------------------------

    def resolve_superclass(self) -> TypeNode | None:
        return self._ancestry.resolve_superclass(self)

    def resolve_direct_interfaces(self) -> frozenset[TypeNode]:
        return self._ancestry.resolve_direct_interfaces(self)

    # ------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeNode):
            return NotImplemented
        return self.reference == other.reference

    def __hash__(self) -> int:
        return hash(self.reference)

    def __repr__(self) -> str:
        return f"TypeNode({self.reference}, origin={self._origin.value})"
