"""
Member Table

A type's own declared fields and methods, independent of inheritance.
Built once; read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from ..exceptions import DuplicateMemberError
from .models import FieldDescriptor, MethodDescriptor, Selector


class MemberTable:
    """
    Field name → FieldDescriptor, Selector → MethodDescriptor.

    Duplicate names/selectors are rejected at construction.
    """

    __slots__ = ("_fields", "_methods")

    def __init__(
        self,
        fields: Iterable[FieldDescriptor] = (),
        methods: Iterable[MethodDescriptor] = (),
    ):
        field_map: dict[str, FieldDescriptor] = {}
        for f in fields:
            if f.name in field_map:
                raise DuplicateMemberError(f.name, "field", f.declaring_type.name)
            field_map[f.name] = f

        method_map: dict[Selector, MethodDescriptor] = {}
        for m in methods:
            if m.selector in method_map:
                raise DuplicateMemberError(str(m.selector), "method", m.declaring_type.name)
            method_map[m.selector] = m

        self._fields = MappingProxyType(field_map)
        self._methods = MappingProxyType(method_map)

    # ------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------

    def field_named(self, name: str) -> FieldDescriptor | None:
        return self._fields.get(name)

    def method_for(self, selector: Selector) -> MethodDescriptor | None:
        return self._methods.get(selector)

    def declares_field(self, name: str) -> bool:
        return name in self._fields

    def declares_method(self, selector: Selector) -> bool:
        return selector in self._methods

    # ------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------

    def all_fields(self) -> frozenset[FieldDescriptor]:
        return frozenset(self._fields.values())

    def instance_fields(self) -> frozenset[FieldDescriptor]:
        return frozenset(f for f in self._fields.values() if not f.is_static)

    def static_fields(self) -> frozenset[FieldDescriptor]:
        return frozenset(f for f in self._fields.values() if f.is_static)

    def declared_methods(self) -> frozenset[MethodDescriptor]:
        return frozenset(self._methods.values())

    @property
    def field_names(self) -> list[str]:
        """Declared field names in declaration order"""
        return list(self._fields)

    @property
    def selectors(self) -> list[Selector]:
        """Declared method selectors in declaration order"""
        return list(self._methods)

    def __len__(self) -> int:
        return len(self._fields) + len(self._methods)

    def __repr__(self) -> str:
        return f"MemberTable(fields={len(self._fields)}, methods={len(self._methods)})"
