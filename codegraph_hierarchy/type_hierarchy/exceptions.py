"""
Exceptions for type hierarchy resolution.

Hierarchy:
- TypeHierarchyError (base)
  - HierarchyResolutionError (superclass/interfaces could not be determined)
    - HierarchyCycleError
    - HierarchyDepthExceededError
  - DefinitionError (invalid type construction)
    - DuplicateMemberError
    - DuplicateTypeError
    - ForeignMemberError
  - UnknownTypeError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .domain.type_node import TypeNode


class TypeHierarchyError(Exception):
    """Base exception for all type hierarchy errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{super().__str__()} [{ctx_str}]"
        return super().__str__()


# ============================================================================
# Resolution Errors
# ============================================================================


class HierarchyResolutionError(TypeHierarchyError):
    """
    The superclass or direct interfaces of a type could not be determined.

    Raised by ancestry backings (e.g. an ancestor missing from the namespace)
    and propagated unmodified by every resolver query.
    """

    def __init__(
        self,
        message: str,
        type_node: TypeNode | None = None,
        missing: str | None = None,
        context: dict | None = None,
    ):
        context = dict(context or {})
        if type_node is not None:
            context["type"] = type_node.name
        if missing:
            context["missing"] = missing
        super().__init__(message, context)
        self.type_node = type_node
        self.missing = missing


class HierarchyCycleError(HierarchyResolutionError):
    """A type is transitively its own superclass."""

    def __init__(self, type_node: TypeNode, cycle: list[str]):
        super().__init__(
            "cycle in superclass chain: " + " -> ".join(cycle),
            type_node=type_node,
        )
        self.cycle = cycle


class HierarchyDepthExceededError(HierarchyResolutionError):
    """Superclass chain is longer than the configured limit."""

    def __init__(self, type_node: TypeNode, limit: int):
        super().__init__(
            f"superclass chain exceeds {limit} types",
            type_node=type_node,
            context={"limit": limit},
        )
        self.limit = limit


# ============================================================================
# Definition Errors
# ============================================================================


class DefinitionError(TypeHierarchyError):
    """Invalid type or member table construction."""

    pass


class DuplicateMemberError(DefinitionError):
    """Two members of one table share a field name or method selector."""

    def __init__(self, member: str, kind: str, declaring_type: str | None = None):
        context = {"kind": kind}
        if declaring_type:
            context["declaring_type"] = declaring_type
        super().__init__(f"duplicate {kind} '{member}'", context)
        self.member = member
        self.kind = kind


class ForeignMemberError(DefinitionError):
    """A member descriptor names a declaring type other than the one being defined."""

    def __init__(self, member: str, declaring_type: str, owner: str):
        super().__init__(
            f"member '{member}' is declared by '{declaring_type}', not '{owner}'",
            {"declaring_type": declaring_type, "owner": owner},
        )
        self.member = member
        self.declaring_type = declaring_type
        self.owner = owner


class DuplicateTypeError(DefinitionError):
    """A namespace already holds a type with the same name."""

    def __init__(self, name: str, namespace: str):
        super().__init__(
            f"type '{name}' is already defined",
            {"namespace": namespace},
        )
        self.name = name
        self.namespace = namespace


class UnknownTypeError(TypeHierarchyError):
    """A namespace lookup named a type that was never defined."""

    def __init__(self, name: str, namespace: str):
        super().__init__(f"type '{name}' is not defined", {"namespace": namespace})
        self.name = name
        self.namespace = namespace
