"""
Type Hierarchy Bounded Context

Type nodes, loading namespaces and hierarchy resolution.

Note: Uses lazy imports to avoid circular import issues.
"""


def __getattr__(name: str):
    """Lazy import to avoid circular dependencies."""
    if name in ("MemberTable", "Modifier", "Selector", "TypeNode", "TypeReference"):
        from .domain import MemberTable, Modifier, Selector, TypeNode, TypeReference

        return locals()[name]

    if name in ("TypeNamespace", "field", "method"):
        from .infrastructure.namespace import TypeNamespace, field, method

        return locals()[name]

    if name == "HierarchyResolver":
        from .application.hierarchy_resolver import HierarchyResolver

        return HierarchyResolver

    if name in ("HierarchyResolutionError", "HierarchyCycleError"):
        from .exceptions import HierarchyCycleError, HierarchyResolutionError

        return locals()[name]

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "HierarchyCycleError",
    "HierarchyResolutionError",
    "HierarchyResolver",
    "MemberTable",
    "Modifier",
    "Selector",
    "TypeNamespace",
    "TypeNode",
    "TypeReference",
    "field",
    "method",
]
