"""Type Hierarchy Application"""

from .hierarchy_resolver import HierarchyResolver

__all__ = ["HierarchyResolver"]
