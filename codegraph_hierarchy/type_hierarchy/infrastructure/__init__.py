"""Type Hierarchy Infrastructure"""

from .ancestry import DeclaredAncestry, SyntheticAncestry
from .cache import HierarchyCache
from .config import CacheConfig, HierarchyConfig, ResolutionConfig, get_config
from .namespace import FieldSpec, MethodSpec, TypeNamespace, field, method

__all__ = [
    # Ancestry backings
    "DeclaredAncestry",
    "SyntheticAncestry",
    # Namespace
    "FieldSpec",
    "MethodSpec",
    "TypeNamespace",
    "field",
    "method",
    # Cache
    "HierarchyCache",
    # Config
    "CacheConfig",
    "HierarchyConfig",
    "ResolutionConfig",
    "get_config",
]
