"""Type Hierarchy Domain"""

from .member_table import MemberTable
from .models import (
    CLASS_INITIALIZER,
    FieldDescriptor,
    MethodDescriptor,
    Modifier,
    QueryKind,
    Selector,
    SourcePosition,
    TypeOrigin,
    TypeReference,
)
from .ports import AncestrySource, TypeLoaderPort
from .type_node import TypeNode

__all__ = [
    # Models
    "CLASS_INITIALIZER",
    "FieldDescriptor",
    "MethodDescriptor",
    "Modifier",
    "QueryKind",
    "Selector",
    "SourcePosition",
    "TypeOrigin",
    "TypeReference",
    # Entities
    "MemberTable",
    "TypeNode",
    # Ports
    "AncestrySource",
    "TypeLoaderPort",
]
