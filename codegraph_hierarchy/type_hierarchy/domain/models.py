"""
Type Hierarchy Domain Models

Identity, modifiers, provenance and member descriptors shared by type nodes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from urllib.parse import urlparse


# ============================================================
# Enums
# ============================================================


class Modifier(IntFlag):
    """Access flags (JVM class file values)"""

    NONE = 0x0000
    PUBLIC = 0x0001
    PRIVATE = 0x0002
    PROTECTED = 0x0004
    STATIC = 0x0008
    FINAL = 0x0010
    INTERFACE = 0x0200
    ABSTRACT = 0x0400


class TypeOrigin(str, Enum):
    """How a type node was produced"""

    SOURCE = "source"  # Parsed from source code
    BINARY = "binary"  # Loaded from a compiled artifact
    SYNTHETIC = "synthetic"  # Built by an analysis


class QueryKind(str, Enum):
    """Aggregate hierarchy queries (cache keys)"""

    ALL_INTERFACES = "all_interfaces"
    ALL_INSTANCE_FIELDS = "all_instance_fields"
    ALL_STATIC_FIELDS = "all_static_fields"
    ALL_FIELDS = "all_fields"
    ALL_METHODS = "all_methods"
    VISIBLE_METHODS = "visible_methods"


# ============================================================
# Identity & Provenance
# ============================================================


@dataclass(frozen=True)
class TypeReference:
    """Namespace-qualified type identity"""

    namespace: str  # Loader/namespace reference
    name: str  # Qualified type name, e.g. "Lcom/example/Leaf"

    def __str__(self) -> str:
        return f"<{self.namespace},{self.name}>"


@dataclass(frozen=True)
class SourcePosition:
    """Opaque provenance handle (informational only)"""

    url: str
    first_line: int = -1
    first_col: int = -1
    last_line: int = -1
    last_col: int = -1

    @property
    def file_name(self) -> str:
        """Path component of the URL"""
        return urlparse(self.url).path or self.url

    def __str__(self) -> str:
        if self.first_line < 0:
            return self.url
        return f"{self.url}:{self.first_line}:{self.first_col}"


# ============================================================
# Members
# ============================================================


@dataclass(frozen=True)
class Selector:
    """
    Method signature: name plus descriptor.

    Overriding is decided by selector equality.
    """

    name: str
    descriptor: str = "()V"

    @classmethod
    def parse(cls, text: str) -> Selector:
        """Parse "name(args)ret" into a selector."""
        idx = text.find("(")
        if idx <= 0:
            raise ValueError(f"malformed selector: {text!r}")
        return cls(text[:idx], text[idx:])

    def __str__(self) -> str:
        return self.name + self.descriptor


CLASS_INITIALIZER = Selector("<clinit>", "()V")


@dataclass(frozen=True)
class FieldDescriptor:
    """Field declared by a type"""

    name: str
    declaring_type: TypeReference
    type_name: str = "Ljava/lang/Object;"
    modifiers: int = Modifier.NONE

    @property
    def is_static(self) -> bool:
        return bool(self.modifiers & Modifier.STATIC)

    def __str__(self) -> str:
        return f"{self.declaring_type.name}.{self.name}"


@dataclass(frozen=True)
class MethodDescriptor:
    """Method declared by a type"""

    selector: Selector
    declaring_type: TypeReference
    modifiers: int = Modifier.NONE

    @property
    def name(self) -> str:
        return self.selector.name

    @property
    def is_static(self) -> bool:
        return bool(self.modifiers & Modifier.STATIC)

    @property
    def is_abstract(self) -> bool:
        return bool(self.modifiers & Modifier.ABSTRACT)

    @property
    def is_class_initializer(self) -> bool:
        return self.selector == CLASS_INITIALIZER

    def __str__(self) -> str:
        return f"{self.declaring_type.name}.{self.selector}"
