"""
Type Node Tests

Identity, modifier predicates, provenance and ancestry delegation.
"""

import pytest

from codegraph_hierarchy.type_hierarchy.domain.models import (
    Modifier,
    SourcePosition,
    TypeOrigin,
    TypeReference,
)
from codegraph_hierarchy.type_hierarchy.infrastructure.namespace import TypeNamespace


class TestIdentity:
    def test_reference_combines_namespace_and_name(self, namespace):
        node = namespace.define("LFoo")

        assert node.reference == TypeReference("Application", "LFoo")
        assert node.loader is namespace

    def test_same_name_different_namespaces_differ(self):
        a = TypeNamespace("Primordial").define("LFoo")
        b = TypeNamespace("Application").define("LFoo")

        assert a != b
        assert len({a, b}) == 2

    def test_equal_by_reference(self, namespace):
        node = namespace.define("LFoo")

        assert node == namespace.get("LFoo")
        assert hash(node) == hash(namespace.get("LFoo"))


class TestModifiers:
    @pytest.mark.parametrize(
        "flags, interface, abstract, public, static",
        [
            (Modifier.PUBLIC, False, False, True, False),
            (Modifier.PUBLIC | Modifier.INTERFACE | Modifier.ABSTRACT, True, True, True, False),
            (Modifier.STATIC | Modifier.PRIVATE, False, False, False, True),
            (Modifier.NONE, False, False, False, False),
        ],
    )
    def test_predicates(self, namespace, flags, interface, abstract, public, static):
        node = namespace.define("LT", modifiers=flags)

        assert node.is_interface is interface
        assert node.is_abstract is abstract
        assert node.is_public is public
        assert node.is_static is static

    def test_raw_modifiers(self, namespace):
        node = namespace.define("LT", modifiers=0x0411)

        assert node.modifiers == 0x0411
        assert node.is_abstract
        assert node.is_public

    def test_reference_type_not_array(self, namespace):
        node = namespace.define("LT")

        assert node.is_reference_type
        assert not node.is_array_class


class TestProvenance:
    def test_position_accessors(self, namespace):
        pos = SourcePosition("file:///work/src/Leaf.java", 3, 0, 20, 1)
        node = namespace.define("LLeaf", position=pos)

        assert node.source_position is pos
        assert node.source_url == "file:///work/src/Leaf.java"
        assert node.source_file_name == "/work/src/Leaf.java"

    def test_plain_path_position(self):
        assert SourcePosition("src/Leaf.java").file_name == "src/Leaf.java"

    def test_no_position(self, namespace):
        node = namespace.define("LT")

        assert node.source_position is None
        assert node.source_url is None
        assert node.source_file_name is None

    def test_position_does_not_affect_identity(self, namespace):
        other = TypeNamespace("Application")
        a = namespace.define("LT", position=SourcePosition("a.java"))
        b = other.define("LT", position=SourcePosition("b.java"))

        assert a == b

    def test_origin(self, namespace):
        assert namespace.define("LSrc").origin is TypeOrigin.SOURCE
        assert namespace.define("LBin", origin=TypeOrigin.BINARY).origin is TypeOrigin.BINARY
        assert namespace.define_synthetic("LSyn").origin is TypeOrigin.SYNTHETIC


class TestAncestryDelegation:
    def test_resolve_superclass(self, scenario):
        leaf = scenario.get("LLeaf")

        assert leaf.resolve_superclass() == scenario.get("LMid")
        assert scenario.get("LRoot").resolve_superclass() is None

    def test_resolve_direct_interfaces(self, interface_scenario):
        mid = interface_scenario.get("LMid")

        assert mid.resolve_direct_interfaces() == frozenset({interface_scenario.get("LI2")})

    def test_declared_member_accessors(self, scenario):
        leaf = scenario.get("LLeaf")

        assert leaf.declared_field("name") is not None
        assert leaf.declared_field("count") is None
        assert len(leaf.declared_methods()) == 1
