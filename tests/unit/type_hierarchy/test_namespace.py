"""
Type Namespace Tests

Arena indices, lookup, member binding and teardown.
"""

import pytest

from codegraph_hierarchy.type_hierarchy.application.hierarchy_resolver import HierarchyResolver
from codegraph_hierarchy.type_hierarchy.domain.models import (
    FieldDescriptor,
    MethodDescriptor,
    Modifier,
    Selector,
    TypeReference,
)
from codegraph_hierarchy.type_hierarchy.exceptions import (
    DuplicateMemberError,
    DuplicateTypeError,
    ForeignMemberError,
    UnknownTypeError,
)
from codegraph_hierarchy.type_hierarchy.infrastructure.namespace import TypeNamespace, field, method


class TestArena:
    def test_stable_indices_in_definition_order(self, scenario):
        assert [scenario.index_of(n) for n in scenario] == [0, 1, 2]
        assert scenario.node_at(1).name == "LMid"

    def test_index_survives_later_definitions(self, scenario):
        idx = scenario.index_of(scenario.get("LMid"))

        scenario.define("LOther")

        assert scenario.node_at(idx).name == "LMid"

    def test_index_of_foreign_node(self, namespace):
        foreign = TypeNamespace("Other").define("LFoo")
        namespace.define("LFoo")

        with pytest.raises(UnknownTypeError):
            namespace.index_of(foreign)

    def test_contains_and_len(self, scenario):
        assert "LLeaf" in scenario
        assert "LNope" not in scenario
        assert len(scenario) == 3


class TestLookup:
    def test_lookup_missing_is_none(self, namespace):
        assert namespace.lookup("LNope") is None

    def test_get_missing_raises(self, namespace):
        with pytest.raises(UnknownTypeError) as exc_info:
            namespace.get("LNope")

        assert exc_info.value.namespace == "Application"

    def test_duplicate_type_rejected(self, namespace):
        namespace.define("LFoo")

        with pytest.raises(DuplicateTypeError):
            namespace.define("LFoo")

    def test_forward_reference(self, namespace, resolver):
        """Superclass may be defined after the subclass"""
        namespace.define("LSub", superclass="LBase")
        namespace.define("LBase")

        assert resolver.superclass_of(namespace.get("LSub")).name == "LBase"


class TestMemberBinding:
    def test_shorthand_strings(self, namespace):
        node = namespace.define("LFoo", fields=["x"], methods=["run()V"])

        x = node.declared_field("x")
        assert x.declaring_type == TypeReference("Application", "LFoo")
        assert not x.is_static
        assert node.declared_method(Selector("run", "()V")) is not None

    def test_specs(self, namespace):
        node = namespace.define(
            "LFoo",
            fields=[field("N", "I", Modifier.STATIC)],
            methods=[method("m(I)V", Modifier.ABSTRACT)],
        )

        assert node.declared_field("N").is_static
        assert node.declared_method(Selector("m", "(I)V")).is_abstract

    def test_descriptor_passthrough(self, namespace):
        owner = TypeReference("Application", "LFoo")
        descriptor = FieldDescriptor("x", owner, "I")

        node = namespace.define("LFoo", fields=[descriptor])

        assert node.declared_field("x") is descriptor

    def test_descriptor_from_other_type_rejected(self, namespace):
        """A descriptor declared by a supertype cannot be reused in a subtype's table."""
        namespace.define("LMid")
        inherited = MethodDescriptor(Selector.parse("tick()V"), TypeReference("Application", "LMid"))

        with pytest.raises(ForeignMemberError) as exc_info:
            namespace.define("LLeaf", superclass="LMid", methods=[inherited])

        assert exc_info.value.declaring_type == "<Application,LMid>"
        assert exc_info.value.owner == "<Application,LLeaf>"
        assert "LLeaf" not in namespace

    def test_field_descriptor_from_other_namespace_rejected(self, namespace):
        foreign = FieldDescriptor("x", TypeReference("Library", "LFoo"), "I")

        with pytest.raises(ForeignMemberError):
            namespace.define("LFoo", fields=[foreign])

        assert "LFoo" not in namespace

    def test_duplicate_member_leaves_namespace_unchanged(self, namespace):
        with pytest.raises(DuplicateMemberError):
            namespace.define("LFoo", fields=["x", "x"])

        assert "LFoo" not in namespace


class TestTeardown:
    def test_teardown_clears_types_and_cache(self, scenario):
        resolver = HierarchyResolver.for_namespace(scenario)
        resolver.all_fields(scenario.get("LLeaf"))
        assert len(scenario.cache) > 0

        scenario.teardown()

        assert len(scenario) == 0
        assert len(scenario.cache) == 0
        assert scenario.lookup("LLeaf") is None
