"""
Shared fixtures for type hierarchy tests

Scenario hierarchy:
    LRoot                     field count:I
      └─ LMid                 method tick()V
           └─ LLeaf           field name, method tick()V

Interface scenario: LMid implements LI2, LLeaf implements LI1.
"""

import pytest

from codegraph_hierarchy.type_hierarchy.application.hierarchy_resolver import HierarchyResolver
from codegraph_hierarchy.type_hierarchy.domain.models import Modifier
from codegraph_hierarchy.type_hierarchy.infrastructure.config import CacheConfig, HierarchyConfig
from codegraph_hierarchy.type_hierarchy.infrastructure.namespace import TypeNamespace, field, method


@pytest.fixture
def namespace() -> TypeNamespace:
    return TypeNamespace("Application")


@pytest.fixture
def scenario(namespace) -> TypeNamespace:
    """Root / Mid / Leaf, no interfaces"""
    namespace.define("LRoot", fields=[field("count", "I")])
    namespace.define("LMid", superclass="LRoot", methods=[method("tick()V")])
    namespace.define(
        "LLeaf",
        superclass="LMid",
        fields=[field("name", "Ljava/lang/String;")],
        methods=[method("tick()V")],
    )
    return namespace


@pytest.fixture
def interface_scenario(namespace) -> TypeNamespace:
    """Root / Mid implements I2 / Leaf implements I1"""
    iface = Modifier.PUBLIC | Modifier.INTERFACE | Modifier.ABSTRACT
    namespace.define("LI1", modifiers=iface)
    namespace.define("LI2", modifiers=iface)
    namespace.define("LRoot")
    namespace.define("LMid", superclass="LRoot", interfaces=["LI2"])
    namespace.define("LLeaf", superclass="LMid", interfaces=["LI1"])
    return namespace


@pytest.fixture
def uncached_config() -> HierarchyConfig:
    return HierarchyConfig(cache=CacheConfig(enable_cache=False))


@pytest.fixture
def resolver(namespace, uncached_config) -> HierarchyResolver:
    return HierarchyResolver.for_namespace(namespace, config=uncached_config)
