"""
Global test configuration and fixtures
"""

import pytest

from codegraph_hierarchy.type_hierarchy.infrastructure.config import get_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Each test sees configuration built from its own environment."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


# Pytest hooks
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (medium speed)")


def pytest_collection_modifyitems(config, items):
    """테스트 수집 후 처리"""
    for item in items:
        # 경로 기반 자동 마커 추가
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
