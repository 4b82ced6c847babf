"""
Centralized configuration for type hierarchy resolution

Usage:
    from codegraph_hierarchy.type_hierarchy.infrastructure.config import get_config

    resolver = HierarchyResolver(config=get_config())

    # Override for a specific use case
    custom = HierarchyConfig(resolution=ResolutionConfig(max_hierarchy_depth=64))
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResolutionConfig(BaseModel):
    """Configuration for ancestor walks."""

    max_hierarchy_depth: int = Field(default=4096, ge=1, le=1_000_000)
    """Maximum superclass chain length before the walk is rejected"""


class CacheConfig(BaseModel):
    """Configuration for namespace-scoped memoization."""

    enable_cache: bool = Field(default=True)
    """Memoize aggregate queries per (type, query kind)"""


class HierarchyConfig(BaseSettings):
    """
    Root configuration for type hierarchy resolution.

    Can be configured via:
    - Environment variables (prefixed with TH_)
    - Direct instantiation

    Examples:
        TH_RESOLUTION__MAX_HIERARCHY_DEPTH=128
        TH_CACHE__ENABLE_CACHE=false
    """

    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)

    model_config = SettingsConfigDict(
        env_prefix="TH_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_config() -> HierarchyConfig:
    """
    Get the global configuration instance.

    To reload, call get_config.cache_clear() first.
    """
    return HierarchyConfig()
