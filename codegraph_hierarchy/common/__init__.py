"""Cross-cutting utilities (logging)."""

from .observability import get_logger

__all__ = ["get_logger"]
