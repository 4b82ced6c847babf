"""
Structured Logging with structlog

Modules obtain loggers here and emit structured events; rendering and
routing are left to whatever structlog configuration the host installs.
"""

import structlog


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Example:
        ```python
        logger = get_logger(__name__)
        logger.debug("type_defined", type="Lcom/example/Leaf", index=3)
        ```
    """
    return structlog.get_logger(name)
