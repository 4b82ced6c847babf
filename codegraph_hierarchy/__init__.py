"""
Codegraph Hierarchy

Type nodes and hierarchy queries (interfaces, fields, methods, overrides)
for static program representations.
"""

__version__ = "0.1.0"
