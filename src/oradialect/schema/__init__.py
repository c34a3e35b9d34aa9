"""
Schema generation and inspection.
"""

from .builder import SchemaBuilder
from .inspector import SchemaInspector

__all__ = ["SchemaBuilder", "SchemaInspector"]
