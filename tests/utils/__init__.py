"""Test utilities"""

from .document_helpers import dedent, definition_names, field_names, operation_types

__all__ = ["dedent", "definition_names", "field_names", "operation_types"]
