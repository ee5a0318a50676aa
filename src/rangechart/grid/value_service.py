"""Resolves cell values from row data."""

from collections.abc import Mapping
from typing import Any

from ..models.column import Column
from ..models.row import RowNode


def get_value_by_path(data: Any, path: str) -> Any:
    """Follow a dotted path through mappings and object attributes.

    Returns None as soon as a segment is missing.
    """
    current = data
    for part in path.split("."):
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(part)
        else:
            current = getattr(current, part, None)
    return current


class ValueService:
    """Gets the value of a column for a row node."""

    def __init__(self, suppress_field_dot_notation: bool = False):
        """Initialize the service.

        Args:
            suppress_field_dot_notation: Treat dots in fields as part of the key
        """
        self.suppress_field_dot_notation = suppress_field_dot_notation

    def get_value(self, column: Column, row_node: RowNode | None) -> Any:
        if row_node is None:
            return None

        col_def = column.col_def
        if col_def.value_getter is not None:
            return col_def.value_getter(row_node, column)

        if col_def.field is None or row_node.data is None:
            return None

        if self.suppress_field_dot_notation or "." not in col_def.field:
            data = row_node.data
            if isinstance(data, Mapping):
                return data.get(col_def.field)
            return getattr(data, col_def.field, None)

        return get_value_by_path(row_node.data, col_def.field)
