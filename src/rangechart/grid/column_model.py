"""In-memory column model."""

import logging
import re
from collections.abc import Iterable

from ..core.exceptions import ColumnNotFoundError
from ..models.column import Column, ColumnDef

logger = logging.getLogger(__name__)

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|[_\-\s]+")


def to_human_text(name: str | None) -> str | None:
    """Turn a camelCase or snake_case field name into header text.

    Examples:
        >>> to_human_text("totalSales")
        'Total Sales'
        >>> to_human_text("unit_price")
        'Unit Price'
    """
    if not name:
        return None
    # Dotted fields keep only their last segment
    words = [word for word in _WORD_BOUNDARY.split(name.split(".")[-1]) if word]
    return " ".join(word[0].upper() + word[1:] for word in words)


class ColumnModel:
    """Ordered grid columns with visibility."""

    def __init__(self, column_defs: Iterable[ColumnDef] = ()):
        self._columns: list[Column] = [Column(col_def) for col_def in column_defs]
        ids = [col.get_id() for col in self._columns]
        if len(ids) != len(set(ids)):
            logger.warning(f"Duplicate column ids in column definitions: {ids}")

    def get_all_columns(self) -> list[Column]:
        return list(self._columns)

    def get_all_displayed_columns(self) -> list[Column]:
        """Visible columns in display order."""
        return [col for col in self._columns if col.visible]

    def get_column(self, col_id: str) -> Column:
        for col in self._columns:
            if col.get_id() == col_id:
                return col
        raise ColumnNotFoundError(col_id)

    def set_column_visible(self, col_id: str, visible: bool) -> None:
        self.get_column(col_id).visible = visible

    def move_column(self, col_id: str, to_index: int) -> None:
        """Move a column to a new position in the display order."""
        column = self.get_column(col_id)
        self._columns.remove(column)
        self._columns.insert(to_index, column)

    def get_display_name_for_column(self, column: Column, location: str) -> str | None:
        """Get the header text for a column.

        Resolution order is the header value getter, then the header name, then
        the field converted to human readable text.
        """
        col_def = column.col_def
        if col_def.header_value_getter is not None:
            return col_def.header_value_getter(column, location)
        if col_def.header_name is not None:
            return col_def.header_name
        return to_human_text(col_def.field)
