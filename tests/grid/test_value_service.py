"""Tests for value resolution."""

from types import SimpleNamespace

from rangechart.grid import ValueService, get_value_by_path
from rangechart.models import Column, ColumnDef, RowNode


def node(data) -> RowNode:
    return RowNode(id="0", row_index=0, data=data)


class TestValueService:
    """Test ValueService."""

    def test_field_from_mapping(self):
        """Test plain fields are read from dict rows."""
        column = Column(ColumnDef(field="sales"))

        assert ValueService().get_value(column, node({"sales": 10})) == 10

    def test_field_from_object(self):
        """Test plain fields are read from object attributes."""
        column = Column(ColumnDef(field="sales"))

        assert ValueService().get_value(column, node(SimpleNamespace(sales=7))) == 7

    def test_dotted_field(self):
        """Test dotted fields walk nested data."""
        column = Column(ColumnDef(field="address.city"))
        data = {"address": {"city": "Leeds"}}

        assert ValueService().get_value(column, node(data)) == "Leeds"

    def test_suppressed_dot_notation(self):
        """Test dots can be treated as part of the key."""
        column = Column(ColumnDef(field="address.city"))
        data = {"address.city": "York", "address": {"city": "Leeds"}}

        service = ValueService(suppress_field_dot_notation=True)

        assert service.get_value(column, node(data)) == "York"

    def test_value_getter(self):
        """Test value getters take precedence over the field."""
        column = Column(
            ColumnDef(field="sales", value_getter=lambda row, col: row.data["sales"] * 2)
        )

        assert ValueService().get_value(column, node({"sales": 4})) == 8

    def test_missing_values(self):
        """Test missing rows, data and fields resolve to None."""
        column = Column(ColumnDef(field="sales"))
        no_field = Column(ColumnDef(col_id="x"))

        assert ValueService().get_value(column, None) is None
        assert ValueService().get_value(column, node(None)) is None
        assert ValueService().get_value(column, node({})) is None
        assert ValueService().get_value(no_field, node({"x": 1})) is None


class TestGetValueByPath:
    def test_missing_segment(self):
        assert get_value_by_path({"a": None}, "a.b.c") is None
        assert get_value_by_path({"a": SimpleNamespace(b=2)}, "a.b") == 2
