"""Tests for the in-memory row model."""

import pytest

from rangechart.grid import RowModel


@pytest.fixture
def row_model() -> RowModel:
    return RowModel([{"n": 3}, {"n": 1}, {"n": 4}, {"n": 1}, {"n": 5}])


class TestRowModel:
    """Test RowModel."""

    def test_rows(self, row_model):
        """Test rows are exposed by displayed index."""
        assert row_model.get_row_count() == 5
        assert row_model.get_row(2).data == {"n": 4}
        assert row_model.get_row(2).row_index == 2

    def test_out_of_bounds(self, row_model):
        """Test out of range indices return None."""
        assert row_model.get_row(5) is None
        assert row_model.get_row(-1) is None

    def test_filter_shrinks_rows(self, row_model):
        """Test filtering reduces the row count and renumbers rows."""
        row_model.set_filter(lambda data: data["n"] > 2)

        assert row_model.get_row_count() == 3
        assert [row_model.get_row(i).data["n"] for i in range(3)] == [3, 4, 5]
        assert row_model.get_row_node("1").row_index is None

        row_model.set_filter(None)

        assert row_model.get_row_count() == 5

    def test_sort(self, row_model):
        """Test sorting reorders the displayed rows."""
        row_model.set_sort(lambda data: data["n"], reverse=True)

        assert [row_model.get_row(i).data["n"] for i in range(5)] == [5, 4, 3, 1, 1]

    def test_set_row_data(self, row_model):
        """Test replacing the row data."""
        row_model.set_row_data([{"n": 0}])

        assert row_model.get_row_count() == 1
        assert row_model.get_row_node("0").data == {"n": 0}
        assert row_model.get_row_node("4") is None
